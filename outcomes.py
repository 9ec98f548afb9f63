"""
Handler outcomes and their JSON rendering.

Handlers return one of ``Ok``, ``NotFound`` or ``Invalid``; ``render`` turns
any of them into the ``{success, message, data}`` envelope.
"""
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from schemas import ApiResponse

INVALID_INPUT_MESSAGE = "Invalid input. Name and price are required."


def not_found_message(product_id: Any) -> str:
    return f"Product with ID {product_id} not found."


@dataclass(frozen=True)
class Ok:
    data: Any
    message: str
    status_code: int = 200


@dataclass(frozen=True)
class NotFound:
    message: str
    status_code: ClassVar[int] = 404


@dataclass(frozen=True)
class Invalid:
    message: str = INVALID_INPUT_MESSAGE
    status_code: ClassVar[int] = 400


Outcome = Union[Ok, NotFound, Invalid]


def render(outcome: Outcome) -> JSONResponse:
    if isinstance(outcome, Ok):
        envelope = ApiResponse(success=True, message=outcome.message, data=outcome.data)
    else:
        envelope = ApiResponse(success=False, message=outcome.message, data=None)
    return JSONResponse(status_code=outcome.status_code, content=jsonable_encoder(envelope))
