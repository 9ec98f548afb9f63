from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from models import Price

T = TypeVar("T")


class ProductPayload(BaseModel):
    """Body of POST and PUT /api/products.

    Both fields are optional at the parsing level so that a missing field is
    reported with the service's own 400 envelope instead of a 422.
    """

    # 1e400 et NaN arrivent de json.loads en inf/nan
    model_config = ConfigDict(allow_inf_nan=False)

    name: Optional[str] = None
    price: Optional[Price] = None

    def is_complete(self) -> bool:
        # price=0 is valid, an empty name is not
        return bool(self.name) and self.price is not None


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    message: str
    data: Optional[T] = None


class SampleResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
