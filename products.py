import re
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Request
from loguru import logger

from metrics import ERROR_COUNT, endpoint_label
from models import Product
from outcomes import Invalid, NotFound, Ok, Outcome, not_found_message, render
from schemas import ApiResponse, ProductPayload
from store import ProductStore, get_store

router = APIRouter()

# Entier en tête de chaîne: "12abc" -> 12, "abc" -> aucun
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_product_id(raw: str) -> Optional[int]:
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # au-delà de la limite de conversion int/str, aucun produit possible
        return None


def record_failure(request: Request, outcome: Union[NotFound, Invalid]) -> Outcome:
    error_type = "not_found" if isinstance(outcome, NotFound) else "invalid_input"
    endpoint = endpoint_label(request)
    logger.bind(error_type=error_type).warning(outcome.message)
    ERROR_COUNT.labels(
        service=request.app.state.settings.service_name,
        endpoint=endpoint,
        error_type=error_type,
    ).inc()
    return outcome


def _not_found(request: Request, raw_id: str, product_id: Optional[int]) -> Outcome:
    # sans entier exploitable, on renvoie la valeur brute du chemin
    shown = raw_id if product_id is None else product_id
    return record_failure(request, NotFound(not_found_message(shown)))


@router.get("", response_model=ApiResponse[List[Product]])
async def get_products(store: ProductStore = Depends(get_store)):
    logger.info("Fetching all products")
    return render(Ok(store.list(), "Products retrieved successfully."))


@router.get("/{product_id}", response_model=ApiResponse[Product])
async def get_product(
    product_id: str,
    request: Request,
    store: ProductStore = Depends(get_store),
):
    logger.info(f"Fetching product {product_id}")
    parsed = parse_product_id(product_id)
    product = store.get(parsed) if parsed is not None else None
    if product is None:
        return render(_not_found(request, product_id, parsed))
    return render(Ok(product, "Product retrieved successfully."))


@router.post("", response_model=ApiResponse[Product], status_code=201)
async def create_product(
    request: Request,
    payload: Optional[ProductPayload] = None,
    store: ProductStore = Depends(get_store),
):
    if payload is None or not payload.is_complete():
        return render(record_failure(request, Invalid()))
    logger.info(f"Creating product: {payload.name}")
    product = store.create(payload.name, payload.price)
    logger.info(f"Product created with ID {product.id}")
    return render(Ok(product, "Product created successfully.", status_code=201))


@router.put("/{product_id}", response_model=ApiResponse[Product])
async def update_product(
    product_id: str,
    request: Request,
    payload: Optional[ProductPayload] = None,
    store: ProductStore = Depends(get_store),
):
    logger.info(f"Updating product {product_id}")
    parsed = parse_product_id(product_id)
    if parsed is None or store.get(parsed) is None:
        return render(_not_found(request, product_id, parsed))
    if payload is None or not payload.is_complete():
        return render(record_failure(request, Invalid()))
    product = store.update(parsed, payload.name, payload.price)
    if product is None:
        # supprimé entre-temps
        return render(_not_found(request, product_id, parsed))
    return render(Ok(product, "Product updated successfully."))


@router.delete("/{product_id}", response_model=ApiResponse)
async def delete_product(
    product_id: str,
    request: Request,
    store: ProductStore = Depends(get_store),
):
    logger.info(f"Deleting product {product_id}")
    parsed = parse_product_id(product_id)
    if parsed is None or not store.delete(parsed):
        return render(_not_found(request, product_id, parsed))
    return render(Ok(None, "Product deleted successfully."))
