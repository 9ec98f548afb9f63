"""
In-memory product store.

One ``ProductStore`` is created per application on startup and reached by
handlers through the ``get_store`` dependency. Ids come from a counter that
only moves forward, so a deleted id is never handed out again.
"""
from threading import Lock
from typing import List, Optional

from fastapi import Request

from models import SEED_PRODUCTS, Price, Product


class ProductStore:
    def __init__(self, next_id: int = 1):
        self._lock = Lock()
        self._products: List[Product] = []
        self._next_id = next_id

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        store = cls()
        for name, price in SEED_PRODUCTS:
            store.create(name, price)
        return store

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def create(self, name: str, price: Price) -> Product:
        with self._lock:
            product = Product(id=self._next_id, name=name, price=price)
            self._next_id += 1
            self._products.append(product)
            return product

    def update(self, product_id: int, name: str, price: Price) -> Optional[Product]:
        with self._lock:
            product = next((p for p in self._products if p.id == product_id), None)
            if product is None:
                return None
            product.name = name
            product.price = price
            return product

    def delete(self, product_id: int) -> bool:
        with self._lock:
            index = next(
                (i for i, p in enumerate(self._products) if p.id == product_id), None
            )
            if index is None:
                return False
            del self._products[index]
            return True


def get_store(request: Request) -> ProductStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
