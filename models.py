from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt

# Nombre JSON tel quel: 300 reste 300, "300" est refusé
Price = Union[StrictInt, StrictFloat]


class Product(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: int
    name: str
    price: Price


# Produits initiaux (name, price), ids 1..3
SEED_PRODUCTS: List[Tuple[str, Price]] = [
    ("Laptop", 1200),
    ("Keyboard", 75),
    ("Mouse", 25),
]
