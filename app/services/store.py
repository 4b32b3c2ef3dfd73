import logging
import random
from typing import Dict, List, Optional

from fastapi import Request

from app.models import Filter, Product, Size

logger = logging.getLogger(__name__)

ADJECTIVES = [
    "Amazing",
    "Fantastic",
    "Great",
    "Super",
    "Awesome",
    "Cool",
    "Nice",
    "Premium",
    "Deluxe",
    "Ultimate",
]
NOUNS = [
    "Widget",
    "Gadget",
    "Tool",
    "Device",
    "Item",
    "Product",
    "Thing",
    "Gizmo",
    "Contraption",
    "Apparatus",
]


class InMemoryProductStore:
    """Product records kept in insertion order.

    Filled once at startup and only read afterwards, so no locking.
    """

    def __init__(self) -> None:
        self._products: List[Product] = []
        self._by_id: Dict[int, Product] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._products)

    def insert(self, title: str, size: Size | str) -> Product:
        if not title:
            raise ValueError("Product title must not be empty")
        product = Product(id=self._next_id, title=title, size=Size(size))
        self._products.append(product)
        self._by_id[product.id] = product
        self._next_id += 1
        return product

    def get(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def all_filtered(self, search_filter: Filter) -> List[Product]:
        needle = search_filter.query.lower() if search_filter.query else None
        return [
            p
            for p in self._products
            if p.size == search_filter.size and (needle is None or needle in p.title.lower())
        ]

    def seed_random(self, count: int = 100, seed: Optional[int] = None) -> None:
        rng = random.Random(seed)
        sizes = list(Size)
        for i in range(count):
            title = f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)} {i + 1}"
            self.insert(title, rng.choice(sizes))
        logger.info("Seeded %d products (seed=%s)", count, seed)


def get_store(request: Request) -> InMemoryProductStore:
    return request.app.state.store
