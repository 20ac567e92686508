import asyncio
import logging
import re
from typing import Iterable, Iterator, List, Optional, Set, Tuple, Union

from .errors import NotFound
from .models import Product

# In-memory data for one server process. The catalog is loaded once and
# never written to; the subscriber registry is the only mutable store.

logger = logging.getLogger(__name__)

SEED_PRODUCTS = [
    {
        "id": 1,
        "name": "Gold Temple Necklace",
        "price": 4599900,
        "image": "https://images.example.com/jewellery/gold-temple-necklace.jpg",
        "category": "Necklaces",
        "description": "22K gold necklace with hand-carved temple motifs.",
        "stock": 4,
    },
    {
        "id": 2,
        "name": "Solitaire Diamond Ring",
        "price": 8999900,
        "image": "https://images.example.com/jewellery/solitaire-diamond-ring.jpg",
        "category": "Rings",
        "description": "0.5 carat solitaire set in 18K white gold.",
        "stock": 2,
    },
    {
        "id": 3,
        "name": "Pearl Choker",
        "price": 1249900,
        "image": "https://images.example.com/jewellery/pearl-choker.jpg",
        "category": "Necklaces",
        "description": "Freshwater pearls on a silk thread with a gold clasp.",
        "stock": 7,
    },
    {
        "id": 4,
        "name": "Kundan Jhumka Earrings",
        "price": 899900,
        "image": "https://images.example.com/jewellery/kundan-jhumka.jpg",
        "category": "Earrings",
        "description": "Bell-shaped jhumkas with kundan stones and pearl drops.",
        "stock": 10,
    },
    {
        "id": 5,
        "name": "Silver Charm Bracelet",
        "price": 349900,
        "image": "https://images.example.com/jewellery/silver-charm-bracelet.jpg",
        "category": "Bracelets",
        "description": "Sterling silver link bracelet with five charms.",
        "stock": 0,
    },
    {
        "id": 6,
        "name": "Ruby Cocktail Ring",
        "price": 2799900,
        "image": "https://images.example.com/jewellery/ruby-cocktail-ring.jpg",
        "category": "Rings",
        "description": "Oval ruby surrounded by a halo of diamonds.",
        "stock": 3,
    },
]


def _coerce_id(product_id: Union[int, str]) -> Optional[int]:
    if isinstance(product_id, int):
        return product_id
    # canonical ASCII form only, so "+2", "02", "0_2" or " 2" are not aliases of 2
    text = str(product_id)
    if not re.fullmatch(r"-?(0|[1-9][0-9]*)", text):
        return None
    return int(text)


class Catalog:
    """Ordered, read-only collection of products.

    Products keep the order they were loaded in. Ids must be unique.
    """

    def __init__(self, products: Iterable[Product] = ()):
        items: Tuple[Product, ...] = tuple(products)
        seen: Set[int] = set()
        for p in items:
            if p.id in seen:
                raise ValueError(f"duplicate product id: {p.id}")
            seen.add(p.id)
        self._products = items

    @classmethod
    def from_seed(cls, seed: Optional[List[dict]] = None) -> "Catalog":
        rows = SEED_PRODUCTS if seed is None else seed
        catalog = cls(Product(**row) for row in rows)
        logger.info("Loaded catalog with %d products", len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        if category is None:
            return list(self._products)
        return [p for p in self._products if p.category == category]

    def get_product(self, product_id: Union[int, str]) -> Product:
        pid = _coerce_id(product_id)
        if pid is not None:
            for p in self._products:
                if p.id == pid:
                    return p
        logger.debug("No product with id %r", product_id)
        raise NotFound("Product not found")

    def list_categories(self) -> List[str]:
        # dict keeps first-occurrence order
        return list(dict.fromkeys(p.category for p in self._products))


class SubscriberRegistry:
    """Newsletter emails seen by this process."""

    def __init__(self):
        self._emails: Set[str] = set()
        self._lock = asyncio.Lock()

    @staticmethod
    def _normalize(email: str) -> str:
        return email.strip().lower()

    def __contains__(self, email: str) -> bool:
        return self._normalize(email) in self._emails

    def __len__(self) -> int:
        return len(self._emails)

    async def add(self, email: str) -> bool:
        """Record ``email``. Returns False if it was already subscribed."""
        key = self._normalize(email)
        async with self._lock:
            if key in self._emails:
                return False
            self._emails.add(key)
            return True
