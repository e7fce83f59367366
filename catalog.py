import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

import selection
from constants import SEED_PRODUCTS
from models import CatalogError, Product

logger = logging.getLogger(__name__)


class CatalogStore:
    """Ordered, session-owned catalog of products.

    The store never edits a product in place: every change swaps in a new
    snapshot built by the selection functions and bumps ``version`` so the
    page can tell that something moved.
    """

    def __init__(self, products: Iterable[Product]):
        snapshot = tuple(products)
        seen = set()
        for p in snapshot:
            if not isinstance(p, Product):
                raise CatalogError(f"Not a product: {p!r}")
            if p.id in seen:
                raise CatalogError(f"Duplicate product id: {p.id}")
            seen.add(p.id)
        self._products = snapshot
        self.version = 0

    @classmethod
    def from_seed(cls, records: Iterable[Mapping[str, Any]] = SEED_PRODUCTS) -> "CatalogStore":
        return cls(Product.from_dict(r) for r in records)

    def __len__(self):
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def get_all(self) -> Tuple[Product, ...]:
        return self._products

    def get(self, product_id: int) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def in_bag(self) -> Tuple[Product, ...]:
        return tuple(p for p in self._products if p.in_bag)

    def _replace(self, snapshot: Tuple[Product, ...]) -> Tuple[Product, ...]:
        if snapshot != self._products:
            self._products = snapshot
            self.version += 1
        return self._products

    def toggle_bag(self, product_id: int) -> Tuple[Product, ...]:
        snapshot = self._replace(selection.toggle_bag(self._products, product_id))
        product = self.get(product_id)
        if product is not None:
            logger.info("%s %s bag (version %d)", product.name,
                        "added to" if product.in_bag else "removed from", self.version)
        return snapshot

    def set_quantity(self, product_id: int, quantity: int) -> Tuple[Product, ...]:
        snapshot = self._replace(selection.set_quantity(self._products, product_id, quantity))
        product = self.get(product_id)
        if product is not None:
            logger.info("%s quantity set to %d", product.name, product.quantity)
        return snapshot


def load_catalog() -> CatalogStore:
    store = CatalogStore.from_seed()
    logger.info("Catalog loaded with %d products", len(store))
    return store
