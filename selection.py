import logging
from dataclasses import replace
from typing import Iterable, Tuple

from models import Product, check_quantity

logger = logging.getLogger(__name__)


def toggle_bag(products: Iterable[Product], product_id: int) -> Tuple[Product, ...]:
    """Return a new snapshot with the bag flag of ``product_id`` flipped.

    Untouched products are carried over as the same objects and the order is
    kept. An unknown id gives back an equal snapshot.
    """
    snapshot = tuple(products)
    if not any(p.id == product_id for p in snapshot):
        logger.debug("toggle_bag: unknown product id %r", product_id)
        return snapshot
    return tuple(
        replace(p, in_bag=not p.in_bag) if p.id == product_id else p
        for p in snapshot
    )


def set_quantity(products: Iterable[Product], product_id: int, quantity: int) -> Tuple[Product, ...]:
    check_quantity(quantity)
    snapshot = tuple(products)
    if not any(p.id == product_id for p in snapshot):
        logger.debug("set_quantity: unknown product id %r", product_id)
        return snapshot
    return tuple(
        replace(p, quantity=quantity) if p.id == product_id else p
        for p in snapshot
    )
