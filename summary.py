from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Iterable, Optional, Tuple

from models import CENT, MONEY_CONTEXT, Product


@dataclass(frozen=True)
class LineItem:
    quantity: int
    name: str
    line_total: Decimal

    @property
    def label(self) -> str:
        return f"{self.quantity} x {self.name}"


@dataclass(frozen=True)
class OrderSummary:
    lines: Tuple[LineItem, ...]
    total: Decimal

    def __len__(self):
        return len(self.lines)


def summarize(products: Iterable[Product]) -> Optional[OrderSummary]:
    """Build the order summary for the products in the bag.

    Products outside the bag are skipped. Returns None when nothing is in the
    bag, in which case the summary must not be shown at all.
    """
    with localcontext(MONEY_CONTEXT):
        lines = tuple(
            LineItem(p.quantity, p.name, p.line_total.quantize(CENT))
            for p in products
            if p.in_bag
        )
        if not lines:
            return None
        total = sum((line.line_total for line in lines), Decimal("0"))
        return OrderSummary(lines, total.quantize(CENT))
