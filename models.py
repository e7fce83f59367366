from dataclasses import dataclass
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Mapping

CENT = Decimal("0.01")
MAX_QUANTITY = 9999

# prices fit the default 28 digits, so line totals and sums stay well inside 60
MONEY_CONTEXT = Context(prec=60, rounding=ROUND_HALF_UP)


class CatalogError(ValueError):
    """Raised when catalog data is invalid."""


def to_money(value: Any) -> Decimal:
    """Parse a price into a non-negative Decimal rounded to cents."""
    if isinstance(value, bool):
        raise CatalogError(f"Invalid price: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise CatalogError(f"Invalid price: {value!r}") from None
    if not amount.is_finite():
        raise CatalogError(f"Price must be finite: {value!r}")
    if amount < 0:
        raise CatalogError(f"Price must not be negative: {value!r}")
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise CatalogError(f"Price is too large: {value!r}") from None


def check_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogError(f"Quantity must be an integer: {value!r}")
    if value < 1:
        raise CatalogError(f"Quantity must be at least 1: {value!r}")
    if value > MAX_QUANTITY:
        raise CatalogError(f"Quantity must be at most {MAX_QUANTITY}: {value!r}")
    return value


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: Decimal
    photo: str
    in_bag: bool = False
    quantity: int = 1

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise CatalogError(f"Product id must be an integer: {self.id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise CatalogError(f"Product {self.id} has no name")
        if not isinstance(self.in_bag, bool):
            raise CatalogError(f"Product {self.id} in_bag must be a bool: {self.in_bag!r}")
        object.__setattr__(self, "price", to_money(self.price))
        check_quantity(self.quantity)

    @property
    def line_total(self) -> Decimal:
        with localcontext(MONEY_CONTEXT):
            return self.price * self.quantity

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        """Build a product from a seed record."""
        missing = [k for k in ("id", "name", "price", "photo") if k not in data]
        if missing:
            raise CatalogError(f"Seed record {dict(data)!r} is missing {', '.join(missing)}")
        return cls(
            id=data["id"],
            name=data["name"],
            price=data["price"],
            photo=data["photo"],
            in_bag=data.get("in_bag", False),
            quantity=data.get("quantity", 1),
        )
