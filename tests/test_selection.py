import pytest

from models import CatalogError, Product
from selection import set_quantity, toggle_bag

PRODUCTS = (
    Product(1, "Real Madrid", "119.99", "real_madrid.webp", quantity=3),
    Product(2, "Milan", "99.99", "milan.png"),
    Product(3, "Chelsea", "99.99", "chelsea.webp"),
)


def test_toggle_flips_only_the_target():
    after = toggle_bag(PRODUCTS, 2)
    assert after[1].in_bag is True
    assert after[1].name == "Milan"
    assert after[1].quantity == PRODUCTS[1].quantity
    assert after[0] is PRODUCTS[0]
    assert after[2] is PRODUCTS[2]
    assert [p.id for p in after] == [1, 2, 3]


def test_toggle_returns_new_snapshot():
    after = toggle_bag(PRODUCTS, 1)
    assert after is not PRODUCTS
    assert after[0] is not PRODUCTS[0]
    assert PRODUCTS[0].in_bag is False


@pytest.mark.parametrize("pid", [1, 2, 3])
def test_toggle_twice_restores(pid):
    assert toggle_bag(toggle_bag(PRODUCTS, pid), pid) == PRODUCTS


@pytest.mark.parametrize("pid", [0, 42, -1, "1", None])
def test_toggle_unknown_id_is_noop(pid):
    assert toggle_bag(PRODUCTS, pid) == PRODUCTS


def test_set_quantity():
    after = set_quantity(PRODUCTS, 2, 4)
    assert after[1].quantity == 4
    assert after[0] is PRODUCTS[0]
    assert set_quantity(PRODUCTS, 99, 4) == PRODUCTS


def test_set_quantity_rejects_zero():
    with pytest.raises(CatalogError):
        set_quantity(PRODUCTS, 1, 0)
