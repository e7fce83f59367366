import pytest

from catalog import CatalogStore
from models import Product


@pytest.fixture
def seed_store():
    return CatalogStore.from_seed()


@pytest.fixture
def two_store():
    return CatalogStore([
        Product(1, "Real Madrid", "119.99", "real_madrid.webp", quantity=3),
        Product(2, "Milan", "99.99", "milan.png"),
    ])
