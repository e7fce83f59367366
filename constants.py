PAGE_TITLE = "Jersey Shop"
PAGE_ICON = "⚽"
LAYOUT = "wide"

CURRENCY = "$"
GRID_COLUMNS = 3
IMAGE_DIR = "img"

EMOJIS = {
    'BAG': '🛍️',
    'MONEY': '💰',
    'SHIRT': '👕',
}

# =========================
# SEED CATALOG
# =========================
SEED_PRODUCTS = [
    {"id": 1, "name": "Real Madrid", "price": "119.99", "photo": "real_madrid.webp", "quantity": 3},
    {"id": 2, "name": "Milan", "price": "99.99", "photo": "milan.png"},
    {"id": 3, "name": "Chelsea", "price": "99.99", "photo": "chelsea.webp"},
    {"id": 4, "name": "Barcelona", "price": "109.99", "photo": "barcelona.png"},
    {"id": 5, "name": "Benfica", "price": "89.49", "photo": "benfica.png"},
    {"id": 6, "name": "Manchester City", "price": "129.79", "photo": "manchester.webp"},
    {"id": 7, "name": "Bayern", "price": "119.99", "photo": "bayern.webp"},
    {"id": 8, "name": "PSG", "price": "94.99", "photo": "psg.png"},
    {"id": 9, "name": "Ajax", "price": "89.99", "photo": "ajax.webp"},
]
