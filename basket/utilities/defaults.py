"""Seed catalog: categories, units and products created on first start.

``CATALOG_PRODUCTS`` also carries the aliases used for name lookup, and
``CATEGORY_KEYWORDS`` the substrings used to guess a category for names the
catalog does not know.
"""
from typing import Final

DEFAULT_CATEGORIES: Final[list[dict]] = [
    {"id": "cat-produce", "name": "Produce"},
    {"id": "cat-dairy", "name": "Dairy"},
    {"id": "cat-bakery", "name": "Bakery"},
    {"id": "cat-meat", "name": "Meat & Fish"},
    {"id": "cat-pantry", "name": "Pantry"},
    {"id": "cat-frozen", "name": "Frozen"},
    {"id": "cat-household", "name": "Household"},
    {"id": "cat-drinks", "name": "Drinks"},
]

DEFAULT_UNITS: Final[list[dict]] = [
    {"id": "unit-pcs", "name": "Pieces", "short": "pcs"},
    {"id": "unit-kg", "name": "Kilograms", "short": "kg"},
    {"id": "unit-g", "name": "Grams", "short": "g"},
    {"id": "unit-l", "name": "Liters", "short": "l"},
    {"id": "unit-ml", "name": "Milliliters", "short": "ml"},
    {"id": "unit-pack", "name": "Packs", "short": "pack"},
]

# (id, name, category id, unit id, aliases)
_CATALOG: Final[list[tuple]] = [
    ("prod-milk", "Milk", "cat-dairy", "unit-l", ["whole milk"]),
    ("prod-eggs", "Eggs", "cat-dairy", "unit-pcs", ["egg"]),
    ("prod-bread", "Bread", "cat-bakery", "unit-pcs", ["baguette"]),
    ("prod-apples", "Apples", "cat-produce", "unit-kg", ["apple"]),
    ("prod-chicken", "Chicken", "cat-meat", "unit-kg", []),
    ("prod-pasta", "Pasta", "cat-pantry", "unit-pack", ["spaghetti"]),
    ("prod-icecream", "Ice Cream", "cat-frozen", "unit-pack", []),
    ("prod-water", "Water", "cat-drinks", "unit-l", []),
    ("prod-banana", "Bananas", "cat-produce", "unit-kg", ["banana"]),
    ("prod-oranges", "Oranges", "cat-produce", "unit-kg", ["orange"]),
    ("prod-lemons", "Lemons", "cat-produce", "unit-kg", ["lemon"]),
    ("prod-grapes", "Grapes", "cat-produce", "unit-kg", []),
    ("prod-pears", "Pears", "cat-produce", "unit-kg", ["pear"]),
    ("prod-mandarins", "Mandarins", "cat-produce", "unit-kg", ["mandarin", "tangerine"]),
    ("prod-avocado", "Avocado", "cat-produce", "unit-pcs", []),
    ("prod-kiwi", "Kiwi", "cat-produce", "unit-kg", []),
    ("prod-strawberries", "Strawberries", "cat-produce", "unit-kg", ["strawberry"]),
    ("prod-raspberries", "Raspberries", "cat-produce", "unit-kg", ["raspberry"]),
    ("prod-blueberries", "Blueberries", "cat-produce", "unit-kg", ["blueberry"]),
    ("prod-cherries", "Cherries", "cat-produce", "unit-kg", ["cherry"]),
    ("prod-currants", "Currants", "cat-produce", "unit-kg", []),
    ("prod-potatoes", "Potatoes", "cat-produce", "unit-kg", ["potato"]),
    ("prod-onions", "Onions", "cat-produce", "unit-kg", ["onion"]),
    ("prod-garlic", "Garlic", "cat-produce", "unit-pcs", []),
    ("prod-carrots", "Carrots", "cat-produce", "unit-kg", ["carrot"]),
    ("prod-tomatoes", "Tomatoes", "cat-produce", "unit-kg", ["tomato"]),
    ("prod-cucumbers", "Cucumbers", "cat-produce", "unit-kg", ["cucumber"]),
    ("prod-bellpepper", "Bell Peppers", "cat-produce", "unit-kg", ["pepper", "bell pepper"]),
    ("prod-zucchini", "Zucchini", "cat-produce", "unit-kg", ["courgette"]),
    ("prod-eggplant", "Eggplant", "cat-produce", "unit-kg", ["aubergine"]),
    ("prod-lettuce", "Lettuce", "cat-produce", "unit-pcs", []),
    ("prod-cabbage", "Cabbage", "cat-produce", "unit-kg", ["kale"]),
    ("prod-broccoli", "Broccoli", "cat-produce", "unit-kg", []),
    ("prod-cauliflower", "Cauliflower", "cat-produce", "unit-kg", ["cauliflower"]),
    ("prod-beets", "Beets", "cat-produce", "unit-kg", ["beetroot"]),
    ("prod-greenonion", "Green Onions", "cat-produce", "unit-pcs", ["spring onion"]),
    ("prod-dill", "Dill", "cat-produce", "unit-pcs", []),
    ("prod-parsley", "Parsley", "cat-produce", "unit-pcs", []),
    ("prod-spinach", "Spinach", "cat-produce", "unit-kg", []),
    ("prod-pickles", "Pickles", "cat-pantry", "unit-pack", ["pickled cucumbers"]),
    ("prod-pickled-tomatoes", "Pickled Tomatoes", "cat-pantry", "unit-pack", ["pickled tomatoes"]),
    ("prod-sauerkraut", "Sauerkraut", "cat-pantry", "unit-pack", []),
    ("prod-olives", "Olives", "cat-pantry", "unit-pack", ["olives", "black olives"]),
    ("prod-corn-canned", "Canned Corn", "cat-pantry", "unit-pack", ["sweet corn"]),
    ("prod-peas-canned", "Canned Peas", "cat-pantry", "unit-pack", ["green peas"]),
    ("prod-beans-canned", "Canned Beans", "cat-pantry", "unit-pack", []),
    ("prod-chickpeas-canned", "Canned Chickpeas", "cat-pantry", "unit-pack", []),
    ("prod-tuna-canned", "Canned Tuna", "cat-pantry", "unit-pack", []),
    ("prod-sardines-canned", "Canned Sardines", "cat-pantry", "unit-pack", []),
    ("prod-salmon-canned", "Canned Salmon", "cat-pantry", "unit-pack", []),
    ("prod-tomatoes-canned", "Canned Tomatoes", "cat-pantry", "unit-pack", ["canned tomato"]),
    ("prod-tomato-paste", "Tomato Paste", "cat-pantry", "unit-pack", []),
    ("prod-mushrooms-canned", "Canned Mushrooms", "cat-pantry", "unit-pack", []),
    ("prod-jam", "Jam", "cat-pantry", "unit-pack", ["marmalade"]),
]

CATALOG_PRODUCTS: Final[list[dict]] = [
    {"id": pid, "name": name, "categoryId": cid, "unitId": uid, "aliases": aliases}
    for pid, name, cid, uid, aliases in _CATALOG
]

# Persisted products carry no aliases
DEFAULT_PRODUCTS: Final[list[dict]] = [
    {k: v for k, v in p.items() if k != "aliases"} for p in CATALOG_PRODUCTS
]

# Checked in this order; the first category with a matching substring wins
CATEGORY_KEYWORDS: Final[dict[str, list[str]]] = {
    "cat-produce": ["apple", "banana", "tomato", "cucumber", "lettuce", "berries"],
    "cat-dairy": ["milk", "cheese", "yogurt", "butter", "eggs"],
    "cat-bakery": ["bread", "baguette", "croissant", "bun"],
    "cat-meat": ["chicken", "beef", "pork", "fish", "salmon"],
    "cat-pantry": ["pasta", "rice", "oil", "beans", "flour"],
    "cat-frozen": ["ice cream", "frozen", "pizza"],
    "cat-household": ["soap", "paper", "detergent", "bag"],
    "cat-drinks": ["water", "juice", "cola", "tea", "coffee"],
}
