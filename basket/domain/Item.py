"""Item entity: one line of a shopping list, linked to product, unit and category by id."""
from typing import Union

Number = Union[int, float]


class Item:
    def __init__(self, id: str = "", list_id: str = "", product_id: str = "", name: str = "",
                 quantity: Number = 1, unit_id: str = "", category_id: str = "",
                 comment: str = "", scope: str = "", purchased: bool = False,
                 created_at: str = "", updated_at: str = ""):
        self.id = id
        self.list_id = list_id
        self.product_id = product_id
        self.name = name
        self.quantity = quantity
        self.unit_id = unit_id
        self.category_id = category_id
        self.comment = comment or ""
        self.scope = scope or ""
        self.purchased = bool(purchased)
        self.created_at = created_at
        self.updated_at = updated_at or created_at

    def __str__(self) -> str:
        mark = "x" if self.purchased else " "
        return f"[{mark}] {self.name} - {self.quantity}"

    __repr__ = __str__

    # persisted key -> attribute
    _FIELDS = {
        "id": "id", "listId": "list_id", "productId": "product_id", "name": "name",
        "quantity": "quantity", "unitId": "unit_id", "categoryId": "category_id",
        "comment": "comment", "scope": "scope", "purchased": "purchased",
        "createdAt": "created_at", "updatedAt": "updated_at",
    }

    @staticmethod
    def from_dict(data):
        '''Creates an Item from its persisted dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        kwargs = {attr: d[key] for key, attr in Item._FIELDS.items() if key in d}
        return Item(**kwargs)

    def to_dict(self):
        return {key: getattr(self, attr) for key, attr in Item._FIELDS.items()}
