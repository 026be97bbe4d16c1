"""Share payload value types: the portable, human-meaningful form of a shopping list."""
from typing import List, Optional, Union
from basket.utilities.constants import SHARE_VERSION

Number = Union[int, float]


class ShareItem:
    def __init__(self, name: str = "", quantity: Number = 0, unit: str = "", category: str = "",
                 comment: str = "", scope: str = "", purchased: bool = False):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.comment = comment
        self.scope = scope
        self.purchased = purchased

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShareItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} ({self.category})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a ShareItem from an already validated dictionary.'''
        return ShareItem(
            name=data["name"],
            quantity=data["quantity"],
            unit=data["unit"],
            category=data["category"],
            comment=data["comment"],
            scope=data["scope"],
            purchased=data["purchased"],
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "comment": self.comment,
            "scope": self.scope,
            "purchased": self.purchased,
        }


class SharePayload:
    """A list name plus its ordered items. Only ``version == 1`` is ever valid."""

    def __init__(self, list_name: str = "", items: Optional[List[ShareItem]] = None, version: int = SHARE_VERSION):
        self.version = version
        self.list_name = list_name
        self.items = items[:] if items else []

    def __eq__(self, other) -> bool:
        if not isinstance(other, SharePayload):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"Share payload v{self.version} '{self.list_name}' ({len(self.items)} items)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a SharePayload from an already validated dictionary (wire field names).'''
        return SharePayload(
            list_name=data["listName"],
            items=[ShareItem.from_dict(i) for i in data["items"]],
            version=data["version"],
        )

    def to_dict(self):
        return {
            "version": self.version,
            "listName": self.list_name,
            "items": [item.to_dict() for item in self.items],
        }
