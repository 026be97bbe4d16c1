"""ShoppingList entity: a named list that items point to by id."""
from typing import Optional


class ShoppingList:
    def __init__(self, id: str = "", name: str = "", created_at: str = "", updated_at: Optional[str] = None):
        self.id = id
        self.name = name
        self.created_at = created_at
        self.updated_at = updated_at or created_at

    def rename(self, name: str, when: str):
        '''Changes the list name and bumps the update timestamp.'''
        self.name = name
        self.updated_at = when

    def __str__(self) -> str:
        return f"Shopping List {self.name} ({self.id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a ShoppingList from its persisted dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingList(
            id=d.get("id", ""),
            name=d.get("name", ""),
            created_at=d.get("createdAt", ""),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
