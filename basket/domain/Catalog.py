"""Catalog entities: Category, Unit and Product, all addressed by id and found by name."""


def normalize_name(value: str) -> str:
    return (value or '').strip().lower()


class Category:
    def __init__(self, id: str = "", name: str = ""):
        self.id = id
        self.name = name

    def matches(self, name: str) -> bool:
        return normalize_name(self.name) == normalize_name(name)

    def __str__(self) -> str:
        return f"Category {self.name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Category(id=d.get("id", ""), name=d.get("name", ""))

    def to_dict(self):
        return {"id": self.id, "name": self.name}


class Unit:
    def __init__(self, id: str = "", name: str = "", short: str = ""):
        self.id = id
        self.name = name
        self.short = short

    @property
    def label(self) -> str:
        '''Short name when there is one, full name otherwise.'''
        return self.short or self.name

    def matches(self, name: str) -> bool:
        '''A unit is found either by its full name or by its short name.'''
        target = normalize_name(name)
        return normalize_name(self.name) == target or normalize_name(self.short) == target

    def __str__(self) -> str:
        return f"Unit {self.name} ({self.short})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Unit(id=d.get("id", ""), name=d.get("name", ""), short=d.get("short", ""))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "short": self.short}


class Product:
    def __init__(self, id: str = "", name: str = "", category_id: str = "", unit_id: str = ""):
        self.id = id
        self.name = name
        self.category_id = category_id
        self.unit_id = unit_id

    def matches(self, name: str) -> bool:
        return normalize_name(self.name) == normalize_name(name)

    def __str__(self) -> str:
        return f"Product {self.name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Product(id=d.get("id", ""), name=d.get("name", ""),
                       category_id=d.get("categoryId", ""), unit_id=d.get("unitId", ""))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "categoryId": self.category_id, "unitId": self.unit_id}
