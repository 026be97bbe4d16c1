"""List repository (file persistence).

All lists, items and catalog entries live in one JSON document::

    {"lists": [...], "items": [...], "categories": [...], "units": [...], "products": [...]}

Every mutating call re-reads the file, applies the change and writes it back
atomically, so each call is an independent step; there are no multi-call
transactions.
"""
import json
import logging
import os
import shutil
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from basket.domain.Catalog import Category, Product, Unit
from basket.domain.Item import Item
from basket.domain.ShoppingList import ShoppingList
from basket.infra.paths import LISTS_FILE
from basket.utilities.constants import DEFAULT_LIST_NAME
from basket.utilities.defaults import DEFAULT_CATEGORIES, DEFAULT_PRODUCTS, DEFAULT_UNITS
from basket.utilities.exceptions import ListStoreError

logger = logging.getLogger(__name__)

_COLLECTIONS = ("lists", "items", "categories", "units", "products")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


class ListRepository:
    def __init__(self, store_file: Optional[Path] = None):
        self.store_file = Path(store_file) if store_file is not None else LISTS_FILE

    # --- raw document -----------------------------------------------------
    def _load(self) -> Dict[str, List[dict]]:
        if not self.store_file.exists():
            return {name: [] for name in _COLLECTIONS}
        try:
            with open(self.store_file, "r", encoding="utf-8") as f:
                store = json.load(f)
        except json.JSONDecodeError as e:
            raise ListStoreError(f"Invalid JSON in list store {self.store_file}: {e}") from e
        except OSError as e:
            raise ListStoreError(f"Cannot read list store {self.store_file}: {e}") from e
        if not isinstance(store, dict):
            raise ListStoreError(f"List store {self.store_file} must hold a JSON object, got {type(store).__name__}")
        for name in _COLLECTIONS:
            if not isinstance(store.setdefault(name, []), list):
                raise ListStoreError(f"List store {self.store_file}: '{name}' must be an array")
        return store

    def _save(self, store: Dict[str, List[dict]]) -> None:
        directory = self.store_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(directory), prefix=".basket_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(store, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, self.store_file)
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except OSError as e:
            raise ListStoreError(f"Cannot write list store {self.store_file}: {e}") from e

    # --- lists ------------------------------------------------------------
    def get_lists(self) -> List[ShoppingList]:
        return [ShoppingList.from_dict(d) for d in self._load()["lists"]]

    def get_list(self, list_id: str) -> Optional[ShoppingList]:
        for d in self._load()["lists"]:
            if d.get("id") == list_id:
                return ShoppingList.from_dict(d)
        return None

    def create_list(self, name: str) -> ShoppingList:
        store = self._load()
        shopping_list = ShoppingList(id=_new_id(), name=name, created_at=_now())
        store["lists"].append(shopping_list.to_dict())
        self._save(store)
        logger.info(f"Created list '{name}' ({shopping_list.id})")
        return shopping_list

    def rename_list(self, list_id: str, name: str) -> Optional[ShoppingList]:
        store = self._load()
        for i, d in enumerate(store["lists"]):
            if d.get("id") == list_id:
                shopping_list = ShoppingList.from_dict(d)
                shopping_list.rename(name, _now())
                store["lists"][i] = shopping_list.to_dict()
                self._save(store)
                return shopping_list
        return None

    def delete_list(self, list_id: str) -> bool:
        """Delete a list together with all of its items."""
        store = self._load()
        before = len(store["lists"])
        store["lists"] = [d for d in store["lists"] if d.get("id") != list_id]
        if len(store["lists"]) == before:
            return False
        store["items"] = [d for d in store["items"] if d.get("listId") != list_id]
        self._save(store)
        logger.info(f"Deleted list {list_id}")
        return True

    # --- catalog ----------------------------------------------------------
    def get_categories(self) -> List[Category]:
        return [Category.from_dict(d) for d in self._load()["categories"]]

    def get_units(self) -> List[Unit]:
        return [Unit.from_dict(d) for d in self._load()["units"]]

    def get_products(self) -> List[Product]:
        return [Product.from_dict(d) for d in self._load()["products"]]

    def find_category_by_name(self, name: str) -> Optional[Category]:
        return next((c for c in self.get_categories() if c.matches(name)), None)

    def find_unit_by_name(self, name: str) -> Optional[Unit]:
        return next((u for u in self.get_units() if u.matches(name)), None)

    def find_product_by_name(self, name: str) -> Optional[Product]:
        return next((p for p in self.get_products() if p.matches(name)), None)

    def _append(self, collection: str, entity):
        store = self._load()
        store[collection].append(entity.to_dict())
        self._save(store)
        return entity

    def ensure_category(self, name: str) -> Category:
        return self.find_category_by_name(name) or self._append("categories", Category(id=_new_id(), name=name))

    def ensure_unit(self, name: str) -> Unit:
        return self.find_unit_by_name(name) or self._append("units", Unit(id=_new_id(), name=name, short=name))

    def ensure_product(self, name: str, category_id: str, unit_id: str) -> Product:
        existing = self.find_product_by_name(name)
        if existing:
            return existing
        return self._append("products", Product(id=_new_id(), name=name, category_id=category_id, unit_id=unit_id))

    # --- items ------------------------------------------------------------
    def get_items_by_list(self, list_id: str) -> List[Item]:
        return [Item.from_dict(d) for d in self._load()["items"] if d.get("listId") == list_id]

    def create_item(self, list_id: str, fields: dict) -> Item:
        """Create an item; ``fields`` uses snake_case Item attribute names."""
        now = _now()
        item = Item(
            id=_new_id(),
            list_id=list_id,
            product_id=fields.get("product_id", ""),
            name=fields.get("name", ""),
            quantity=fields.get("quantity", 1),
            unit_id=fields.get("unit_id", ""),
            category_id=fields.get("category_id", ""),
            comment=fields.get("comment", ""),
            scope=fields.get("scope", ""),
            purchased=fields.get("purchased", False),
            created_at=now,
            updated_at=now,
        )
        return self._append("items", item)

    def update_item(self, item_id: str, patch: dict) -> Optional[Item]:
        store = self._load()
        for i, d in enumerate(store["items"]):
            if d.get("id") == item_id:
                item = Item.from_dict(d)
                for attr, value in patch.items():
                    if attr in ("id", "list_id", "created_at") or not hasattr(item, attr):
                        continue
                    setattr(item, attr, value)
                item.updated_at = _now()
                store["items"][i] = item.to_dict()
                self._save(store)
                return item
        return None

    def toggle_item(self, item_id: str, purchased: bool) -> Optional[Item]:
        return self.update_item(item_id, {"purchased": purchased})

    def delete_item(self, item_id: str) -> bool:
        store = self._load()
        before = len(store["items"])
        store["items"] = [d for d in store["items"] if d.get("id") != item_id]
        if len(store["items"]) == before:
            return False
        self._save(store)
        return True

    # --- seeding ----------------------------------------------------------
    def seed_defaults(self) -> None:
        """Add missing default categories, units and products; create a first list if there is none."""
        store = self._load()
        changed = False
        for collection, defaults in (("categories", DEFAULT_CATEGORIES),
                                     ("units", DEFAULT_UNITS),
                                     ("products", DEFAULT_PRODUCTS)):
            known = {d.get("id") for d in store[collection]}
            for entry in defaults:
                if entry["id"] not in known:
                    store[collection].append(dict(entry))
                    changed = True
        if changed:
            self._save(store)
        if not store["lists"]:
            self.create_list(DEFAULT_LIST_NAME)


__all__ = ["ListRepository"]
