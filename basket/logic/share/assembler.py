"""Payload assembler: bridges the share codec and the list store.

``build_share_payload`` is read-only. ``apply_share_payload`` is a best-effort
import: it performs one store call per step, stops at the first failing item and
reports how far it got. Items already written are kept (no rollback).
"""
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Protocol

from basket.domain.Catalog import Category, Product, Unit
from basket.domain.Item import Item
from basket.domain.SharePayload import ShareItem, SharePayload
from basket.domain.ShoppingList import ShoppingList
from basket.utilities.constants import DEFAULT_CATEGORY, DEFAULT_ITEM_NAME, DEFAULT_UNIT
from basket.utilities.exceptions import ListNotFoundError

logger = logging.getLogger(__name__)


class ListStore(Protocol):
    def get_list(self, list_id: str) -> Optional[ShoppingList]: ...
    def get_items_by_list(self, list_id: str) -> List[Item]: ...
    def get_categories(self) -> List[Category]: ...
    def get_units(self) -> List[Unit]: ...
    def get_products(self) -> List[Product]: ...
    def create_list(self, name: str) -> ShoppingList: ...
    def ensure_category(self, name: str) -> Category: ...
    def ensure_unit(self, name: str) -> Unit: ...
    def ensure_product(self, name: str, category_id: str, unit_id: str) -> Product: ...
    def create_item(self, list_id: str, fields: dict) -> Item: ...


class ImportResult(NamedTuple):
    list_id: str
    imported: int
    total: int
    error: Optional[str] = None

    @property
    def complete(self) -> bool:
        return self.error is None and self.imported == self.total

    def to_dict(self):
        return {
            "list_id": self.list_id,
            "imported": self.imported,
            "total": self.total,
            "complete": self.complete,
            "error": self.error,
        }


def build_share_payload(store: ListStore, list_id: str) -> Optional[SharePayload]:
    """Materialize the current state of a list; None when the list does not exist."""
    shopping_list = store.get_list(list_id)
    if shopping_list is None:
        return None

    items = store.get_items_by_list(list_id)
    category_names = {c.id: c.name for c in store.get_categories()}
    unit_names = {u.id: u.label for u in store.get_units()}
    product_names = {p.id: p.name for p in store.get_products()}

    return SharePayload(
        list_name=shopping_list.name,
        items=[
            ShareItem(
                name=item.name or product_names.get(item.product_id) or DEFAULT_ITEM_NAME,
                quantity=item.quantity,
                unit=unit_names.get(item.unit_id) or DEFAULT_UNIT,
                category=category_names.get(item.category_id) or DEFAULT_CATEGORY,
                comment=item.comment,
                scope=item.scope,
                purchased=item.purchased,
            )
            for item in items
        ],
    )


def _import_item(store: ListStore, list_id: str, item: ShareItem) -> Item:
    category = store.ensure_category(item.category or DEFAULT_CATEGORY)
    unit = store.ensure_unit(item.unit or DEFAULT_UNIT)
    product = store.ensure_product(item.name, category.id, unit.id)
    return store.create_item(list_id, {
        "product_id": product.id,
        "name": item.name,
        "quantity": item.quantity,
        "unit_id": unit.id,
        "category_id": category.id,
        "comment": item.comment,
        "scope": item.scope,
        "purchased": item.purchased,
    })


def apply_share_payload(store: ListStore, payload: SharePayload, mode: str = "new",
                        target_list_id: Optional[str] = None) -> ImportResult:
    """Write a decoded payload into the store.

    ``mode='merge'`` with a target id appends to that list; anything else creates
    a new list named after the payload.

    Returns:
        ImportResult with the number of items written before the first failure.

    Raises:
        ListNotFoundError: merge target does not exist.
        ListStoreError: the new list could not be created (nothing was written).
    """
    if mode == "merge" and target_list_id:
        if store.get_list(target_list_id) is None:
            raise ListNotFoundError(f"List not found: {target_list_id}")
        list_id = target_list_id
    else:
        list_id = store.create_list(payload.list_name).id

    total = len(payload.items)
    for imported, item in enumerate(payload.items):
        try:
            _import_item(store, list_id, item)
        except Exception as e:
            logger.error(f"Import into {list_id} stopped after {imported}/{total} items at '{item.name}': {e}")
            return ImportResult(list_id, imported, total, str(e))

    logger.info(f"Imported {total} items into list {list_id}")
    return ImportResult(list_id, total, total)


__all__ = ["ListStore", "ImportResult", "build_share_payload", "apply_share_payload"]
