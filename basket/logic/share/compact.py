"""Compact tuple codec.

Wire shape::

    [1, listName, ["", "<entry>", ...], [[nameIdx, qty, unitIdx, categoryIdx, commentIdx, scopeIdx, purchased], ...]]

Field order inside an item tuple, and the order in which fields are pushed
through the dictionary, are part of the wire format.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from basket.domain.SharePayload import ShareItem, SharePayload
from basket.logic.share.dictionary import DictionaryCompactor
from basket.utilities.constants import DEFAULT_CATEGORY, DEFAULT_ITEM_NAME, DEFAULT_UNIT, SHARE_VERSION
from basket.utilities.validators import is_finite_number, is_number, well_formed_text

logger = logging.getLogger(__name__)

Number = Union[int, float]
CompactItem = Tuple[int, Number, int, int, int, int, int]
CompactPayload = List[Any]

ITEM_ARITY = 7

__all__ = ["compact", "expand", "CompactPayload", "CompactItem", "ITEM_ARITY"]


def compact(payload: SharePayload) -> CompactPayload:
    """Turn a SharePayload into the dictionary-indexed 4-element form."""
    dictionary = DictionaryCompactor()
    items: List[List[Number]] = []
    for item in payload.items:
        items.append([
            dictionary.index_of(item.name),
            item.quantity,
            dictionary.index_of(item.unit),
            dictionary.index_of(item.category),
            dictionary.index_of(item.comment or ''),
            dictionary.index_of(item.scope or ''),
            1 if item.purchased else 0,
        ])
    return [SHARE_VERSION, payload.list_name, dictionary.entries, items]


def _lookup(dictionary: Sequence[str], index: Number) -> str:
    # Out of range, negative or fractional indexes resolve to ''
    if isinstance(index, float):
        if not index.is_integer():
            return ''
        index = int(index)
    if 0 <= index < len(dictionary):
        return dictionary[index]
    return ''


def _valid_item(item: Any) -> bool:
    if not isinstance(item, list) or len(item) != ITEM_ARITY:
        return False
    if not all(is_number(value) for value in item):
        return False
    return is_finite_number(item[1])


def expand(value: Any) -> Optional[SharePayload]:
    """Validate and expand a compact payload; None when the shape is wrong.

    Trailing elements beyond the fourth are ignored. Empty lookups fall back to
    "Item" / "pcs" / "Other" for name / unit / category. Lone surrogates in any
    text become U+FFFD so the result can always be re-encoded as UTF-8.
    """
    if not isinstance(value, list) or len(value) < 4:
        logger.debug("Compact payload rejected: not a 4-element array")
        return None
    version, list_name, dictionary, items = value[:4]
    if not is_number(version) or version != SHARE_VERSION:
        logger.debug("Compact payload rejected: unsupported version %r", version)
        return None
    if not isinstance(dictionary, list) or not isinstance(list_name, str) or not isinstance(items, list):
        logger.debug("Compact payload rejected: bad top-level shape")
        return None
    if not all(isinstance(entry, str) for entry in dictionary):
        logger.debug("Compact payload rejected: non-text dictionary entry")
        return None
    if not all(_valid_item(item) for item in items):
        logger.debug("Compact payload rejected: malformed item tuple")
        return None

    dictionary = [well_formed_text(entry) for entry in dictionary]
    expanded = [
        ShareItem(
            name=_lookup(dictionary, item[0]) or DEFAULT_ITEM_NAME,
            quantity=item[1],
            unit=_lookup(dictionary, item[2]) or DEFAULT_UNIT,
            category=_lookup(dictionary, item[3]) or DEFAULT_CATEGORY,
            comment=_lookup(dictionary, item[4]),
            scope=_lookup(dictionary, item[5]),
            purchased=item[6] == 1,
        )
        for item in items
    ]
    return SharePayload(list_name=well_formed_text(list_name), items=expanded)
