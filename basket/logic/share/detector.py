"""Format detection for incoming transport strings.

A transport string is one of three shapes. :func:`classify_transport` decides
which one it is (prefix first, then the top-level JSON type) and
:func:`decode_transport` runs the matching decode path. Nothing in this module
raises to its caller: every failure comes back as ``None``.
"""
from __future__ import annotations

import json
import logging
from typing import Any, NamedTuple, Optional, Union

from pydantic import ValidationError

from basket.domain.SharePayload import ShareItem, SharePayload
from basket.logic.share.base64url import from_base64url
from basket.logic.share.compact import expand
from basket.logic.share.compression import BinaryCompressor
from basket.utilities.constants import COMPRESSED_PREFIX
from basket.utilities.validators import SharePayloadInput

logger = logging.getLogger(__name__)


class Compressed(NamedTuple):
    """``B1:`` + Base64Url of raw-DEFLATE compressed compact JSON."""
    encoded: str


class CompactArray(NamedTuple):
    """Plain JSON array in the compact tuple layout."""
    value: list


class FullObject(NamedTuple):
    """Plain JSON in the full field-by-field layout (any non-array JSON value)."""
    value: Any


class Unrecognized(NamedTuple):
    reason: str


TransportFormat = Union[Compressed, CompactArray, FullObject, Unrecognized]


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json(text: str) -> Any:
    """json.loads that refuses NaN / Infinity, which are not JSON numbers."""
    return json.loads(text, parse_constant=_reject_constant)


def classify_transport(raw: str) -> TransportFormat:
    if not isinstance(raw, str):
        return Unrecognized("transport payload is not text")
    if raw.startswith(COMPRESSED_PREFIX):
        return Compressed(raw[len(COMPRESSED_PREFIX):])
    try:
        parsed = parse_json(raw)
    except (ValueError, RecursionError) as e:
        return Unrecognized(f"not JSON: {e}")
    if isinstance(parsed, list):
        return CompactArray(parsed)
    return FullObject(parsed)


def _decode_compressed(encoded: str, compressor: BinaryCompressor) -> Optional[SharePayload]:
    compressed = from_base64url(encoded)
    decompressed = compressor.decompress(compressed)
    try:
        text = decompressed.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug("Compressed payload rejected: not UTF-8 (%s)", e)
        return None
    return expand(parse_json(text))


def validate_full_payload(value: Any) -> Optional[SharePayload]:
    """Check every field of a full payload object; None on the first mismatch."""
    try:
        checked = SharePayloadInput.model_validate(value)
    except ValidationError as e:
        logger.debug("Full payload rejected: %s", e.errors(include_url=False)[:1])
        return None
    return SharePayload(
        list_name=checked.list_name,
        items=[ShareItem(**item.model_dump()) for item in checked.items],
    )


def decode_transport(raw: str, compressor: BinaryCompressor) -> Optional[SharePayload]:
    fmt = classify_transport(raw)
    try:
        if isinstance(fmt, Compressed):
            return _decode_compressed(fmt.encoded, compressor)
        if isinstance(fmt, CompactArray):
            # Accepted even when the sender could have compressed
            return expand(fmt.value)
        if isinstance(fmt, FullObject):
            return validate_full_payload(fmt.value)
    except Exception as e:
        logger.debug("Share payload rejected (%s): %s", type(fmt).__name__, e)
        return None
    logger.debug("Share payload rejected: %s", fmt.reason)
    return None


__all__ = [
    "Compressed", "CompactArray", "FullObject", "Unrecognized", "TransportFormat",
    "classify_transport", "decode_transport", "validate_full_payload", "parse_json",
]
