"""Share payload codec: SharePayload <-> transport string.

Encode: payload -> compact tuple -> UTF-8 JSON -> raw DEFLATE -> ``B1:`` + Base64Url.
When the compressor is unavailable the compact JSON itself is the transport string.
"""
from __future__ import annotations

import json
import logging
from typing import NamedTuple, Optional

from basket.domain.SharePayload import SharePayload
from basket.logic.share.base64url import to_base64url
from basket.logic.share.compact import compact
from basket.logic.share.compression import BinaryCompressor
from basket.logic.share.detector import decode_transport
from basket.utilities.constants import COMPRESSED_PREFIX

logger = logging.getLogger(__name__)


class EncodedShare(NamedTuple):
    transport: str
    compressed: bool


def _compact_json(payload: SharePayload) -> str:
    return json.dumps(compact(payload), separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def encode_share(payload: SharePayload, compressor: Optional[BinaryCompressor] = None) -> EncodedShare:
    """Encode ``payload`` and report whether compression was applied."""
    compressor = compressor or BinaryCompressor()
    text = _compact_json(payload)
    result = compressor.compress(text.encode('utf-8'))
    if not result.compressed:
        return EncodedShare(text, False)
    return EncodedShare(f"{COMPRESSED_PREFIX}{to_base64url(result.data)}", True)


def encode_share_payload(payload: SharePayload, compressor: Optional[BinaryCompressor] = None) -> str:
    return encode_share(payload, compressor).transport


def decode_share_payload(raw: str, compressor: Optional[BinaryCompressor] = None) -> Optional[SharePayload]:
    """Decode a transport string of unknown origin. Returns None for anything invalid; never raises."""
    return decode_transport(raw, compressor or BinaryCompressor())


__all__ = ["EncodedShare", "encode_share", "encode_share_payload", "decode_share_payload"]
