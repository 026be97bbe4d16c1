"""Binary compressor adapter: raw DEFLATE with explicit capability and graceful fallback.

Whether compression is available is decided once by :func:`probe_compression`
and handed to :class:`BinaryCompressor`, so callers (and tests) can run the
codec in either mode deterministically.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from basket.utilities.config import MAX_DECOMPRESSED_BYTES, SHARE_COMPRESSION, SHARE_COMPRESSION_LEVEL
from basket.utilities.constants import RAW_DEFLATE_WBITS
from basket.utilities.exceptions import CompressionUnavailableError, ShareDecodeError

logger = logging.getLogger(__name__)

# zlib is an optional build module of CPython
try:
    import zlib
    _HAS_ZLIB = True
except ImportError:
    zlib = None
    _HAS_ZLIB = False


class CompressionCapability(NamedTuple):
    available: bool
    level: int = SHARE_COMPRESSION_LEVEL
    max_output: int = MAX_DECOMPRESSED_BYTES


class CompressionOutcome(Enum):
    COMPRESSED = "compressed"
    UNCHANGED = "unchanged"


class CompressionResult(NamedTuple):
    outcome: CompressionOutcome
    data: bytes

    @property
    def compressed(self) -> bool:
        return self.outcome is CompressionOutcome.COMPRESSED


def probe_compression(mode: str = SHARE_COMPRESSION, level: int = SHARE_COMPRESSION_LEVEL) -> CompressionCapability:
    """Detect raw DEFLATE support; ``mode='off'`` disables it regardless of the platform."""
    available = _HAS_ZLIB and mode != "off"
    if not available:
        logger.info("Raw DEFLATE unavailable (zlib=%s, mode=%s); share payloads will be sent uncompressed", _HAS_ZLIB, mode)
    return CompressionCapability(available=available, level=level)


class BinaryCompressor:
    def __init__(self, capability: CompressionCapability | None = None):
        self.capability = capability if capability is not None else probe_compression()

    @property
    def available(self) -> bool:
        return self.capability.available

    def compress(self, data: bytes) -> CompressionResult:
        """Raw-DEFLATE ``data``; without the capability return it untouched as UNCHANGED."""
        if not self.available:
            return CompressionResult(CompressionOutcome.UNCHANGED, data)
        compressor = zlib.compressobj(self.capability.level, zlib.DEFLATED, RAW_DEFLATE_WBITS)
        out = compressor.compress(data) + compressor.flush()
        return CompressionResult(CompressionOutcome.COMPRESSED, out)

    def decompress(self, data: bytes) -> bytes:
        """Inflate raw-DEFLATE ``data``.

        Raises:
            CompressionUnavailableError: the capability is absent; the bytes have no other reading.
            ShareDecodeError: the stream is corrupt, truncated or inflates past ``max_output`` bytes.
        """
        if not self.available:
            raise CompressionUnavailableError("Raw DEFLATE decompression is not available on this platform")
        limit = self.capability.max_output
        decompressor = zlib.decompressobj(RAW_DEFLATE_WBITS)
        try:
            out = decompressor.decompress(data, limit + 1)
        except zlib.error as e:
            raise ShareDecodeError(f"Corrupt DEFLATE stream: {e}") from e
        if len(out) > limit or decompressor.unconsumed_tail:
            raise ShareDecodeError(f"DEFLATE stream inflates past {limit} bytes")
        if not decompressor.eof:
            raise ShareDecodeError("Truncated DEFLATE stream")
        return out


__all__ = [
    "BinaryCompressor", "CompressionCapability", "CompressionOutcome",
    "CompressionResult", "probe_compression",
]
