"""Share payload codec and the assembler that ties it to the list store.

Quick import:
    from basket.logic.share import encode_share_payload, decode_share_payload
"""
from basket.logic.share.codec import EncodedShare, decode_share_payload, encode_share, encode_share_payload
from basket.logic.share.compression import BinaryCompressor, CompressionCapability, probe_compression

__all__ = [
    "EncodedShare", "encode_share", "encode_share_payload", "decode_share_payload",
    "BinaryCompressor", "CompressionCapability", "probe_compression",
]
