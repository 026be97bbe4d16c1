from typing import Final

# Wire format
SHARE_VERSION: Final[int] = 1
COMPRESSED_PREFIX: Final[str] = "B1:"
# Multiple of 3 so that chunked Base64 output concatenates without inner padding
BASE64_CHUNK_SIZE: Final[int] = 3 * 0x2000
# Negative window bits select raw DEFLATE (no zlib/gzip header or trailer)
RAW_DEFLATE_WBITS: Final[int] = -15

# Defaults applied when a field resolves to an empty string
DEFAULT_ITEM_NAME: Final[str] = "Item"
DEFAULT_UNIT: Final[str] = "pcs"
DEFAULT_CATEGORY: Final[str] = "Other"
DEFAULT_LIST_NAME: Final[str] = "Weekly basket"

IMPORT_MODES: Final[tuple[str, ...]] = ("merge", "new")
