"""URL-safe Base64 without padding (RFC 4648 section 5)."""
import base64
import binascii
import re

from basket.utilities.constants import BASE64_CHUNK_SIZE
from basket.utilities.exceptions import ShareDecodeError

_URLSAFE_ALPHABET = re.compile(r'[A-Za-z0-9_-]*')

__all__ = ["to_base64url", "from_base64url"]


def to_base64url(data: bytes) -> str:
    """Encode ``data`` chunk by chunk, swap ``+/`` for ``-_`` and drop the ``=`` padding."""
    view = memoryview(data)
    parts = [
        base64.b64encode(view[i:i + BASE64_CHUNK_SIZE]).decode('ascii')
        for i in range(0, len(view), BASE64_CHUNK_SIZE)
    ]
    return ''.join(parts).replace('+', '-').replace('/', '_').rstrip('=')


def from_base64url(text: str) -> bytes:
    """Reverse of :func:`to_base64url`.

    Raises:
        ShareDecodeError: on characters outside the URL-safe alphabet or an impossible length.
    """
    if not isinstance(text, str) or not _URLSAFE_ALPHABET.fullmatch(text):
        raise ShareDecodeError("Base64Url text contains characters outside the URL-safe alphabet")
    padded = text.replace('-', '+').replace('_', '/')
    while len(padded) % 4 != 0:
        padded += '='
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ShareDecodeError(f"Malformed Base64Url text: {e}") from e
