"""Custom exceptions"""


class BasketError(Exception):
    """Base class for errors raised by the basket package."""


class ShareDecodeError(BasketError):
    """Raised when a transport string cannot be turned back into bytes or text."""


class CompressionUnavailableError(BasketError):
    """Raised when a compressed payload arrives but raw DEFLATE is not available."""


class ListNotFoundError(BasketError):
    """Raised when a requested list ID is invalid or does not exist."""


class ListStoreError(BasketError):
    """Raised when the list store cannot be read or written."""
