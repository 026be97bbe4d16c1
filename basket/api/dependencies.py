"""Shared FastAPI dependencies: the list store and the probed compressor."""
from functools import lru_cache

from basket.infra.List_Repository import ListRepository
from basket.logic.share.compression import BinaryCompressor, probe_compression


def get_repository() -> ListRepository:
    return ListRepository()


@lru_cache(maxsize=1)
def get_compressor() -> BinaryCompressor:
    """Compression capability is probed once per process."""
    return BinaryCompressor(probe_compression())
