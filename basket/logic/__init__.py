"""Core business logic layer.

Subpackages:
- share: share-payload codec (compaction, compression, transport format detection)
  and the assembler that reads and writes lists through the list store
- catalog: catalog name lookup, suggestions and category guessing
"""
__all__ = ["share", "catalog"]
