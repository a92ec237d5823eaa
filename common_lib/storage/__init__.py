"""In-memory stand-ins for the external storage layer."""

from .memory_backend import MemoryMetaStore, MemoryObjectStore

__all__ = ["MemoryObjectStore", "MemoryMetaStore"]
