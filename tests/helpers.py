from typing import Any, Mapping

from common_lib.storage.memory_backend import MemoryObjectStore


class CountingObjectStore(MemoryObjectStore):
    """Memory object store that counts `get_objects` calls.

    Usage in tests:
        from tests.helpers import CountingObjectStore
        store = CountingObjectStore()
        ...
        assert store.queries == 1
    """

    def __init__(self) -> None:
        super().__init__()
        self.queries = 0

    def get_objects(self, args: Mapping[str, Any]) -> list:
        self.queries += 1
        return super().get_objects(args)


def seeded_store(*records: Mapping[str, Any]) -> CountingObjectStore:
    store = CountingObjectStore()
    for record in records:
        store.add_object(record)
    return store
