"""Memory-backed object and meta stores.

`MemoryObjectStore` keeps records as `{<object_id>: <record>}` and
`MemoryMetaStore` keeps meta as `{<object_id>: {<meta_key>: <value>}}`.
Both satisfy the store protocols in `common_lib.database.interfaces` and are
used as stand-ins for a real storage layer.
"""
from copy import deepcopy
from itertools import count
from threading import RLock
from typing import Dict, Any, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

# Query arguments with a meaning other than "field equals value".
RESERVED_QUERY_ARGS = ("fields", "number")


class MemoryObjectStore:
    def __init__(self):
        self._lock = RLock()
        self._store: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)

    def get_object(self, object_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._store.get(object_id)
            return deepcopy(record) if record is not None else None

    def get_objects(self, args: Mapping[str, Any]) -> list:
        filters = {k: v for k, v in args.items() if k not in RESERVED_QUERY_ARGS}
        with self._lock:
            matches = [
                deepcopy(record)
                for _, record in sorted(self._store.items())
                if all(record.get(k) == v for k, v in filters.items())
            ]
        number = args.get("number")
        if number is not None and number >= 0:
            matches = matches[:number]
        field = args.get("fields")
        if field:
            return [record.get(field) for record in matches]
        return matches

    def add_object(self, data: Mapping[str, Any]) -> int:
        if not isinstance(data, Mapping):
            logger.debug("Refusing to add non-mapping record %r", data)
            return 0
        with self._lock:
            object_id = next(self._ids)
            record = deepcopy(dict(data))
            record["id"] = object_id
            self._store[object_id] = record
        return object_id

    def update_object(self, object_id: int, data: Mapping[str, Any]) -> int:
        if not isinstance(data, Mapping):
            return 0
        with self._lock:
            record = self._store.get(object_id)
            if record is None:
                return 0
            record.update(deepcopy(dict(data)))
            record["id"] = object_id
        return object_id

    def delete_object(self, object_id: int) -> bool:
        with self._lock:
            return self._store.pop(object_id, None) is not None


class MemoryMetaStore:
    def __init__(self):
        self._lock = RLock()
        self._store: Dict[int, Dict[str, Any]] = {}

    def get_meta(self, object_id: int, meta_key: str = '') -> Any:
        with self._lock:
            meta = self._store.get(object_id, {})
            if not meta_key:
                return deepcopy(meta)
            return deepcopy(meta.get(meta_key))

    def add_meta(self, object_id: int, meta_key: str, value: Any) -> bool:
        with self._lock:
            meta = self._store.setdefault(object_id, {})
            if meta_key in meta:
                return False
            meta[meta_key] = deepcopy(value)
        return True

    def update_meta(self, object_id: int, meta_key: str, value: Any) -> bool:
        with self._lock:
            self._store.setdefault(object_id, {})[meta_key] = deepcopy(value)
        return True

    def delete_meta(self, object_id: int, meta_key: str) -> bool:
        with self._lock:
            meta = self._store.get(object_id)
            if not meta or meta_key not in meta:
                return False
            del meta[meta_key]
            if not meta:
                del self._store[object_id]
        return True
