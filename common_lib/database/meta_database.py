"""Generic meta adapter over an external meta store."""
from __future__ import annotations
import logging
from typing import Any

from .base import MetaDatabase
from .interfaces import MetaStoreProtocol

logger = logging.getLogger(__name__)


class ComponentMetaDatabase(MetaDatabase):
    def __init__(self, store: MetaStoreProtocol) -> None:
        self.store = store

    def get(self, object_id: int, meta_key: str = '', default: Any = '') -> Any:
        value = self.store.get_meta(object_id, meta_key)
        # Empty dict means the object has no meta at all.
        if value is None or (not meta_key and not value):
            return default
        return value

    def add(self, object_id: int, meta_key: str, value: Any) -> bool:
        if not meta_key:
            return False
        return bool(self.store.add_meta(object_id, meta_key, value))

    def update(self, object_id: int, meta_key: str, value: Any) -> bool:
        if not meta_key:
            return False
        return bool(self.store.update_meta(object_id, meta_key, value))

    def delete(self, object_id: int, meta_key: str) -> bool:
        deleted = bool(self.store.delete_meta(object_id, meta_key))
        logger.debug("Delete meta %s for %s: %s", meta_key, object_id, deleted)
        return deleted
