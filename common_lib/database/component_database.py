"""Generic CRUD adapter over an external object store."""
from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

from common_lib.errors import ObjectError
from .base import Database
from .interfaces import ObjectStoreProtocol
from .shared_queries import SharedQueries

logger = logging.getLogger(__name__)


class ComponentDatabase(SharedQueries, Database):
    """Manages CRUD operations for one component by delegating to `store`.

    Store exceptions propagate; store sentinels (None, 0, falsy) are mapped
    to the `Database` sentinels.
    """

    def __init__(self, store: ObjectStoreProtocol, name: str = "component") -> None:
        self.store = store
        self.name = name
        self.reset_query()

    def get(self, object_id: int) -> Any:
        obj = self.store.get_object(object_id)
        if obj is None:
            logger.debug("%s %s not found", self.name, object_id)
            return ObjectError("invalid_object_id", f"Invalid {self.name} ID: {object_id}", {"object_id": object_id})
        return obj

    def query(self, args: Optional[Mapping[str, Any]] = None) -> list:
        cached = self.consume_current_query(args)
        if cached is not None:
            return cached
        return list(self.store.get_objects(dict(args or {})))

    def add(self, data: Mapping[str, Any]) -> int:
        object_id = self.store.add_object(data) or 0
        if not object_id:
            logger.warning("Failed to add %s record", self.name)
        else:
            logger.debug("Added %s %s", self.name, object_id)
        return int(object_id)

    def update(self, object_id: int, data: Mapping[str, Any]) -> int:
        updated = self.store.update_object(object_id, data) or 0
        if not updated:
            logger.debug("Update of %s %s failed", self.name, object_id)
        return int(updated)

    def delete(self, object_id: int) -> bool:
        deleted = bool(self.store.delete_object(object_id))
        logger.debug("Delete %s %s: %s", self.name, object_id, deleted)
        return deleted
