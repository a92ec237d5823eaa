"""Database contract definitions.

Defines the `Database` and `MetaDatabase` abstract classes every storage
adapter implements. Failure is always reported with a sentinel return value
(0, False or an `ObjectError`), never by raising.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class Database(ABC):
    """CRUD methods all component database classes must have."""

    @abstractmethod
    def get(self, object_id: int) -> Any:
        """Return the object for `object_id`.

        Should return an `ObjectError` if the object does not exist.
        """

    @abstractmethod
    def query(self, args: Optional[Mapping[str, Any]] = None) -> list:
        """Return a list of objects (or fields) matching `args`, possibly empty."""

    @abstractmethod
    def add(self, data: Mapping[str, Any]) -> int:
        """Add a new object and return its ID, or 0 on failure."""

    @abstractmethod
    def update(self, object_id: int, data: Mapping[str, Any]) -> int:
        """Update an object and return its ID, or 0 on failure."""

    @abstractmethod
    def delete(self, object_id: int) -> bool:
        """Delete an object. Return False if nothing was deleted."""


class MetaDatabase(ABC):
    """CRUD methods all meta database classes must have."""

    @abstractmethod
    def get(self, object_id: int, meta_key: str = '', default: Any = '') -> Any:
        """Return the meta value for `meta_key`, or `default` if unset.

        An empty `meta_key` returns all meta for the object.
        """

    @abstractmethod
    def add(self, object_id: int, meta_key: str, value: Any) -> bool:
        """Record a meta value. Return True if it was stored."""

    @abstractmethod
    def update(self, object_id: int, meta_key: str, value: Any) -> bool:
        """Record a new meta value. Return True if it was stored."""

    @abstractmethod
    def delete(self, object_id: int, meta_key: str) -> bool:
        """Delete a meta value. Return False if nothing was deleted."""
