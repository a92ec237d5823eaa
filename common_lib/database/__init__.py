"""Database contracts and generic adapters."""

from .base import Database, MetaDatabase
from .component_database import ComponentDatabase
from .meta_database import ComponentMetaDatabase
from .shared_queries import SharedQueries

__all__ = [
    "Database",
    "MetaDatabase",
    "ComponentDatabase",
    "ComponentMetaDatabase",
    "SharedQueries",
]
