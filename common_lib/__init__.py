"""Shared scaffolding: CRUD contracts, a registry base class and an autoloader."""

from .autoload import Autoloader, autoload, register, unregister
from .database import (
    ComponentDatabase,
    ComponentMetaDatabase,
    Database,
    MetaDatabase,
    SharedQueries,
)
from .errors import AutoloadError, CommonLibError, ObjectError, is_error
from .registry import Registry

__all__ = [
    "Autoloader",
    "autoload",
    "register",
    "unregister",
    "ComponentDatabase",
    "ComponentMetaDatabase",
    "Database",
    "MetaDatabase",
    "SharedQueries",
    "AutoloadError",
    "CommonLibError",
    "ObjectError",
    "is_error",
    "Registry",
]
