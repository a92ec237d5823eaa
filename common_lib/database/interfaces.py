from typing import Protocol, Any, Mapping, Optional, runtime_checkable


@runtime_checkable
class DatabaseProtocol(Protocol):
    """CRUD protocol mirroring `common_lib.database.base.Database`.

    Implementations should follow the sentinel semantics documented on the
    abstract base class (0 / False / ObjectError on failure, no exceptions).
    """

    def get(self, object_id: int) -> Any: ...

    def query(self, args: Optional[Mapping[str, Any]] = None) -> list: ...

    def add(self, data: Mapping[str, Any]) -> int: ...

    def update(self, object_id: int, data: Mapping[str, Any]) -> int: ...

    def delete(self, object_id: int) -> bool: ...


@runtime_checkable
class MetaDatabaseProtocol(Protocol):
    """Meta CRUD protocol mirroring `common_lib.database.base.MetaDatabase`."""

    def get(self, object_id: int, meta_key: str = '', default: Any = '') -> Any: ...

    def add(self, object_id: int, meta_key: str, value: Any) -> bool: ...

    def update(self, object_id: int, meta_key: str, value: Any) -> bool: ...

    def delete(self, object_id: int, meta_key: str) -> bool: ...


@runtime_checkable
class ObjectStoreProtocol(Protocol):
    """The external record store a `ComponentDatabase` delegates to.

    `get_object` returns None for unknown IDs, `add_object`/`update_object`
    return 0 on failure and `delete_object` returns a falsy value when
    nothing was deleted.
    """

    def get_object(self, object_id: int) -> Optional[Any]: ...

    def get_objects(self, args: Mapping[str, Any]) -> list: ...

    def add_object(self, data: Mapping[str, Any]) -> int: ...

    def update_object(self, object_id: int, data: Mapping[str, Any]) -> int: ...

    def delete_object(self, object_id: int) -> Any: ...


@runtime_checkable
class MetaStoreProtocol(Protocol):
    """The external meta store a `ComponentMetaDatabase` delegates to."""

    def get_meta(self, object_id: int, meta_key: str = '') -> Any: ...

    def add_meta(self, object_id: int, meta_key: str, value: Any) -> bool: ...

    def update_meta(self, object_id: int, meta_key: str, value: Any) -> bool: ...

    def delete_meta(self, object_id: int, meta_key: str) -> bool: ...
