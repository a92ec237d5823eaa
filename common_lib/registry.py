"""Registry base class.

A registry is an in-memory lookup table of configuration-like items keyed by
ID. Each subclass gets its own lazily created singleton via `instance()` and
fills itself in `init()`.
"""
from __future__ import annotations
import logging
import os
from abc import abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)

# Either variable marks a test run; pytest sets the first one itself.
TEST_ENV_VARS = ("PYTEST_CURRENT_TEST", "COMMON_LIB_TESTING")


class Registry(MutableMapping):
    """Keyed store of scalar values or attribute maps.

    Mapping access is provided for convenience: `registry[id] = value` is
    `add_item`, `del registry[id]` is `remove_item`.
    """

    def __init__(self) -> None:
        self._items: Dict[Any, Any] = {}

    @classmethod
    def instance(cls) -> "Registry":
        """Return the singleton for this registry class, creating it on first use."""
        # Look in the class's own namespace so subclasses never share an instance.
        inst = cls.__dict__.get("_instance")
        if inst is None:
            inst = cls()
            cls._instance = inst
            inst.init()
            logger.debug("Initialized %s with %d item(s)", cls.__name__, len(inst))
        return inst

    @abstractmethod
    def init(self) -> None:
        """Populate the registry. Called once when the singleton is created."""

    def add_item(self, item_id: Any, value_or_atts: Any) -> bool:
        """Add an item.

        A mapping is merged into any attributes already registered for
        `item_id`; any other value overwrites the item. Always returns True.
        """
        if isinstance(value_or_atts, Mapping):
            existing = self._items.get(item_id)
            if not isinstance(existing, dict):
                existing = {}
                self._items[item_id] = existing
            for attribute, value in value_or_atts.items():
                existing[attribute] = value
        else:
            self._items[item_id] = value_or_atts
        return True

    def remove_item(self, item_id: Any) -> None:
        self._items.pop(item_id, None)

    def get(self, item_id: Any, default: Any = None) -> Any:
        return self._items.get(item_id, default)

    def get_items(self) -> Dict[Any, Any]:
        return dict(self._items)

    def get_item_attribute(self, item_id: Any, attribute: str, default: Any = None) -> Any:
        """Return an attribute of an item, or `default`.

        Scalar items return their value whatever `attribute` is asked for.
        """
        if item_id not in self._items:
            return default
        value_or_atts = self._items[item_id]
        if not isinstance(value_or_atts, dict):
            return value_or_atts
        return value_or_atts.get(attribute, default)

    def reset_items(self) -> None:
        """Clear all items. Only honoured while running tests."""
        if not any(os.environ.get(var) for var in TEST_ENV_VARS):
            logger.warning("%s.reset_items() is only intended for use in tests", type(self).__name__)
            return
        self._items.clear()

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __getitem__(self, item_id: Any) -> Any:
        return self._items[item_id]

    def __setitem__(self, item_id: Any, value: Any) -> None:
        self.add_item(item_id, value)

    def __delitem__(self, item_id: Any) -> None:
        self.remove_item(item_id)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
