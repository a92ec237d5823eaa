"""Mixin that lets a has_* check reuse its query for later iteration.

Usage::

    if component.has_items(args):
        # Served from the query cached by has_items().
        items = component.query(args)

The cached slot remembers the args it was filled for, so a `query` with
different args never sees a stale result.
"""
from typing import Any, Mapping, Optional
import logging

logger = logging.getLogger(__name__)


class SharedQueries:
    """Single cached query slot for classes that define `query(args)`."""

    _current_query: list = []
    _current_args: Optional[dict] = None

    def set_current_query(self, query: list, args: Optional[Mapping[str, Any]] = None) -> None:
        self._current_query = query
        self._current_args = dict(args or {})

    def get_current_query(self) -> list:
        return self._current_query

    def reset_query(self) -> None:
        """Reset the current query. Call after the query has been consumed."""
        self._current_query = []
        self._current_args = None

    def consume_current_query(self, args: Optional[Mapping[str, Any]] = None) -> Optional[list]:
        """Return the cached result for `args` and reset the slot.

        Returns None if the slot is empty or was filled for different args.
        The slot is reset in both cases.
        """
        cached = self._current_query
        matches = self._current_args == dict(args or {})
        self.reset_query()
        if cached and matches:
            logger.debug("Serving %d cached result(s) for %r", len(cached), args)
            return cached
        return None

    def has_items(self, args: Optional[Mapping[str, Any]] = None) -> bool:
        """Return True if `query(args)` has any results, caching them."""
        self.reset_query()
        self.set_current_query(self.query(args), args)  # type: ignore[attr-defined]
        return bool(self.get_current_query())
