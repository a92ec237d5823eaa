"""Error values and exceptions shared by the common_lib packages.

CRUD and meta operations report failure through sentinel values (0, False or
an `ObjectError`) rather than raising. Exceptions are reserved for loader
failures and programming mistakes.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObjectError:
    """Error value returned in place of a record, e.g. for an unknown ID."""

    code: str
    message: str = ""
    data: Any = field(default=None, compare=False)

    def __bool__(self) -> bool:
        return False


def is_error(value: Any) -> bool:
    return isinstance(value, ObjectError)


class CommonLibError(Exception):
    """Base exception for common_lib"""
    pass


class AutoloadError(CommonLibError):
    """Raised when an autoload target exists but can't be executed"""
    pass
