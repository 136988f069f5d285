from __future__ import annotations

from typing import Any, Final, Literal

__all__ = (
    "SingletonType",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "is_sentinel",
    "not_sentinel",
)


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Sentinels keep their identity across copies, are falsy, and print
    their own name.
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class UndefinedType(SingletonType):
    """Sentinel for a key that does not exist at all.

    Example:
        >>> d = {"a": 1}
        >>> d.get("b", Undefined) is Undefined
        True
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __str__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        return "Undefined"


class UnsetType(SingletonType):
    """Sentinel for a parameter that exists but was not given a value.

    Lets callers tell "not provided" apart from an explicit None.
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Unset"]:
        return "Unset"

    def __str__(self) -> Literal["Unset"]:
        return "Unset"

    def __reduce__(self):
        return "Unset"


Undefined: Final = UndefinedType()
"""A key or field entirely missing from a namespace"""
Unset: Final = UnsetType()
"""A key present but value not yet provided."""

def is_sentinel(value: Any, *, none_as_sentinel: bool = False) -> bool:
    """Check if a value is a sentinel (Undefined or Unset).

    Args:
        value: Any value to check.
        none_as_sentinel: Also treat None as a sentinel.
    """
    if isinstance(value, (UndefinedType, UnsetType)):
        return True
    return none_as_sentinel and value is None


def not_sentinel(value: Any, *, none_as_sentinel: bool = False) -> bool:
    """Check if a value is NOT a sentinel. Useful for filtering operations."""
    return not is_sentinel(value, none_as_sentinel=none_as_sentinel)
