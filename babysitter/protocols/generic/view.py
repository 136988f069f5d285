# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Read-only collection helpers shared by ordered containers.

Every helper works on a fresh snapshot of the current views, so the
container and its indices are never touched. Callbacks receive one view
at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

__all__ = ("SequenceView",)

T = TypeVar("T")
R = TypeVar("R")


class SequenceView(ABC, Generic[T]):

    @abstractmethod
    def _snapshot(self) -> list[T]:
        """Returns a shallow copy of the views in order."""

    def for_each(self, func: Callable[[T], Any], /) -> None:
        for view in self._snapshot():
            func(view)

    each = for_each

    def map(self, func: Callable[[T], R], /) -> list[R]:
        return [func(view) for view in self._snapshot()]

    def find(self, predicate: Callable[[T], Any], /, default: Any = None):
        """Returns the first view matching `predicate`, else `default`."""
        for view in self._snapshot():
            if predicate(view):
                return view
        return default

    detect = find

    def filter(self, predicate: Callable[[T], Any], /) -> list[T]:
        return [view for view in self._snapshot() if predicate(view)]

    select = filter

    def reject(self, predicate: Callable[[T], Any], /) -> list[T]:
        return [view for view in self._snapshot() if not predicate(view)]

    def every(self, predicate: Callable[[T], Any] | None = None, /) -> bool:
        """True if `predicate` (or truthiness) holds for every view."""
        predicate = predicate or bool
        return all(predicate(view) for view in self._snapshot())

    all = every

    def any(self, predicate: Callable[[T], Any] | None = None, /) -> bool:
        """True if `predicate` (or truthiness) holds for at least one view."""
        predicate = predicate or bool
        for view in self._snapshot():
            if predicate(view):
                return True
        return False

    some = any

    def contains(self, value: Any, /) -> bool:
        return value in self._snapshot()

    include = contains

    def invoke(self, method: str, /, *args: Any, **kwargs: Any) -> list[Any]:
        """Calls `method` on each view and collects the results.

        Views without a callable `method` contribute None.
        """
        out = []
        for view in self._snapshot():
            func = getattr(view, method, None)
            out.append(func(*args, **kwargs) if callable(func) else None)
        return out

    def to_array(self) -> list[T]:
        return self._snapshot()

    to_list = to_array

    def first(self, n: int | None = None, /):
        """The first view (None when empty), or a list of the first `n`."""
        views = self._snapshot()
        if n is None:
            return views[0] if views else None
        return views[: max(n, 0)]

    def initial(self, n: int = 1, /) -> list[T]:
        """Every view except the last `n`."""
        views = self._snapshot()
        return views[: max(len(views) - n, 0)]

    def rest(self, n: int = 1, /) -> list[T]:
        """Every view except the first `n`."""
        return self._snapshot()[max(n, 0) :]

    def last(self, n: int | None = None, /):
        """The last view (None when empty), or a list of the last `n`."""
        views = self._snapshot()
        if n is None:
            return views[-1] if views else None
        if n <= 0:
            return []
        return views[-n:]

    def without(self, *values: Any) -> list[T]:
        return [view for view in self._snapshot() if view not in values]

    def is_empty(self) -> bool:
        return not self._snapshot()

    def pluck(self, name: str, /) -> list[Any]:
        """Collects attribute `name` from each view (None where missing)."""
        return [getattr(view, name, None) for view in self._snapshot()]
