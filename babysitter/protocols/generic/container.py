# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from typing_extensions import Self

from babysitter._errors import ItemNotFoundError, ValidationError
from babysitter.config import MissingPolicy, settings
from babysitter.ln.types import Params, Unset, is_sentinel

from .._concepts import Collective
from .element import ensure_hashable, get_identity, get_owner
from .view import SequenceView

__all__ = (
    "AddOptions",
    "IndexedContainer",
)

T = TypeVar("T")
D = TypeVar("D")

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True, init=False)
class AddOptions(Params):
    """Where and under which extra key `IndexedContainer.add` stores a view.

    Attributes:
        at_position (int): Target position. Clamped to `[0, length]`;
            appended when unset.
        custom_key (Hashable): Extra lookup key for `find_by_custom`.
            None means no key.
    """

    _none_as_sentinel: ClassVar[bool] = True

    at_position: int
    custom_key: Hashable


class IndexedContainer(SequenceView[T], Collective[T], Generic[T]):
    """An ordered collection of child views with O(1) lookups.

    Views are kept in insertion order and indexed by their own
    `identity`, by the `identity` of their `owner` (when they have one)
    and by an optional custom key. Every index maps a key to a position
    in the ordered list, so positional inserts and removals shift the
    stored positions of everything after the affected slot.

    Only `add` and `remove` mutate the container. Callbacks given to
    `apply`, `call` or any projection must not add or remove views on
    the same container while it is being iterated.
    """

    def __init__(
        self,
        views: Iterable[T] | None = None,
        /,
        *,
        on_missing: MissingPolicy | None = None,
    ) -> None:
        self._views: list[T] = []
        self._index_by_identity: dict[Hashable, int] = {}
        self._index_by_owner: dict[Hashable, int] = {}
        self._index_by_custom: dict[Hashable, int] = {}
        self.on_missing: MissingPolicy = (
            on_missing or settings.MISSING_REMOVE_POLICY
        )

        for view in views or ():
            self.add(view)

    @property
    def length(self) -> int:
        """Number of views currently held."""
        return len(self._views)

    def _snapshot(self) -> list[T]:
        return list(self._views)

    def add(
        self,
        view: T,
        options: AddOptions | None = None,
        /,
        *,
        at_position: int | None = Unset,
        custom_key: Hashable | None = Unset,
    ) -> Self:
        """Stores a view, optionally at a position and under a custom key.

        Keyword arguments override the matching fields of `options`.

        Args:
            view: The view to store. Must expose `identity`.
            options (AddOptions | None): Position and custom key.
            at_position (int | None): Target position, clamped to
                `[0, length]`.
            custom_key (Hashable | None): Extra lookup key.

        Returns:
            IndexedContainer: This container, for chaining.

        Raises:
            ValidationError: If the view (or its owner) has no usable
                identity, or `at_position` is not an integer. Nothing is
                stored in that case.
        """
        if options is None:
            options = AddOptions()
        if not isinstance(options, AddOptions):
            raise ValidationError.from_value(
                options, expected="AddOptions", message="Invalid add options."
            )
        overrides = {
            k: v
            for k, v in {
                "at_position": at_position,
                "custom_key": custom_key,
            }.items()
            if not is_sentinel(v)
        }
        if overrides:
            options = options.with_updates(**overrides)

        identity = get_identity(view)
        owner = get_owner(view)
        owner_identity = get_identity(owner) if owner is not None else None
        index = self._resolve_position(options.at_position)
        has_custom = not options.is_sentinel("custom_key")
        if has_custom:
            ensure_hashable(options.custom_key, name="Custom key")

        self._shift_indices(index, 1)
        self._views.insert(index, view)
        self._index_by_identity[identity] = index
        if owner is not None:
            self._index_by_owner[owner_identity] = index
        if has_custom:
            self._index_by_custom[options.custom_key] = index

        logger.debug("Added view %r at position %d", identity, index)
        return self

    def _resolve_position(self, at_position: Any) -> int:
        if is_sentinel(at_position, none_as_sentinel=True):
            return len(self._views)
        if isinstance(at_position, bool) or not isinstance(at_position, int):
            raise ValidationError.from_value(
                at_position,
                expected="int",
                message="Position must be an integer.",
            )
        return min(max(at_position, 0), len(self._views))

    def _shift_indices(self, start: int, delta: int) -> None:
        """Moves every stored position `>= start` by `delta`."""
        for index in (
            self._index_by_identity,
            self._index_by_owner,
            self._index_by_custom,
        ):
            for key, position in index.items():
                if position >= start:
                    index[key] = position + delta

    def remove(self, view: T, /) -> Self:
        """Removes a view and every index entry pointing at it.

        A view that is not in the container is left alone; what happens
        next depends on `on_missing` ("ignore", "warn" or "raise").

        Returns:
            IndexedContainer: This container, for chaining.

        Raises:
            ItemNotFoundError: If the view is not held and `on_missing`
                is "raise".
        """
        identity = get_identity(view)
        index = self._index_by_identity.get(identity)
        if index is None:
            self._handle_missing(identity)
            return self

        del self._index_by_identity[identity]
        # the owner may have been reassigned since the view was added
        for index_map in (self._index_by_owner, self._index_by_custom):
            for key in [k for k, v in index_map.items() if v == index]:
                del index_map[key]

        del self._views[index]
        self._shift_indices(index + 1, -1)

        logger.debug("Removed view %r from position %d", identity, index)
        return self

    def _handle_missing(self, identity: Hashable) -> None:
        match self.on_missing:
            case "raise":
                raise ItemNotFoundError(
                    "View not found in container.",
                    details={"identity": identity},
                )
            case "warn":
                logger.warning(
                    "Ignoring removal of view %r: not in container", identity
                )
            case _:
                pass

    def find_by_identity(self, identity: Hashable, default: D = None) -> T | D:
        """Retrieves a view by its own identity."""
        return self._find(self._index_by_identity, identity, default)

    def find_by_owner(self, owner: Any, default: D = None) -> T | D:
        """Retrieves the view attached to `owner`."""
        try:
            owner_identity = get_identity(owner)
        except ValidationError:
            return default
        return self.find_by_owner_identity(owner_identity, default)

    def find_by_owner_identity(
        self, owner_identity: Hashable, default: D = None
    ) -> T | D:
        """Retrieves the view attached to the owner with this identity."""
        return self._find(self._index_by_owner, owner_identity, default)

    def find_by_custom(self, key: Hashable, default: D = None) -> T | D:
        """Retrieves a view by the custom key it was added with."""
        return self._find(self._index_by_custom, key, default)

    def find_by_position(self, position: int, default: D = None) -> T | D:
        """Retrieves a view by position; negative positions are out of range."""
        if 0 <= position < len(self._views):
            return self._views[position]
        return default

    def _find(self, index: dict[Hashable, int], key: Any, default: D) -> T | D:
        try:
            position = index.get(key)
        except TypeError:
            # unhashable keys can never be indexed
            return default
        if position is None:
            return default
        return self._views[position]

    def apply(self, method: str, args: Iterable[Any] | None = None) -> None:
        """Calls `method` on every view that has it, like `func(*args)`.

        Views without a callable `method` are skipped. The first exception
        raised by a view propagates and the remaining views are not called.
        """
        if isinstance(args, (str, bytes)):
            raise ValidationError.from_value(
                args,
                expected="a list or tuple of arguments",
                message="Arguments must be a sequence, not a string.",
            )
        args = tuple(args or ())
        for view in self._snapshot():
            func = getattr(view, method, None)
            if callable(func):
                func(*args)

    def call(self, method: str, *args: Any) -> None:
        """Calls `method` on every view that has it, passing `args`."""
        self.apply(method, args)

    def __contains__(self, item: Any) -> bool:
        """Checks membership by identity."""
        try:
            identity = get_identity(item)
        except ValidationError:
            return False
        return identity in self._index_by_identity

    def __getitem__(self, position: int) -> T:
        return self._views[position]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(length={len(self._views)})"

    def __iter__(self) -> Iterator[T]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return len(self._views)
