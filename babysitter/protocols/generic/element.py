# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from babysitter._errors import ValidationError

from .._concepts import Observable

__all__ = (
    "Child",
    "Element",
    "Identifiable",
    "ensure_hashable",
    "get_identity",
    "get_owner",
)


@runtime_checkable
class Identifiable(Protocol):
    """Anything with a stable, hashable `identity`."""

    @property
    def identity(self) -> Hashable: ...


@runtime_checkable
class Child(Identifiable, Protocol):
    """An element a container can hold: an identity and an optional owner."""

    @property
    def owner(self) -> Identifiable | None: ...


def get_identity(obj: Any, /) -> Hashable:
    """Returns `obj.identity`.

    Raises:
        ValidationError: If `obj` has no identity or it is unhashable.
    """
    try:
        identity = obj.identity
    except AttributeError as e:
        raise ValidationError.from_value(
            obj,
            expected="an object exposing `identity`",
            message="Object has no identity.",
            cause=e,
        )
    return ensure_hashable(identity, name="Identity")


def ensure_hashable(value: Any, /, *, name: str = "Key") -> Hashable:
    """Returns `value` if it can be used as a dict key.

    Raises:
        ValidationError: If hashing `value` fails, including tuples that
            hold unhashable items.
    """
    try:
        hash(value)
    except TypeError as e:
        raise ValidationError.from_value(
            value,
            expected=f"a hashable {name.lower()}",
            message=f"{name} must be hashable.",
            cause=e,
        )
    return value


def get_owner(obj: Any, /) -> Any | None:
    """Returns the owner of `obj`, or None when it has none."""
    return getattr(obj, "owner", None)


class Element(BaseModel, Observable):
    """A pydantic base satisfying the `Child` contract.

    Subclass it to get a uuid4 identity and an optional owner. Any object
    exposing `identity` works as an owner.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_attribute_docstrings=True,
        validate_assignment=True,
    )

    identity: UUID = Field(default_factory=uuid4, frozen=True)
    """A unique identifier for the element."""

    owner: Any = None
    """The object this element represents, if any."""

    @field_validator("identity", mode="before")
    def _validate_identity(cls, value: Any) -> UUID:
        if isinstance(value, UUID):
            return value
        if isinstance(value, str):
            try:
                return UUID(value)
            except Exception as e:
                raise ValueError(f"Invalid UUID string: {value}") from e
        raise ValueError(f"Invalid type for identity: {type(value)}")

    @field_validator("owner", mode="before")
    def _validate_owner(cls, value: Any) -> Any:
        if value is None:
            return None
        if not hasattr(value, "identity"):
            raise ValueError(
                f"Owner of type {type(value).__name__} has no identity."
            )
        return value

    def __bool__(self) -> bool:
        """Elements are always considered truthy."""
        return True

    def __hash__(self) -> int:
        return hash(self.identity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.identity == other.identity
