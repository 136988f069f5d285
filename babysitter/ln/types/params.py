"""Frozen parameter dataclass with sentinel value handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ._sentinel import Undefined, Unset, is_sentinel

__all__ = ("Params",)


@dataclass(slots=True, frozen=True, init=False)
class Params:
    """Immutable parameter container with sentinel value handling.

    Subclasses declare their fields as plain annotations and are built
    from keyword arguments only. Fields that are not given are prefilled
    with `Unset`, so `Unset` always means "not provided".

    Class variables:
    - _none_as_sentinel: Treat None as sentinel (default: False)
    - _strict: Disallow sentinels, require all fields (default: False)
    - _prefill_unset: Auto-fill undefined fields with Unset (default: True)
    """

    _none_as_sentinel: ClassVar[bool] = False
    _strict: ClassVar[bool] = False
    _prefill_unset: ClassVar[bool] = True

    def __init__(self, **kwargs: Any):
        for k, v in kwargs.items():
            if k in self.allowed():
                object.__setattr__(self, k, v)  # Bypass frozen
            else:
                raise ValueError(f"Invalid parameter: {k}")

        self._validate()

    def is_sentinel(self, key: str) -> bool:
        """Check if field contains sentinel value."""
        if key not in self.allowed():
            raise ValueError(f"Invalid parameter: {key}")
        return self._is_sentinel(getattr(self, key, Unset))

    @classmethod
    def _is_sentinel(cls, value: Any) -> bool:
        return is_sentinel(value, none_as_sentinel=cls._none_as_sentinel)

    @classmethod
    def allowed(cls) -> frozenset[str]:
        """Return allowed field names (excludes _ prefixed)."""
        return frozenset(
            i for i in cls.__dataclass_fields__ if not i.startswith("_")
        )

    def _validate(self) -> None:
        for k in self.allowed():
            if self._strict and self._is_sentinel(getattr(self, k, Unset)):
                raise ValueError(f"Missing required parameter: {k}")
            if self._prefill_unset and getattr(self, k, Undefined) is Undefined:
                object.__setattr__(self, k, Unset)

    def to_dict(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Serialize to dict, excluding sentinels and specified keys."""
        data = {}
        exclude = exclude or set()
        for k in sorted(self.allowed()):
            if k not in exclude and not self._is_sentinel(
                v := getattr(self, k, Undefined)
            ):
                data[k] = v
        return data

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().items()))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Params):
            return False
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def with_updates(self, **kwargs: Any) -> Params:
        """Return new instance with updated fields (copy-on-write)."""
        dict_ = self.to_dict()
        dict_.update(kwargs)
        return type(self)(**dict_)
