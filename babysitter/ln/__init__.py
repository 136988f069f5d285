from .types import (
    Params,
    Undefined,
    Unset,
    is_sentinel,
    not_sentinel,
)

__all__ = (
    "Params",
    "Undefined",
    "Unset",
    "is_sentinel",
    "not_sentinel",
)
