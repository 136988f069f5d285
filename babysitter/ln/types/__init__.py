from ._sentinel import (
    SingletonType,
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_sentinel,
    not_sentinel,
)
from .params import Params

__all__ = (
    "Undefined",
    "Unset",
    "SingletonType",
    "UndefinedType",
    "UnsetType",
    "is_sentinel",
    "not_sentinel",
    "Params",
)
