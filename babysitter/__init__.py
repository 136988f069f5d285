# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    ItemExistsError,
    ItemNotFoundError,
    SitterError,
    ValidationError,
)
from .config import settings
from .ln.types import Undefined, Unset
from .protocols.types import (
    AddOptions,
    Child,
    Element,
    Identifiable,
    IndexedContainer,
)
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

__all__ = (
    "AddOptions",
    "Child",
    "Element",
    "Identifiable",
    "IndexedContainer",
    "ItemExistsError",
    "ItemNotFoundError",
    "SitterError",
    "Undefined",
    "Unset",
    "ValidationError",
    "__version__",
    "logger",
    "settings",
)
