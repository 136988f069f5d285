# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .container import AddOptions, IndexedContainer
from .element import (
    Child,
    Element,
    Identifiable,
    ensure_hashable,
    get_identity,
    get_owner,
)
from .view import SequenceView

__all__ = (
    "AddOptions",
    "Child",
    "Element",
    "Identifiable",
    "IndexedContainer",
    "SequenceView",
    "ensure_hashable",
    "get_identity",
    "get_owner",
)
