# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from ._concepts import Collective, Observable
from .generic.container import AddOptions, IndexedContainer
from .generic.element import Child, Element, Identifiable
from .generic.view import SequenceView

__all__ = (
    "AddOptions",
    "Child",
    "Collective",
    "Element",
    "Identifiable",
    "IndexedContainer",
    "Observable",
    "SequenceView",
)
