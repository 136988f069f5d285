# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

E = TypeVar("E")


__all__ = (
    "Observable",
    "Collective",
)


class Observable(ABC):
    """Observable entities must define 'identity'."""


class Collective(Observable, Generic[E]):
    """Base for collections of elements."""

    @abstractmethod
    def add(self, item, /, *args, **kwargs):
        pass

    @abstractmethod
    def remove(self, item, /):
        pass
