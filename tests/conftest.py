# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import Field

from babysitter import Element, IndexedContainer


class Model(Element):
    """Stands in for the object a view renders."""

    name: str = ""


class View(Element):
    """A child view that records the calls made on it."""

    label: str = ""
    calls: list = Field(default_factory=list)

    def some_func(self, *args):
        self.calls.append(args)
        return args


@pytest.fixture
def make_model():
    def _make(name: str = "") -> Model:
        return Model(name=name)

    return _make


@pytest.fixture
def make_view():
    def _make(label: str = "", model: Model | None = None) -> View:
        return View(label=label, owner=model)

    return _make


@pytest.fixture
def views(make_view):
    """Three plain views labelled a, b and c."""
    return [make_view(label) for label in "abc"]


@pytest.fixture
def container(views):
    """Container seeded with the three plain views."""
    return IndexedContainer(views)


@pytest.fixture
def empty_container():
    return IndexedContainer()
