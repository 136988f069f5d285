# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Element base and the identity helpers."""

from types import SimpleNamespace
from uuid import UUID, uuid4

import pydantic
import pytest

from babysitter import Child, Element, Identifiable, ValidationError
from babysitter.protocols.generic import (
    ensure_hashable,
    get_identity,
    get_owner,
)


class TestElement:

    def test_identity_is_generated(self):
        e = Element()
        assert isinstance(e.identity, UUID)
        assert e.identity != Element().identity

    def test_identity_from_string(self):
        uid = uuid4()
        assert Element(identity=str(uid)).identity == uid

    def test_invalid_identity_string(self):
        with pytest.raises(pydantic.ValidationError):
            Element(identity="not-a-uuid")

    def test_invalid_identity_type(self):
        with pytest.raises(pydantic.ValidationError):
            Element(identity=123)

    def test_identity_is_frozen(self):
        e = Element()
        with pytest.raises(pydantic.ValidationError):
            e.identity = uuid4()

    def test_owner_must_have_identity(self):
        with pytest.raises(pydantic.ValidationError):
            Element(owner=object())

    def test_owner_accepts_any_identifiable(self):
        owner = SimpleNamespace(identity="model-1")
        assert Element(owner=owner).owner is owner

    def test_owner_can_be_element(self):
        owner = Element()
        assert Element(owner=owner).owner is owner

    def test_equality_and_hash_by_identity(self):
        uid = uuid4()
        a = Element(identity=uid, owner=SimpleNamespace(identity="m"))
        b = Element(identity=uid)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_always_truthy(self):
        assert bool(Element())

    def test_satisfies_protocols(self):
        e = Element()
        assert isinstance(e, Identifiable)
        assert isinstance(e, Child)


class TestIdentityHelpers:

    def test_get_identity(self):
        assert get_identity(SimpleNamespace(identity=5)) == 5

    def test_get_identity_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            get_identity(object())
        assert exc_info.value.details["expected"] == (
            "an object exposing `identity`"
        )
        assert isinstance(exc_info.value.get_cause(), AttributeError)

    def test_get_identity_unhashable(self):
        with pytest.raises(ValidationError):
            get_identity(SimpleNamespace(identity=["x"]))

    def test_get_identity_tuple_with_unhashable_item(self):
        with pytest.raises(ValidationError) as exc_info:
            get_identity(SimpleNamespace(identity=(1, [2])))
        assert isinstance(exc_info.value.get_cause(), TypeError)

    def test_ensure_hashable(self):
        assert ensure_hashable((1, 2)) == (1, 2)
        with pytest.raises(ValidationError) as exc_info:
            ensure_hashable((1, {"a": 1}), name="Custom key")
        assert exc_info.value.details["expected"] == "a hashable custom key"

    def test_get_owner(self):
        owner = SimpleNamespace(identity=1)
        assert get_owner(SimpleNamespace(identity=2, owner=owner)) is owner
        assert get_owner(SimpleNamespace(identity=2)) is None

    def test_plain_object_is_not_identifiable(self):
        assert not isinstance(object(), Identifiable)
