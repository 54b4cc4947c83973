"""
tests.test_user_profile

Identity semantics of `UserProfile`: id-based, provider-exact equality and serialization.
"""

from __future__ import annotations

import json
import pickle

import pytest

from agorava_core.spi.user_profile import UserProfile


class TwitterProfile(UserProfile):
    def __init__(self, id: str, name: str = "Jack", avatar: str = "https://pbs.example/jack.png"):
        super().__init__(id)
        self._name = name
        self._avatar = avatar

    @property
    def full_name(self) -> str:
        return self._name

    @property
    def profile_image_url(self) -> str:
        return self._avatar


class LinkedInProfile(UserProfile):
    def __init__(self, id: str, first: str = "Ada", last: str = "Lovelace"):
        super().__init__(id)
        self._first = first
        self._last = last

    @property
    def full_name(self) -> str:
        return f"{self._first} {self._last}"

    @property
    def profile_image_url(self) -> str:
        return f"https://media.example/{self.id}.jpg"


def test_cannot_instantiate_base() -> None:
    with pytest.raises(TypeError):
        UserProfile("42")  # type: ignore[abstract]


def test_accessors() -> None:
    p = LinkedInProfile("ada-1")
    assert p.id == "ada-1"
    assert p.full_name == "Ada Lovelace"
    assert p.profile_image_url == "https://media.example/ada-1.jpg"


def test_id_is_read_only() -> None:
    p = TwitterProfile("42")
    with pytest.raises(AttributeError):
        p.id = "43"  # type: ignore[misc]


def test_same_provider_same_id_is_equal() -> None:
    a = TwitterProfile("42", name="Jack")
    b = TwitterProfile("42", name="Jack Dorsey")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_different_id_is_not_equal() -> None:
    assert TwitterProfile("42") != TwitterProfile("43")


def test_different_provider_same_id_is_not_equal() -> None:
    assert TwitterProfile("42") != LinkedInProfile("42")
    assert LinkedInProfile("42") != TwitterProfile("42")


def test_subclass_of_provider_is_not_equal() -> None:
    class VerifiedTwitterProfile(TwitterProfile):
        pass

    assert TwitterProfile("42") != VerifiedTwitterProfile("42")


def test_none_ids() -> None:
    a = TwitterProfile(None)  # type: ignore[arg-type]
    b = TwitterProfile(None)  # type: ignore[arg-type]
    assert a == b
    assert hash(a) == 0
    assert a != TwitterProfile("42")


def test_comparison_with_other_types() -> None:
    p = TwitterProfile("42")
    assert p != "42"
    assert p != None  # noqa: E711
    assert p == p


def test_pickle_round_trip() -> None:
    p = TwitterProfile("42", name="Jack", avatar="https://pbs.example/j.png")
    restored = pickle.loads(pickle.dumps(p))
    assert restored == p
    assert restored.full_name == "Jack"
    assert restored.profile_image_url == "https://pbs.example/j.png"


def test_to_dict_is_json_ready() -> None:
    p = LinkedInProfile("ada-1")
    assert json.loads(json.dumps(p.to_dict())) == {
        "id": "ada-1",
        "full_name": "Ada Lovelace",
        "profile_image_url": "https://media.example/ada-1.jpg",
    }


def test_repr() -> None:
    assert repr(TwitterProfile("42")) == "TwitterProfile(id='42')"
