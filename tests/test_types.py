from copy import copy, deepcopy

import pytest

from thawable import MISSING, Immutable, Missing


class Settings(Immutable):
    name: str
    retries: int = 3
    tags: tuple[str, ...] = ()


def test_immutable_applies_defaults() -> None:
    settings = Settings(name="main")

    assert settings.name == "main"
    assert settings.retries == 3
    assert settings.tags == ()


def test_immutable_requires_attributes_without_defaults() -> None:
    with pytest.raises(AttributeError, match="Missing required attribute: name"):
        Settings()


def test_immutable_accepts_none_as_explicit_default() -> None:
    class Labelled(Immutable):
        label: str | None = None

    assert Labelled().label is None


def test_immutable_rejects_unknown_attributes() -> None:
    with pytest.raises(TypeError, match="unknown"):
        Settings(name="main", unknown=1)


def test_immutable_rejects_modification() -> None:
    settings = Settings(name="main")

    with pytest.raises(AttributeError):
        settings.name = "other"  # pyright: ignore[reportAttributeAccessIssue]

    with pytest.raises(AttributeError):
        del settings.name  # pyright: ignore[reportAttributeAccessIssue]


def test_immutable_updated_returns_changed_copy() -> None:
    settings = Settings(name="main")

    updated = settings.updated(retries=5, tags=("a",))

    assert updated == Settings(name="main", retries=5, tags=("a",))
    assert hash(updated) == hash(Settings(name="main", retries=5, tags=("a",)))
    assert settings.retries == 3
    assert copy(settings) is settings
    assert deepcopy(settings) is settings


def test_missing_is_falsy_singleton() -> None:
    assert Missing() is MISSING
    assert not MISSING
    assert MISSING == Missing()
