from collections.abc import Generator

import pytest

from thawable import set_deprecation_logger


@pytest.fixture(autouse=True)
def reset_deprecation_logger() -> Generator[None]:
    """
    Ensure a deprecation sink replaced by a test does not leak into others.
    """
    yield
    set_deprecation_logger(None)


@pytest.fixture
def deprecations() -> list[str]:
    collected: list[str] = []
    set_deprecation_logger(collected.append)
    return collected
