"""Shared fixtures for the dice roller tests."""

import pytest

from exalted_roller.config import reload_config


class ScriptedRng:
    """Random source that returns a fixed sequence of faces."""

    def __init__(self, *values: int):
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        return self.values.pop(0)


@pytest.fixture(autouse=True)
def default_config(tmp_path):
    """Keep tests independent of any config.yaml in the working directory."""
    yield reload_config(tmp_path / "missing.yaml")
    reload_config(tmp_path / "missing.yaml")


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRng
