"""Shared test fixtures for the mallard test suite."""

from __future__ import annotations

import pytest

from mallard.config import MallardConfig
from mallard.ducks import DecoyDuck, MallardDuck
from mallard.pond import Pond
from mallard.registry import BehaviorRegistry


@pytest.fixture(autouse=True)
def clear_registry():
    """Reset the behavior registry before and after each test."""
    BehaviorRegistry.clear()
    yield
    BehaviorRegistry.clear()


@pytest.fixture
def config() -> MallardConfig:
    """Default config with the full pond, no plugins."""
    return MallardConfig(
        pond_archetypes=["mallard", "redhead", "rubber", "decoy", "model"],
        include_duck_call=True,
        upgrade_actor="model",
        upgrade_locomote="rocket",
        plugin_dirs=[],
    )


@pytest.fixture
def mallard() -> MallardDuck:
    """A mallard with default behaviors (Quack, FlyWithWings)."""
    return MallardDuck("mallory")


@pytest.fixture
def decoy() -> DecoyDuck:
    """A decoy with default behaviors (MuteQuack, FlyNoWay)."""
    return DecoyDuck("woody")


@pytest.fixture
def pond() -> Pond:
    """An empty pond."""
    return Pond()
