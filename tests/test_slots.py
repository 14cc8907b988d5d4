"""Tests for BehaviorSlot: construct, set, perform."""

from __future__ import annotations

import logging

import pytest

from mallard.behaviors import FlyWithWings, MuteQuack, Quack, Squeak
from mallard.capabilities import LOCOMOTE, VOCALIZE, Capability
from mallard.errors import InvalidBehaviorError
from mallard.slots import BehaviorSlot


class Recorder:
    """Vocalize behavior that counts calls."""

    def __init__(self):
        self.calls = 0

    def vocalize(self):
        self.calls += 1
        return "recorded"


def test_slot_starts_empty_by_default():
    slot = BehaviorSlot(VOCALIZE)

    assert slot.is_empty
    assert slot.behavior is None


def test_perform_on_empty_slot_is_noop():
    """Empty slot: perform returns None and does not raise."""
    slot = BehaviorSlot(VOCALIZE)

    assert slot.perform() is None
    assert slot.is_empty


def test_slot_constructed_with_behavior():
    quack = Quack()
    slot = BehaviorSlot(VOCALIZE, quack)

    assert slot.behavior is quack
    assert slot.perform() == "Quack"


def test_set_delegates_exactly_to_new_behavior():
    """After set(MuteQuack), perform never yields the Quack output."""
    slot = BehaviorSlot(VOCALIZE, Quack())

    slot.set(MuteQuack())

    assert slot.perform() is None
    assert slot.perform() != "Quack"


def test_set_returns_previous_occupant():
    first = Quack()
    slot = BehaviorSlot(VOCALIZE, first)

    previous = slot.set(Squeak())

    assert previous is first


def test_replacement_detaches_previous_behavior():
    """Replaced occupant receives no further calls."""
    first = Recorder()
    slot = BehaviorSlot(VOCALIZE, first)
    slot.perform()

    slot.set(Squeak())
    outputs = [slot.perform() for _ in range(3)]

    assert first.calls == 1
    assert outputs == ["Squeak", "Squeak", "Squeak"]
    assert slot.behavior is not first


def test_set_none_clears_slot():
    slot = BehaviorSlot(LOCOMOTE, FlyWithWings())

    slot.set(None)

    assert slot.is_empty
    assert slot.perform() is None


def test_clear_returns_released_behavior():
    wings = FlyWithWings()
    slot = BehaviorSlot(LOCOMOTE, wings)

    assert slot.clear() is wings
    assert slot.is_empty


def test_set_rejects_wrong_capability():
    """A locomotion behavior can't occupy a vocalize slot."""
    slot = BehaviorSlot(VOCALIZE)

    with pytest.raises(InvalidBehaviorError):
        slot.set(FlyWithWings())
    assert slot.is_empty


def test_set_rejects_class_instead_of_instance():
    slot = BehaviorSlot(VOCALIZE)

    with pytest.raises(InvalidBehaviorError):
        slot.set(Quack)


def test_rejected_set_keeps_current_occupant():
    quack = Quack()
    slot = BehaviorSlot(VOCALIZE, quack)

    with pytest.raises(InvalidBehaviorError):
        slot.set(object())
    assert slot.behavior is quack


def test_custom_capability_without_protocol():
    """Capabilities without a protocol duck-type on the operation name."""

    class Paddle:
        def swim(self):
            return "paddling"

    swimming = Capability("swimming", "swim")
    slot = BehaviorSlot(swimming, Paddle())

    assert slot.perform() == "paddling"
    with pytest.raises(InvalidBehaviorError):
        slot.set(Quack())


def test_swap_is_logged(caplog):
    slot = BehaviorSlot(VOCALIZE, Quack())

    with caplog.at_level(logging.DEBUG, logger="mallard.slots"):
        slot.set(Squeak())

    assert "Quack -> Squeak" in caplog.text


def test_repr_names_occupant():
    assert repr(BehaviorSlot(VOCALIZE, Quack())) == "BehaviorSlot(vocalize=Quack)"
    assert repr(BehaviorSlot(LOCOMOTE)) == "BehaviorSlot(locomote=None)"


def test_set_rejects_non_callable_operation():
    """An attribute with the right name but no callable is not a behavior."""

    class Fake:
        vocalize = "Quack"

    slot = BehaviorSlot(VOCALIZE)

    with pytest.raises(InvalidBehaviorError):
        slot.set(Fake())
    assert slot.is_empty
