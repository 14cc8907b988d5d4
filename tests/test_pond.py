"""Tests for Pond: actor roster."""

from __future__ import annotations

import pytest

from mallard.capabilities import LOCOMOTE, VOCALIZE
from mallard.ducks import DecoyDuck, DuckCall, MallardDuck
from mallard.errors import DuplicateActorError
from mallard.pond import Performance, Pond


def test_add_and_get(pond, mallard):
    pond.add(mallard)

    assert pond.get("mallory") is mallard
    assert "mallory" in pond
    assert pond.count == 1
    assert len(pond) == 1


def test_add_duplicate_name_raises(pond):
    pond.add(MallardDuck("same"))

    with pytest.raises(DuplicateActorError):
        pond.add(DecoyDuck("same"))


def test_remove(pond, mallard):
    pond.add(mallard)

    assert pond.remove("mallory") is mallard
    assert pond.remove("mallory") is None
    assert pond.get("mallory") is None


def test_actors_in_insertion_order(pond):
    pond.add(DecoyDuck("b"))
    pond.add(MallardDuck("a"))

    assert [actor.name for actor in pond.actors()] == ["b", "a"]


def test_perform_single(pond, mallard):
    pond.add(mallard)

    assert pond.perform("mallory", VOCALIZE) == Performance("mallory", "vocalize", "Quack")


def test_perform_unknown_actor(pond):
    with pytest.raises(KeyError):
        pond.perform("ghost", VOCALIZE)


def test_perform_all_records_silence(pond, mallard, decoy):
    pond.add(mallard)
    pond.add(decoy)

    assert pond.perform_all("vocalize") == [
        Performance("mallory", "vocalize", "Quack"),
        Performance("woody", "vocalize", None),
    ]


def test_perform_all_skips_actors_without_capability(pond, mallard):
    pond.add(DuckCall("caller"))
    pond.add(mallard)

    flights = pond.perform_all(LOCOMOTE)
    quacks = pond.perform_all(VOCALIZE)

    assert [p.actor for p in flights] == ["mallory"]
    assert [p.output for p in quacks] == ["Quack", "Quack"]
