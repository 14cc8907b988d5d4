"""Pond: roster of actors (add, remove, lookup, perform)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mallard.actor import Actor
from mallard.capabilities import Capability
from mallard.errors import DuplicateActorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Performance:
    """One actor performing one capability. output is None for silence or an empty slot."""

    actor: str
    capability: str
    output: str | None


class Pond:
    """Holds actors by name, in the order they were added."""

    def __init__(self):
        self._actors: dict[str, Actor] = {}

    def add(self, actor: Actor) -> Actor:
        """Add an actor. Names must be unique within the pond."""
        if actor.name in self._actors:
            raise DuplicateActorError(f"Actor '{actor.name}' is already in the pond")
        self._actors[actor.name] = actor
        logger.debug(f"Added {type(actor).__name__} '{actor.name}' to pond")
        return actor

    def remove(self, name: str) -> Actor | None:
        """Remove an actor by name. Returns it, or None if it wasn't there."""
        actor = self._actors.pop(name, None)
        if actor is not None:
            logger.debug(f"Removed '{name}' from pond")
        return actor

    def get(self, name: str) -> Actor | None:
        return self._actors.get(name)

    def actors(self) -> list[Actor]:
        """All actors, in insertion order."""
        return list(self._actors.values())

    def perform(self, name: str, capability: Capability | str) -> Performance:
        """Have a single actor perform a capability.

        Raises:
            KeyError: If no actor has that name
            UnknownCapabilityError: If the actor lacks the capability
        """
        actor = self._actors[name]
        return Performance(actor.name, str(capability), actor.perform(capability))

    def perform_all(self, capability: Capability | str) -> list[Performance]:
        """Every actor exposing `capability` performs it, in insertion order.

        Actors without the capability are skipped.
        """
        return [
            Performance(actor.name, str(capability), actor.perform(capability))
            for actor in self._actors.values()
            if actor.has_capability(capability)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._actors

    def __len__(self) -> int:
        return len(self._actors)

    @property
    def count(self) -> int:
        return len(self._actors)
