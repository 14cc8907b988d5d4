"""Duck simulator: fills a pond, lets everyone perform, then swaps a behavior live."""

from __future__ import annotations

import logging

from mallard.archetypes import spawn_archetype
from mallard.capabilities import LOCOMOTE
from mallard.config import MallardConfig
from mallard.ducks import DuckCall
from mallard.pond import Performance, Pond
from mallard.registry import BehaviorRegistry

logger = logging.getLogger(__name__)


class DuckSimulator:
    """Runs the classic duck scenario against a configurable pond.

    1. Populate: one duck per configured archetype (+ optional duck call)
    2. Round: every actor performs every capability it exposes
    3. Upgrade: swap the configured actor's locomotion at runtime
    4. Perform the swapped capability again
    """

    def __init__(self, config: MallardConfig | None = None):
        self.config = config or MallardConfig()
        self.pond = Pond()
        self.performances: list[Performance] = []

    def populate(self) -> Pond:
        """Spawn the configured archetypes into the pond.

        Repeated archetypes get a numeric suffix: "mallard", "mallard-2", ...
        """
        seen: dict[str, int] = {}
        for archetype in self.config.pond_archetypes:
            seen[archetype] = seen.get(archetype, 0) + 1
            name = archetype if seen[archetype] == 1 else f"{archetype}-{seen[archetype]}"
            self.pond.add(spawn_archetype(archetype, name))
        if self.config.include_duck_call:
            self.pond.add(DuckCall("duck-call"))
        logger.info(f"Populated pond with {self.pond.count} actors")
        return self.pond

    def perform_round(self) -> list[Performance]:
        """Every actor performs each of its capabilities, actor by actor."""
        round_performances = [
            self.pond.perform(actor.name, capability)
            for actor in self.pond.actors()
            for capability in actor.capability_names
        ]
        self.performances.extend(round_performances)
        return round_performances

    def upgrade(self) -> Performance | None:
        """Swap the configured actor's locomotion and perform it once.

        Returns None (and logs) if the upgrade is disabled or the actor
        isn't in the pond.
        """
        name = self.config.upgrade_actor
        if not name:
            return None
        actor = self.pond.get(name)
        if actor is None or not actor.has_capability(LOCOMOTE):
            logger.warning(f"Upgrade skipped: no actor '{name}' with locomotion in the pond")
            return None

        behavior = BehaviorRegistry.create_behavior(LOCOMOTE, self.config.upgrade_locomote)
        actor.set_behavior(LOCOMOTE, behavior)
        logger.info(f"Upgraded '{name}' locomotion to {type(behavior).__name__}")

        performance = self.pond.perform(name, LOCOMOTE)
        self.performances.append(performance)
        return performance

    def run(self) -> list[Performance]:
        """Full scenario on a fresh pond. Returns every performance in order."""
        self.pond = Pond()
        self.performances = []
        self.populate()
        self.perform_round()
        self.upgrade()
        return list(self.performances)
