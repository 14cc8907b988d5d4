"""Example plugin: Whistling Duck.

Demonstrates extending mallard with new behaviors and an archetype.
Load it with:

    python -m mallard --plugins plugins/ perform whistling
"""

from __future__ import annotations

from mallard.registry import BehaviorRegistry


@BehaviorRegistry.register_behavior("vocalize", "whistle")
class Whistle:
    """High pitched whistle instead of a quack."""

    def vocalize(self) -> str | None:
        return "Wheee-oo"


@BehaviorRegistry.register_behavior("locomote", "waddle")
class Waddle:
    """Walks on land."""

    def locomote(self) -> str | None:
        return "I'm waddling"


BehaviorRegistry.register_archetype(
    "whistling",
    vocalize="whistle",
    locomote="wings",
    description="Whistling duck, whistles instead of quacking",
)
