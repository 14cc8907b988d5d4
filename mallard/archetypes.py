"""Duck archetypes: predefined duck classes and behavior presets for spawning."""

from __future__ import annotations

from typing import Any

from mallard.capabilities import LOCOMOTE, VOCALIZE
from mallard.ducks import DecoyDuck, Duck, MallardDuck, ModelDuck, RedheadDuck, RubberDuck
from mallard.errors import UnknownArchetypeError

ARCHETYPES: dict[str, dict[str, Any]] = {
    "mallard": {
        "description": "Wild duck that quacks and flies",
        "duck_class": MallardDuck,
        "vocalize": "quack",
        "locomote": "wings",
    },
    "redhead": {
        "description": "Diving duck, quacks and flies like a mallard",
        "duck_class": RedheadDuck,
        "vocalize": "quack",
        "locomote": "wings",
    },
    "rubber": {
        "description": "Bath toy that squeaks and stays put",
        "duck_class": RubberDuck,
        "vocalize": "squeak",
        "locomote": "no_way",
    },
    "decoy": {
        "description": "Wooden decoy, silent and grounded",
        "duck_class": DecoyDuck,
        "vocalize": "mute",
        "locomote": "no_way",
    },
    "model": {
        "description": "Model duck, grounded until it gets a rocket",
        "duck_class": ModelDuck,
        "vocalize": "quack",
        "locomote": "no_way",
    },
}


def spawn_archetype(
    archetype_name: str,
    duck_name: str | None = None,
    vocalize: str | None = None,
    locomote: str | None = None,
) -> Duck:
    """Build a duck from a named archetype.

    Behavior names resolve through the BehaviorRegistry, so plugin behaviors
    can be used both in archetypes and as overrides.

    Args:
        archetype_name: Name of the archetype (e.g., "mallard", "decoy")
        duck_name: Display name for the duck (defaults to the archetype name)
        vocalize: Optional behavior name replacing the archetype's vocalization
        locomote: Optional behavior name replacing the archetype's locomotion

    Returns the spawned Duck.

    Raises:
        UnknownArchetypeError: If the archetype is not registered
        UnknownBehaviorError: If a behavior name is not registered
    """
    from mallard.registry import BehaviorRegistry

    arch = BehaviorRegistry.get_archetype(archetype_name)
    if arch is None:
        raise UnknownArchetypeError(
            f"Unknown archetype: {archetype_name}. "
            f"Available: {', '.join(BehaviorRegistry.all_archetypes().keys())}"
        )

    vocalize_name = vocalize if vocalize is not None else arch["vocalize"]
    locomote_name = locomote if locomote is not None else arch["locomote"]

    # Archetype presets are explicit, so a None name means an empty slot
    return arch["duck_class"](
        duck_name or archetype_name,
        vocalize=(
            BehaviorRegistry.create_behavior(VOCALIZE, vocalize_name)
            if vocalize_name is not None
            else None
        ),
        locomote=(
            BehaviorRegistry.create_behavior(LOCOMOTE, locomote_name)
            if locomote_name is not None
            else None
        ),
    )
