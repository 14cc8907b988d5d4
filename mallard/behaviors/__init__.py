"""Built-in behaviors for the vocalize and locomote capabilities.

Provides:
- Capability protocols (VocalizeBehavior, LocomoteBehavior)
- Vocalization variants (Quack, Squeak, MuteQuack)
- Locomotion variants (FlyWithWings, FlyNoWay, FlyRocketPowered)
"""

from __future__ import annotations

from mallard.behaviors.locomote import FlyNoWay, FlyRocketPowered, FlyWithWings
from mallard.behaviors.protocols import LocomoteBehavior, VocalizeBehavior
from mallard.behaviors.vocalize import MuteQuack, Quack, Squeak

# Registry names for the built-ins, keyed by capability name
BUILTIN_BEHAVIORS: dict[str, dict[str, type]] = {
    "vocalize": {
        "quack": Quack,
        "squeak": Squeak,
        "mute": MuteQuack,
    },
    "locomote": {
        "wings": FlyWithWings,
        "no_way": FlyNoWay,
        "rocket": FlyRocketPowered,
    },
}

__all__ = [
    "BUILTIN_BEHAVIORS",
    "FlyNoWay",
    "FlyRocketPowered",
    "FlyWithWings",
    "LocomoteBehavior",
    "MuteQuack",
    "Quack",
    "Squeak",
    "VocalizeBehavior",
]
