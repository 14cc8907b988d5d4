"""Ducks and the duck call.

Every duck swims and displays itself the same way regardless of its
behaviors. Vocalization and locomotion come from the slots, with per-class
defaults that constructor keywords override (None empties the slot).
"""

from __future__ import annotations

from typing import Any, ClassVar

from mallard.actor import Actor
from mallard.behaviors.locomote import FlyNoWay, FlyWithWings
from mallard.behaviors.vocalize import MuteQuack, Quack, Squeak
from mallard.capabilities import LOCOMOTE, VOCALIZE, Capability


class Duck(Actor):
    """An actor with a vocalize slot and a locomote slot."""

    capabilities: ClassVar[tuple[Capability, ...]] = (VOCALIZE, LOCOMOTE)
    description: ClassVar[str] = "I'm a duck"

    def __init__(self, name: str | None = None, **behaviors: Any):
        super().__init__(name or type(self).__name__, **behaviors)

    def display(self) -> str:
        return self.description

    def swim(self) -> str:
        return "All ducks float, even decoys!"

    def perform_quack(self) -> str | None:
        return self.perform(VOCALIZE)

    def perform_fly(self) -> str | None:
        return self.perform(LOCOMOTE)

    def set_quack_behavior(self, behavior: Any | None) -> None:
        self.set_behavior(VOCALIZE, behavior)

    def set_fly_behavior(self, behavior: Any | None) -> None:
        self.set_behavior(LOCOMOTE, behavior)


class MallardDuck(Duck):
    default_behaviors = {"vocalize": Quack, "locomote": FlyWithWings}
    description = "I'm a real Mallard duck"


class RedheadDuck(Duck):
    default_behaviors = {"vocalize": Quack, "locomote": FlyWithWings}
    description = "I'm a real Red Headed duck"


class RubberDuck(Duck):
    default_behaviors = {"vocalize": Squeak, "locomote": FlyNoWay}
    description = "I'm a rubber duckie"


class DecoyDuck(Duck):
    """Wooden decoy: floats, never vocalizes, never flies."""

    default_behaviors = {"vocalize": MuteQuack, "locomote": FlyNoWay}
    description = "I'm a duck Decoy"


class ModelDuck(Duck):
    """Grounded by default; give it FlyRocketPowered to get it airborne."""

    default_behaviors = {"vocalize": Quack, "locomote": FlyNoWay}
    description = "I'm a model duck"


class DuckCall(Actor):
    """Hunter's duck call. Not a duck, but it vocalizes exactly like one."""

    capabilities: ClassVar[tuple[Capability, ...]] = (VOCALIZE,)
    default_behaviors: ClassVar[dict[str, type]] = {"vocalize": Quack}

    def __init__(self, name: str = "DuckCall", **behaviors: Any):
        super().__init__(name, **behaviors)

    def perform_quack(self) -> str | None:
        return self.perform(VOCALIZE)
