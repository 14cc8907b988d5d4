"""Locomotion variants: the different ways an actor gets around."""

from __future__ import annotations


class FlyWithWings:
    """Winged flight, for real ducks."""

    def locomote(self) -> str | None:
        return "I'm flying!!"


class FlyNoWay:
    """Grounded. Rubber ducks, decoys and models stay where they are put."""

    def locomote(self) -> str | None:
        return "I can't fly"


class FlyRocketPowered:
    """Rocket-assisted flight. Meant to be swapped in at runtime."""

    def locomote(self) -> str | None:
        return "I'm flying with a rocket!"
