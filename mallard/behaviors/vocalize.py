"""Vocalization variants: the different noises an actor can make."""

from __future__ import annotations


class Quack:
    """The normal duck vocalization."""

    def vocalize(self) -> str | None:
        return "Quack"


class Squeak:
    """Rubber duckie squeak."""

    def vocalize(self) -> str | None:
        return "Squeak"


class MuteQuack:
    """Silent vocalization. Produces no output at all."""

    def vocalize(self) -> str | None:
        return None
