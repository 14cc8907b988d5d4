"""Protocols for pluggable duck behaviors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class VocalizeBehavior(Protocol):
    """Pluggable vocalization: how an actor makes noise."""

    def vocalize(self) -> str | None:
        """Return the sound produced, or None for silence."""
        ...


@runtime_checkable
class LocomoteBehavior(Protocol):
    """Pluggable locomotion: how an actor moves."""

    def locomote(self) -> str | None:
        """Return a description of the movement."""
        ...
