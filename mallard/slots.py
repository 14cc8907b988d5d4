"""Behavior slots: one named ownership point for one capability."""

from __future__ import annotations

import logging
from typing import Any

from mallard.capabilities import Capability
from mallard.errors import InvalidBehaviorError

logger = logging.getLogger(__name__)


class BehaviorSlot:
    """Holds at most one behavior for a single capability.

    The slot is the only owner of its occupant: set() drops the reference to
    whatever was there before. An empty slot is valid, and performing it is
    a no-op that returns None.
    """

    def __init__(self, capability: Capability, behavior: Any | None = None):
        self.capability = capability
        self._behavior: Any | None = None
        if behavior is not None:
            self.set(behavior)

    @property
    def behavior(self) -> Any | None:
        """The current occupant, or None if the slot is empty."""
        return self._behavior

    @property
    def is_empty(self) -> bool:
        return self._behavior is None

    def set(self, behavior: Any | None) -> Any | None:
        """Replace the occupant. Passing None clears the slot.

        Args:
            behavior: New occupant, must implement the slot's capability

        Returns:
            The previous occupant (None if the slot was empty)

        Raises:
            InvalidBehaviorError: If behavior does not provide the capability
        """
        if behavior is not None and not self.capability.accepts(behavior):
            raise InvalidBehaviorError(self.capability.name, behavior)

        previous = self._behavior
        self._behavior = behavior
        logger.debug(
            f"Slot '{self.capability.name}': "
            f"{type(previous).__name__ if previous is not None else 'empty'} -> "
            f"{type(behavior).__name__ if behavior is not None else 'empty'}"
        )
        return previous

    def clear(self) -> Any | None:
        """Empty the slot. Returns the released occupant."""
        return self.set(None)

    def perform(self) -> str | None:
        """Run the occupant's operation. Empty slot: no-op, returns None."""
        if self._behavior is None:
            return None
        operation = getattr(self._behavior, self.capability.operation)
        return operation()

    def __repr__(self) -> str:
        occupant = type(self._behavior).__name__ if self._behavior is not None else None
        return f"BehaviorSlot({self.capability.name}={occupant})"
