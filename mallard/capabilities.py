"""Capabilities: the named operations a behavior slot can hold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mallard.behaviors.protocols import LocomoteBehavior, VocalizeBehavior
from mallard.errors import UnknownCapabilityError


@dataclass(frozen=True)
class Capability:
    """A capability names one slot and the single operation its occupant runs."""

    name: str
    operation: str
    protocol: Any = None  # runtime_checkable Protocol, or None to duck-type on `operation`

    def accepts(self, behavior: object) -> bool:
        """Check that `behavior` is an instance providing this capability's operation."""
        if isinstance(behavior, type):
            return False
        if self.protocol is not None and not isinstance(behavior, self.protocol):
            return False
        return callable(getattr(behavior, self.operation, None))

    def __str__(self) -> str:
        return self.name


VOCALIZE = Capability("vocalize", "vocalize", VocalizeBehavior)
LOCOMOTE = Capability("locomote", "locomote", LocomoteBehavior)

BUILTIN_CAPABILITIES: dict[str, Capability] = {
    VOCALIZE.name: VOCALIZE,
    LOCOMOTE.name: LOCOMOTE,
}


def resolve_capability(capability: Capability | str) -> Capability:
    """Turn a capability name into the built-in Capability.

    Capability instances are returned unchanged, so custom capabilities
    work anywhere a built-in one does.
    """
    if isinstance(capability, Capability):
        return capability
    try:
        return BUILTIN_CAPABILITIES[capability]
    except KeyError:
        raise UnknownCapabilityError(
            f"Unknown capability: {capability}. "
            f"Available: {', '.join(BUILTIN_CAPABILITIES.keys())}"
        ) from None
