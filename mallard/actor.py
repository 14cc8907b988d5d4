"""Actors: entities whose behaviors are composed rather than inherited.

An Actor never implements a capability itself. It owns one BehaviorSlot per
capability it declares and delegates to whatever occupies that slot.
"""

from __future__ import annotations

from typing import Any, ClassVar

from mallard.capabilities import Capability
from mallard.errors import UnknownCapabilityError
from mallard.slots import BehaviorSlot


class Actor:
    """An entity with named, independently swappable behavior slots.

    Subclasses declare which capabilities they expose via `capabilities`.
    Behaviors are passed by capability name at construction:

        DuckCall("caller", vocalize=Quack())

    Capabilities listed in `default_behaviors` get a fresh instance of the
    default unless a keyword overrides it. An explicit None keeps the slot
    empty. Any other capability starts out empty.
    """

    capabilities: ClassVar[tuple[Capability, ...]] = ()
    default_behaviors: ClassVar[dict[str, type]] = {}

    def __init__(self, name: str, **behaviors: Any):
        self.name = name
        self._slots: dict[str, BehaviorSlot] = {
            capability.name: BehaviorSlot(capability) for capability in self.capabilities
        }
        merged: dict[str, Any] = {
            capability: factory() for capability, factory in self.default_behaviors.items()
        }
        merged.update(behaviors)
        for capability_name, behavior in merged.items():
            self._slot(capability_name).set(behavior)

    @property
    def capability_names(self) -> list[str]:
        """Names of the capabilities this actor exposes, in declaration order."""
        return list(self._slots.keys())

    def has_capability(self, capability: Capability | str) -> bool:
        name = capability.name if isinstance(capability, Capability) else capability
        return name in self._slots

    def _slot(self, capability: Capability | str) -> BehaviorSlot:
        name = capability.name if isinstance(capability, Capability) else capability
        slot = self._slots.get(name)
        if slot is None:
            raise UnknownCapabilityError(
                f"{type(self).__name__} '{self.name}' has no '{name}' capability. "
                f"Available: {', '.join(self._slots.keys()) or 'none'}"
            )
        return slot

    def behavior(self, capability: Capability | str) -> Any | None:
        """Current occupant of a capability slot, or None if empty."""
        return self._slot(capability).behavior

    def set_behavior(self, capability: Capability | str, behavior: Any | None) -> None:
        """Swap the behavior for a capability at runtime. None empties the slot."""
        self._slot(capability).set(behavior)

    def perform(self, capability: Capability | str) -> str | None:
        """Delegate to the behavior in the given slot.

        Returns the behavior's output, or None when the slot is empty.
        """
        return self._slot(capability).perform()

    def __repr__(self) -> str:
        slots = ", ".join(repr(slot) for slot in self._slots.values())
        return f"{type(self).__name__}({self.name!r}, {slots})"
