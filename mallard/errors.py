"""Structured error hierarchy for mallard."""


class MallardError(Exception):
    """Base for all mallard errors."""

    pass


class BehaviorError(MallardError):
    """A behavior could not be assigned or resolved."""

    pass


class InvalidBehaviorError(BehaviorError):
    """Object does not implement the capability it was assigned to."""

    def __init__(self, capability: str, behavior: object, reason: str | None = None):
        self.capability = capability
        self.behavior = behavior
        self.reason = reason
        super().__init__(
            reason or f"{behavior!r} does not implement the '{capability}' capability"
        )


class UnknownBehaviorError(BehaviorError):
    """No behavior registered under the requested name."""

    def __init__(self, capability: str, name: str):
        self.capability = capability
        self.name = name
        super().__init__(f"Unknown {capability} behavior: {name}")


class UnknownCapabilityError(MallardError):
    """Capability is not known (or not exposed by the actor)."""

    pass


class UnknownArchetypeError(MallardError):
    """No archetype registered under the requested name."""

    pass


class DuplicateActorError(MallardError):
    """An actor with the same name is already in the pond."""

    pass


class PluginError(MallardError):
    """Plugin module could not be imported."""

    pass
