"""Central registry for behaviors and duck archetypes.

Uses a class-level registry pattern for global access without singleton instantiation.
Built-in behaviors are loaded lazily on first lookup and never override a
registration made before that.
"""

from __future__ import annotations

import logging
from typing import Any

from mallard.capabilities import Capability, resolve_capability
from mallard.errors import InvalidBehaviorError, UnknownBehaviorError

logger = logging.getLogger(__name__)


class BehaviorRegistry:
    """Central registry for behavior classes and archetypes.

    Class-level registries, so all methods are classmethods.
    """

    _behaviors: dict[str, dict[str, type]] = {}
    _archetypes: dict[str, dict[str, Any]] = {}
    _builtins_loaded: bool = False

    @classmethod
    def _ensure_builtins(cls) -> None:
        if cls._builtins_loaded:
            return
        from mallard.behaviors import BUILTIN_BEHAVIORS

        for capability_name, variants in BUILTIN_BEHAVIORS.items():
            registered = cls._behaviors.setdefault(capability_name, {})
            for name, behavior_cls in variants.items():
                registered.setdefault(name, behavior_cls)
        cls._builtins_loaded = True

    @classmethod
    def register_behavior(cls, capability: Capability | str, name: str):
        """Decorator to register a behavior class for a capability.

        Usage:
            @BehaviorRegistry.register_behavior("vocalize", "honk")
            class Honk:
                def vocalize(self) -> str | None: ...
        """
        cap = resolve_capability(capability)

        def decorator(behavior_cls: type) -> type:
            if not callable(getattr(behavior_cls, cap.operation, None)):
                raise InvalidBehaviorError(cap.name, behavior_cls)
            registered = cls._behaviors.setdefault(cap.name, {})
            if name in registered:
                logger.warning(f"Behavior '{cap.name}/{name}' already registered, overriding")
            registered[name] = behavior_cls
            logger.debug(f"Registered behavior: {cap.name}/{name}")
            return behavior_cls

        return decorator

    @classmethod
    def register_archetype(
        cls,
        name: str,
        duck_class: type | None = None,
        vocalize: str | None = "quack",
        locomote: str | None = "wings",
        description: str = "",
    ) -> None:
        """Register a new duck archetype.

        Args:
            name: Archetype identifier
            duck_class: Duck subclass to instantiate (defaults to Duck)
            vocalize: Registered vocalize behavior name, None for an empty slot
            locomote: Registered locomote behavior name, None for an empty slot
            description: Human readable summary
        """
        if duck_class is None:
            from mallard.ducks import Duck

            duck_class = Duck
        if name in cls._archetypes:
            logger.warning(f"Archetype '{name}' already registered, overriding")
        cls._archetypes[name] = {
            "description": description,
            "duck_class": duck_class,
            "vocalize": vocalize,
            "locomote": locomote,
        }
        logger.debug(f"Registered archetype: {name}")

    @classmethod
    def get_behavior(cls, capability: Capability | str, name: str) -> type | None:
        """Get a registered behavior class by capability and name."""
        cls._ensure_builtins()
        cap = resolve_capability(capability)
        return cls._behaviors.get(cap.name, {}).get(name)

    @classmethod
    def create_behavior(cls, capability: Capability | str, name: str) -> Any:
        """Instantiate a registered behavior.

        Raises:
            UnknownBehaviorError: If nothing is registered under `name`
            InvalidBehaviorError: If the class cannot be built without arguments
        """
        behavior_cls = cls.get_behavior(capability, name)
        if behavior_cls is None:
            raise UnknownBehaviorError(resolve_capability(capability).name, name)
        try:
            return behavior_cls()
        except TypeError as e:
            cap_name = resolve_capability(capability).name
            raise InvalidBehaviorError(
                cap_name,
                behavior_cls,
                reason=f"Cannot instantiate {cap_name} behavior '{name}': {e}",
            ) from e

    @classmethod
    def behaviors_for(cls, capability: Capability | str) -> dict[str, type]:
        """All behaviors registered for one capability."""
        cls._ensure_builtins()
        cap = resolve_capability(capability)
        return dict(cls._behaviors.get(cap.name, {}))

    @classmethod
    def all_behaviors(cls) -> dict[str, dict[str, type]]:
        """All registered behaviors, keyed by capability name then behavior name."""
        cls._ensure_builtins()
        return {capability: dict(variants) for capability, variants in cls._behaviors.items()}

    @classmethod
    def behavior_count(cls) -> int:
        cls._ensure_builtins()
        return sum(len(variants) for variants in cls._behaviors.values())

    @classmethod
    def archetype_count(cls) -> int:
        """Number of plugin-registered archetypes (built-ins excluded)."""
        return len(cls._archetypes)

    @classmethod
    def get_archetype(cls, name: str) -> dict[str, Any] | None:
        """Get an archetype by name. Plugin archetypes shadow built-ins."""
        if name in cls._archetypes:
            return cls._archetypes[name]
        from mallard.archetypes import ARCHETYPES

        return ARCHETYPES.get(name)

    @classmethod
    def all_archetypes(cls) -> dict[str, dict[str, Any]]:
        """Merge built-in archetypes with plugins.

        Plugin-registered archetypes take precedence over built-ins if
        there's a name collision.
        """
        from mallard.archetypes import ARCHETYPES

        merged: dict[str, dict[str, Any]] = dict(ARCHETYPES)
        merged.update(cls._archetypes)
        return merged

    @classmethod
    def clear(cls):
        """Clear all registrations. Built-ins reload on the next lookup. Useful for testing."""
        cls._behaviors.clear()
        cls._archetypes.clear()
        cls._builtins_loaded = False
        logger.debug("Cleared all behavior registrations")
