"""Plugin system for mallard.

Plugin files extend the BehaviorRegistry with:
- Vocalize and locomote behaviors
- Duck archetypes
"""

from __future__ import annotations

from mallard.plugins.loader import PluginLoader

__all__ = ["PluginLoader"]
