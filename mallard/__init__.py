"""mallard: swappable behaviors for actors, composed instead of inherited."""

from __future__ import annotations

from mallard.actor import Actor
from mallard.capabilities import LOCOMOTE, VOCALIZE, Capability
from mallard.ducks import (
    DecoyDuck,
    Duck,
    DuckCall,
    MallardDuck,
    ModelDuck,
    RedheadDuck,
    RubberDuck,
)
from mallard.registry import BehaviorRegistry
from mallard.slots import BehaviorSlot

__version__ = "0.1.0"

__all__ = [
    "LOCOMOTE",
    "VOCALIZE",
    "Actor",
    "BehaviorRegistry",
    "BehaviorSlot",
    "Capability",
    "DecoyDuck",
    "Duck",
    "DuckCall",
    "MallardDuck",
    "ModelDuck",
    "RedheadDuck",
    "RubberDuck",
]
