"""Player class definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Defines the attribute bonuses and flavour of a class."""

    id: str
    name: str
    desc: str
    bonuses: Dict[str, int] = field(default_factory=dict)
    weakness: str = ""
    world_impact: str = ""
