"""Race definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class RaceDef:
    """A playable race and the attribute bonuses it grants."""

    id: str
    name: str
    desc: str
    bonuses: Dict[str, int] = field(default_factory=dict)
    weakness: str = ""
    world_impact: str = ""
