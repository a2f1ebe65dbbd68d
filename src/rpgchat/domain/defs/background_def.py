"""Background definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class BackgroundDef:
    """A character background: a small bonus and a descriptive perk."""

    id: str
    name: str
    desc: str
    bonus: Dict[str, int] = field(default_factory=dict)
    perk: str = ""
