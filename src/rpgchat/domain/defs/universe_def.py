"""Universe (setting) metadata."""
from __future__ import annotations

from dataclasses import dataclass

from rpgchat.core.types import Universe


@dataclass(frozen=True, slots=True)
class UniverseDef:
    """Display title, currency, safe hub and enemy roster of a setting."""

    id: Universe
    title: str
    currency: str
    safe_hub: str
    enemy_id: str
