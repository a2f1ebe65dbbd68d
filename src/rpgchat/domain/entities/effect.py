"""Status effect models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Effect:
    icon: str
    name: str
    turns_left: int
