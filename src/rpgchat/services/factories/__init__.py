"""Factory helpers for runtime entities."""

from .character_factory import build_starter_kit, compute_final_stats, finalize_character
from .enemy_factory import create_enemy_for_universe, create_enemy_instance

__all__ = [
    "build_starter_kit",
    "compute_final_stats",
    "create_enemy_for_universe",
    "create_enemy_instance",
    "finalize_character",
]
