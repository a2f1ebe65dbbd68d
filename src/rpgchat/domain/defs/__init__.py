"""Domain definition exports."""

from .background_def import BackgroundDef
from .class_def import ClassDef
from .enemy_def import EnemyDef
from .race_def import RaceDef
from .universe_def import UniverseDef

__all__ = [
    "BackgroundDef",
    "ClassDef",
    "EnemyDef",
    "RaceDef",
    "UniverseDef",
]
