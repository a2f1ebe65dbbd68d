"""Repository exports."""

from .backgrounds_repo import BackgroundsRepository
from .classes_repo import ClassesRepository
from .enemies_repo import EnemiesRepository
from .items_repo import ItemsRepository
from .races_repo import RacesRepository
from .universes_repo import UniversesRepository

__all__ = [
    "BackgroundsRepository",
    "ClassesRepository",
    "EnemiesRepository",
    "ItemsRepository",
    "RacesRepository",
    "UniversesRepository",
]
