"""Service layer exports."""

from .errors import FactoryError, SaveLoadError
from .battle_service import BattleService
from .command_service import CommandService
from .creation_service import CharacterCreationService
from .exploration_service import ExplorationService, advance_clock
from .scene_service import Scene, SceneChoice, build_scene
from .save_service import SaveService

__all__ = [
    "FactoryError",
    "SaveLoadError",
    "BattleService",
    "CommandService",
    "CharacterCreationService",
    "ExplorationService",
    "advance_clock",
    "Scene",
    "SceneChoice",
    "build_scene",
    "SaveService",
]
