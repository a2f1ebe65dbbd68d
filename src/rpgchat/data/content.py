"""Bundle of every content table the engine reads."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from rpgchat.core.types import Universe
from rpgchat.data.repositories import (
    BackgroundsRepository,
    ClassesRepository,
    EnemiesRepository,
    ItemsRepository,
    RacesRepository,
    UniversesRepository,
)
from rpgchat.domain.defs import UniverseDef

UNKNOWN_UNIVERSE_TITLE = "—"
UNKNOWN_CURRENCY = "¤"
UNKNOWN_HUB = "—"
CANON_FALLBACK_TITLE = "без названия"


@dataclass(frozen=True, slots=True)
class ContentLibrary:
    """Immutable set of repositories shared by every service."""

    races: RacesRepository
    classes: ClassesRepository
    backgrounds: BackgroundsRepository
    enemies: EnemiesRepository
    universes: UniversesRepository
    items: ItemsRepository

    @classmethod
    def from_path(cls, base_path: Path | str | None = None) -> ContentLibrary:
        enemies = EnemiesRepository(base_path=base_path)
        return cls(
            races=RacesRepository(base_path=base_path),
            classes=ClassesRepository(base_path=base_path),
            backgrounds=BackgroundsRepository(base_path=base_path),
            enemies=enemies,
            universes=UniversesRepository(enemies_repo=enemies, base_path=base_path),
            items=ItemsRepository(base_path=base_path),
        )

    def universe_def(self, universe: Universe) -> UniverseDef:
        return self.universes.get_universe(universe)

    def universe_title(self, universe: Universe | None, canon_title: str | None = None) -> str:
        if universe is None:
            return UNKNOWN_UNIVERSE_TITLE
        title = self.universe_def(universe).title
        if universe is Universe.CANON:
            return f"{title}: {canon_title or CANON_FALLBACK_TITLE}"
        return title

    def currency(self, universe: Universe | None) -> str:
        if universe is None:
            return UNKNOWN_CURRENCY
        return self.universe_def(universe).currency

    def safe_hub(self, universe: Universe | None) -> str:
        if universe is None:
            return UNKNOWN_HUB
        return self.universe_def(universe).safe_hub


@lru_cache(maxsize=None)
def get_default_content() -> ContentLibrary:
    """Return the packaged content tables, built once per process."""
    return ContentLibrary.from_path()
