"""Universe metadata repository with reference validation."""
from __future__ import annotations

from typing import Dict

from rpgchat.core.types import Universe
from rpgchat.data.errors import DataReferenceError, DataValidationError
from rpgchat.data.repositories.base import RepositoryBase
from rpgchat.data.repositories.enemies_repo import EnemiesRepository
from rpgchat.domain.defs import UniverseDef


class UniversesRepository(RepositoryBase[UniverseDef]):
    """Loads universe metadata and checks every universe has an enemy roster."""

    def __init__(self, enemies_repo: EnemiesRepository | None = None, base_path=None) -> None:
        super().__init__("universes.json", base_path)
        self._enemies_repo = enemies_repo or EnemiesRepository(base_path=base_path)

    def get_universe(self, universe: Universe) -> UniverseDef:
        return self.get(universe.value)

    def _build(self, raw: dict[str, object]) -> Dict[str, UniverseDef]:
        enemy_ids = set(self._enemies_repo.ids())
        universes: Dict[str, UniverseDef] = {}
        for raw_id, payload in raw.items():
            context = f"universe '{raw_id}'"
            try:
                universe = Universe(raw_id)
            except ValueError as exc:
                raise DataValidationError(f"{context} is not a known universe.") from exc
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"title", "currency", "safe_hub", "enemy_id"}, context)
            enemy_id = self._require_str(data["enemy_id"], f"{context} enemy_id")
            if enemy_id not in enemy_ids:
                raise DataReferenceError(f"{context} references missing enemy '{enemy_id}'.")
            universes[raw_id] = UniverseDef(
                id=universe,
                title=self._require_str(data["title"], f"{context} title"),
                currency=self._require_str(data["currency"], f"{context} currency"),
                safe_hub=self._require_str(data["safe_hub"], f"{context} safe_hub"),
                enemy_id=enemy_id,
            )
        missing = {member.value for member in Universe} - set(universes)
        if missing:
            raise DataValidationError(f"universes.json is missing entries: {sorted(missing)}")
        return universes
