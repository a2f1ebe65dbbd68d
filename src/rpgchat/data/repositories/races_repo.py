"""Races repository."""
from __future__ import annotations

from typing import Dict

from rpgchat.data.repositories.base import RepositoryBase
from rpgchat.domain.defs import RaceDef


class RacesRepository(RepositoryBase[RaceDef]):
    """Loads the playable race table."""

    def __init__(self, base_path=None) -> None:
        super().__init__("races.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RaceDef]:
        races: Dict[str, RaceDef] = {}
        for raw_id, payload in raw.items():
            context = f"race '{raw_id}'"
            race_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                race_data, {"name", "desc", "bonuses", "weakness", "world_impact"}, context
            )
            races[raw_id] = RaceDef(
                id=raw_id,
                name=self._require_str(race_data["name"], f"{context} name"),
                desc=self._require_str(race_data["desc"], f"{context} desc"),
                bonuses=self._require_stat_map(race_data["bonuses"], f"{context} bonuses"),
                weakness=self._require_str(race_data["weakness"], f"{context} weakness"),
                world_impact=self._require_str(race_data["world_impact"], f"{context} world_impact"),
            )
        return races
