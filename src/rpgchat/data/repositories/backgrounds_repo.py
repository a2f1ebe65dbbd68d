"""Backgrounds repository."""
from __future__ import annotations

from typing import Dict

from rpgchat.data.repositories.base import RepositoryBase
from rpgchat.domain.defs import BackgroundDef


class BackgroundsRepository(RepositoryBase[BackgroundDef]):
    def __init__(self, base_path=None) -> None:
        super().__init__("backgrounds.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, BackgroundDef]:
        backgrounds: Dict[str, BackgroundDef] = {}
        for raw_id, payload in raw.items():
            context = f"background '{raw_id}'"
            bg_data = self._require_mapping(payload, context)
            self._assert_exact_fields(bg_data, {"name", "desc", "bonus", "perk"}, context)
            backgrounds[raw_id] = BackgroundDef(
                id=raw_id,
                name=self._require_str(bg_data["name"], f"{context} name"),
                desc=self._require_str(bg_data["desc"], f"{context} desc"),
                bonus=self._require_stat_map(bg_data["bonus"], f"{context} bonus"),
                perk=self._require_str(bg_data["perk"], f"{context} perk"),
            )
        return backgrounds
