"""Enemy templates repository."""
from __future__ import annotations

from typing import Dict

from rpgchat.data.errors import DataValidationError
from rpgchat.data.repositories.base import RepositoryBase
from rpgchat.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                enemy_data,
                {"name", "hp", "evasion", "defense", "attack_icons", "dmg_min", "dmg_max"},
                context,
                optional_fields={"weak", "resist"},
            )
            hp = self._require_int(enemy_data["hp"], f"{context} hp")
            if hp <= 0:
                raise DataValidationError(f"{context} hp must be positive.")
            dmg_min = self._require_int(enemy_data["dmg_min"], f"{context} dmg_min")
            dmg_max = self._require_int(enemy_data["dmg_max"], f"{context} dmg_max")
            if dmg_min > dmg_max:
                raise DataValidationError(f"{context} dmg_min exceeds dmg_max.")
            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                hp=hp,
                evasion=self._require_int(enemy_data["evasion"], f"{context} evasion"),
                defense=self._require_int(enemy_data["defense"], f"{context} defense"),
                attack_icons=tuple(
                    self._require_str_list(enemy_data["attack_icons"], f"{context} attack_icons")
                ),
                dmg_min=dmg_min,
                dmg_max=dmg_max,
                weak=self._require_optional_str(enemy_data.get("weak"), f"{context} weak"),
                resist=self._require_optional_str(enemy_data.get("resist"), f"{context} resist"),
            )
        return enemies
