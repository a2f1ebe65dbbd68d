"""Classes repository."""
from __future__ import annotations

from typing import Dict

from rpgchat.data.repositories.base import RepositoryBase
from rpgchat.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads the playable class table."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            context = f"class '{raw_id}'"
            class_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                class_data, {"name", "desc", "bonuses", "weakness", "world_impact"}, context
            )
            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"{context} name"),
                desc=self._require_str(class_data["desc"], f"{context} desc"),
                bonuses=self._require_stat_map(class_data["bonuses"], f"{context} bonuses"),
                weakness=self._require_str(class_data["weakness"], f"{context} weakness"),
                world_impact=self._require_str(class_data["world_impact"], f"{context} world_impact"),
            )
        return classes
