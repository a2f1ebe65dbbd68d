"""Factory for spawning enemies from templates."""
from __future__ import annotations

from rpgchat.core.types import Universe
from rpgchat.data.content import ContentLibrary
from rpgchat.data.repositories import EnemiesRepository
from rpgchat.domain.entities import Enemy
from rpgchat.services.errors import FactoryError


def create_enemy_instance(enemy_id: str, enemies_repo: EnemiesRepository) -> Enemy:
    """Instantiate a full-health enemy from its template."""
    try:
        enemy_def = enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc
    return Enemy(
        enemy_id=enemy_def.id,
        name=enemy_def.name,
        hp_cur=enemy_def.hp,
        hp_max=enemy_def.hp,
        evasion=enemy_def.evasion,
        defense=enemy_def.defense,
        attack_icons=enemy_def.attack_icons,
        dmg_min=enemy_def.dmg_min,
        dmg_max=enemy_def.dmg_max,
        weak=enemy_def.weak,
        resist=enemy_def.resist,
    )


def create_enemy_for_universe(universe: Universe | None, content: ContentLibrary) -> Enemy:
    """Spawn the enemy that roams the given universe."""
    if universe is None:
        raise FactoryError("Cannot spawn an enemy before a universe is chosen.")
    enemy_id = content.universe_def(universe).enemy_id
    return create_enemy_instance(enemy_id, content.enemies)
