from __future__ import annotations

from rpgchat.core.types import Universe
from rpgchat.data.content import get_default_content
from rpgchat.domain.actions import (
    SelectBackground,
    SelectClass,
    SelectRace,
    SelectSex,
    SelectUniverse,
    SubmitText,
)
from rpgchat.domain.state import GameState
from rpgchat.services.controllers import SessionController
from tests.helpers.scripted_rng import ScriptedRNG


def make_controller(*values: int) -> tuple[SessionController, ScriptedRNG]:
    rng = ScriptedRNG(values)
    return SessionController(get_default_content(), rng), rng


def play_state(
    controller: SessionController,
    universe: Universe = Universe.CLASSIC_FANTASY,
    *,
    race_id: str = "r1",
    class_id: str = "c1",
    background_id: str = "b1",
) -> GameState:
    """Walk a fresh session through creation into PLAY.

    Only non-CANON/CUSTOM universes are supported; those need an extra step.
    """
    state = controller.new_session()
    for action in (
        SelectUniverse(universe),
        SelectSex("Мужской"),
        SubmitText("Тест"),
        SelectRace(race_id),
        SelectClass(class_id),
        SelectBackground(background_id),
    ):
        state = controller.dispatch(state, action)
    return state
