"""Player actions accepted by the session controller.

Each action is only meaningful in certain phases; the controller ignores an
action that does not fit the current phase.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rpgchat.core.types import CanonMode, Universe, WearMode


@dataclass(frozen=True, slots=True)
class SelectWear:
    wear: WearMode


@dataclass(frozen=True, slots=True)
class SelectUniverse:
    universe: Universe


@dataclass(frozen=True, slots=True)
class SubmitCanon:
    title: str
    mode: CanonMode


@dataclass(frozen=True, slots=True)
class SubmitText:
    """Typed input: a name, custom world rules, a command or a free choice."""

    text: str


@dataclass(frozen=True, slots=True)
class SelectSex:
    sex: str


@dataclass(frozen=True, slots=True)
class SelectRace:
    race_id: str


@dataclass(frozen=True, slots=True)
class SelectClass:
    class_id: str


@dataclass(frozen=True, slots=True)
class SelectBackground:
    background_id: str


@dataclass(frozen=True, slots=True)
class PickChoice:
    """A numbered scene choice (1-4); choice 4 may carry a description."""

    choice: int
    text: str | None = None


Action = Union[
    SelectWear,
    SelectUniverse,
    SubmitCanon,
    SubmitText,
    SelectSex,
    SelectRace,
    SelectClass,
    SelectBackground,
    PickChoice,
]

__all__ = [
    "Action",
    "PickChoice",
    "SelectBackground",
    "SelectClass",
    "SelectRace",
    "SelectSex",
    "SelectUniverse",
    "SelectWear",
    "SubmitCanon",
    "SubmitText",
]
