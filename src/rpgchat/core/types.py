"""Closed enumerations shared by the domain and service layers."""
from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    """Top-level stage of a session."""

    SETTINGS = "SETTINGS"
    CANON_MODE = "CANON_MODE"
    CUSTOM_RULES = "CUSTOM_RULES"
    CHAR_SEX = "CHAR_SEX"
    CHAR_NAME = "CHAR_NAME"
    CHAR_RACE = "CHAR_RACE"
    CHAR_CLASS = "CHAR_CLASS"
    CHAR_BG = "CHAR_BG"
    PLAY = "PLAY"


class Node(str, Enum):
    """Narrative location inside the PLAY phase."""

    HUB = "HUB"
    BOARD = "BOARD"
    WHISPER = "WHISPER"
    CHECK = "CHECK"
    ROAD = "ROAD"


class Universe(str, Enum):
    CLASSIC_FANTASY = "CLASSIC_FANTASY"
    DARK_FANTASY = "DARK_FANTASY"
    ANIME_ISEKAI = "ANIME_ISEKAI"
    CANON = "CANON"
    CUSTOM = "CUSTOM"


class WearMode(str, Enum):
    ON = "ON"
    OFF = "OFF"


class CanonMode(str, Enum):
    A_STORYLIKE = "A_STORYLIKE"
    B_WORLDONLY = "B_WORLDONLY"


class Role(str, Enum):
    """Who a log line is attributed to."""

    SYSTEM = "system"
    PLAYER = "player"


__all__ = ["CanonMode", "Node", "Phase", "Role", "Universe", "WearMode"]
