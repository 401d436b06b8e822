"""Closed set of key symbols delivered to widgets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class Key(Enum):
    """Named (non-character) keys."""
    ENTER = auto()
    SPACE = auto()
    BACKSPACE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()


@dataclass(frozen=True)
class Alpha:
    """A printable character key."""
    char: str


KeySymbol = Union[Alpha, Key]
