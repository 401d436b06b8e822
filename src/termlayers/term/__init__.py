"""Terminal driver, input decoding, cursor primitives and rendering."""

from termlayers.term.keys import Alpha, Key, KeySymbol
from termlayers.term.input import InputReader
from termlayers.term.driver import AnsiDriver, Driver
from termlayers.term.cursor import Cursor
from termlayers.term.render import Renderer
from termlayers.term.terminal import Terminal

__all__ = [
    "Alpha",
    "Key",
    "KeySymbol",
    "InputReader",
    "AnsiDriver",
    "Driver",
    "Cursor",
    "Renderer",
    "Terminal",
]
