"""
termlayers: layered terminal drawing and line-editing prompts

Composite positioned text layers onto a terminal by cursor movement alone,
and read input with small interactive prompts built on the same layers.

Quick Start:
    >>> from termlayers import Terminal
    >>> with Terminal.open() as t:
    ...     name = t.ask("Name: ")
    ...     t.outbr()
    ...     ok = t.yesno("y/n")

Features:
    - Layers with a stable, high-water-mark footprint
    - Layer2D grids and a relatively addressed layer stack
    - Cursor-preserving ("static") redraws
    - ask, mask, yesno and choices prompts
"""

__version__ = "0.1.0"

# Core types
from termlayers.core.layer import Layer
from termlayers.core.grid import Layer2D
from termlayers.core.arrangement import LayerArrangement, locate_idx

# Terminal
from termlayers.config import TerminalConfig
from termlayers.term.keys import Alpha, Key, KeySymbol
from termlayers.term.driver import AnsiDriver, Driver
from termlayers.term.terminal import Terminal

__all__ = [
    # Version
    "__version__",
    # Core types
    "Layer",
    "Layer2D",
    "LayerArrangement",
    "locate_idx",
    # Terminal
    "TerminalConfig",
    "Alpha",
    "Key",
    "KeySymbol",
    "AnsiDriver",
    "Driver",
    "Terminal",
]
