"""Yes/no toggle rendered as "(Y/n)"."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termlayers.core.layer import Layer
from termlayers.term.keys import Key, KeySymbol
from termlayers.widgets.base import BasePrompt

if TYPE_CHECKING:
    from termlayers.term.terminal import Terminal


class YesNoPrompt(BasePrompt[bool]):
    """
    Left/right toggle between a yes and a no label.

    *suffix* holds both labels separated by '/', e.g. "y/n" or "yes/no".
    The selected label is shown upper case: "(Y/n)" or "(y/N)".
    """

    def __init__(self, terminal: Terminal, suffix: str, default: bool = True) -> None:
        super().__init__(terminal)
        parts = suffix.split("/")
        if len(parts) < 2:
            raise ValueError(f"Expected a '/' separating the yes and no labels, got {suffix!r}")
        self.yes_label, self.no_label = parts[0], parts[1]
        self.selected = default
        self.layer = Layer()

    def render(self) -> str:
        if self.selected:
            return f"({self.yes_label.upper()}/{self.no_label.lower()})"
        return f"({self.yes_label.lower()}/{self.no_label.upper()})"

    def start(self) -> None:
        self.layer.posx, self.layer.posy = self.terminal.cursor.position()
        self.layer.set_content(self.render())
        self.terminal.draw_layer(self.layer)

    def handle_key(self, key: KeySymbol) -> bool:
        if key is Key.LEFT:
            choice = True
        elif key is Key.RIGHT:
            choice = False
        else:
            return False

        if choice != self.selected:
            self.selected = choice
            self.layer.set_content(self.render())
            self.terminal.draw_layer(self.layer)
        return True

    @property
    def value(self) -> bool:
        return self.selected
