"""Vertical choice list driven by the up/down arrows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termlayers.core.layer import Layer
from termlayers.term.keys import Key, KeySymbol
from termlayers.widgets.base import BasePrompt

if TYPE_CHECKING:
    from termlayers.term.terminal import Terminal


class ChoicesPrompt(BasePrompt[str]):
    """
    One row per item starting on the next line; the selected row carries
    *prefix*. Selection is clamped at both ends (no wrap-around).
    """

    def __init__(self, terminal: Terminal, prefix: str, items: list[str]) -> None:
        super().__init__(terminal)
        if not items:
            raise ValueError("choices() needs at least one item")
        self.prefix = prefix
        self.items = list(items)
        self.selected = 0
        self.layers: list[Layer] = []

    def _render_item(self, i: int) -> None:
        layer = self.layers[i]
        if i == self.selected:
            layer.set_content(self.prefix + layer.inner_content)
        else:
            layer.inner_to_outer()
        self.terminal.draw_layer_static(layer)

    def start(self) -> None:
        self.terminal.outbr()
        x, y = self.terminal.cursor.position()
        self.layers = []
        for i, item in enumerate(self.items):
            layer = Layer(x, y + i)
            layer.inner_content = item
            self.layers.append(layer)
            self._render_item(i)
        self.terminal.cursor.move_offset(0, len(self.layers))

    def handle_key(self, key: KeySymbol) -> bool:
        if key is Key.DOWN:
            target = min(self.selected + 1, len(self.layers) - 1)
        elif key is Key.UP:
            target = max(self.selected - 1, 0)
        else:
            return False

        if target != self.selected:
            self.selected = target
            for i in range(len(self.layers)):
                self._render_item(i)
        return True

    @property
    def value(self) -> str:
        return self.layers[self.selected].inner_content
