"""Free-text and masked line prompts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termlayers.core.layer import Layer
from termlayers.term.keys import Alpha, Key, KeySymbol
from termlayers.widgets.base import BasePrompt

if TYPE_CHECKING:
    from termlayers.term.terminal import Terminal


class AskPrompt(BasePrompt[str]):
    """
    Single-line text input written after a fixed prefix.

    Keys:
        printable   Append
        Backspace   Remove the last character
        Enter       Commit
    """

    def __init__(self, terminal: Terminal, prefix: str) -> None:
        super().__init__(terminal)
        self.prefix = prefix
        self.layer = Layer()

    def start(self) -> None:
        self.terminal.out(self.prefix)
        self.layer.posx, self.layer.posy = self.terminal.cursor.position()

    def handle_key(self, key: KeySymbol) -> bool:
        if isinstance(key, Alpha):
            self.layer.set_content(self.layer.get_content() + key.char)
            self.terminal.draw_layer(self.layer)
            return True
        if key is Key.BACKSPACE:
            content = self.layer.get_content()
            if content:
                self.layer.set_content(content[:-1])
                self.terminal.draw_layer(self.layer)
            return True
        return False

    @property
    def value(self) -> str:
        return self.layer.get_content()


class MaskPrompt(AskPrompt):
    """Text input that displays *mask_char* in place of each typed character."""

    def __init__(self, terminal: Terminal, prefix: str, mask_char: str = "*") -> None:
        super().__init__(terminal, prefix)
        if len(mask_char) != 1:
            raise ValueError(f"mask_char must be a single character, got {mask_char!r}")
        self.mask_char = mask_char
        self._hidden: list[str] = []

    def handle_key(self, key: KeySymbol) -> bool:
        if isinstance(key, Alpha):
            self._hidden.append(key.char)
            self.layer.set_content(self.layer.get_content() + self.mask_char)
            self.terminal.draw_layer(self.layer)
            return True
        if key is Key.BACKSPACE:
            content = self.layer.get_content()
            if content:
                self.layer.set_content(content[:-1])
                self._hidden.pop()
                self.terminal.draw_layer(self.layer)
            return True
        return False

    @property
    def value(self) -> str:
        return "".join(self._hidden)
