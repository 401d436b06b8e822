"""Terminal - the context object tying a driver to the layer stack."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from termlayers.config import TerminalConfig
from termlayers.core.arrangement import LayerArrangement
from termlayers.core.grid import Layer2D
from termlayers.core.layer import Layer
from termlayers.term.cursor import Cursor
from termlayers.term.driver import AnsiDriver, Driver
from termlayers.term.keys import Alpha, KeySymbol
from termlayers.term.render import Renderer

logger = logging.getLogger(__name__)


class Terminal:
    """
    Owns a driver, the layer stack, and the cursor/render helpers.

    Pass one Terminal into everything that draws or reads keys. Only one
    widget may run at a time.

    Example:
        >>> with Terminal.open() as t:
        ...     t.outln("Choose...")
        ...     picked = t.choices("-> ", ["c1", "c22", "c333"])
    """

    def __init__(
        self,
        driver: Optional[Driver] = None,
        config: Optional[TerminalConfig] = None,
    ) -> None:
        self.config = config or TerminalConfig()
        self.driver: Driver = driver if driver is not None else AnsiDriver(self.config)
        self.layers = LayerArrangement()
        self.cursor = Cursor(self.driver)
        self.renderer = Renderer(self.driver)

    @classmethod
    @contextmanager
    def open(
        cls,
        driver: Optional[Driver] = None,
        config: Optional[TerminalConfig] = None,
    ) -> Iterator[Terminal]:
        """Initialize the driver for the duration of the block."""
        term = cls(driver, config)
        term.driver.init()
        try:
            yield term
        finally:
            term.driver.restore()
            logger.debug("Session closed with %d grid(s) on the stack", len(term.layers))

    # -- Layer stack ----------------------------------------------------

    def add_layer(self, layer: Layer) -> Layer:
        """Push a single layer (as a 1x1 grid) and return the owned copy."""
        grid = Layer2D(layer.posx, layer.posy, 1, 1, layer)
        return self.layers.push(grid).get(0, 0)

    def add_layer2d(self, grid: Layer2D) -> Layer2D:
        return self.layers.push(grid)

    def pop_layer(self) -> Optional[Layer2D]:
        return self.layers.pop()

    def layer_front(self) -> Layer2D:
        return self.layers.front()

    def layer_back(self) -> Layer2D:
        return self.layers.back()

    def layer_locate(self, l: int) -> Layer2D:
        """
        Find a grid by relative index.

        0 is the top grid, -1 the one below it; positive numbers count up
        from the bottom (1 is the second grid pushed).
        """
        return self.layers.locate(l)

    def layer_swap(self, a: int, b: int) -> None:
        self.layers.swap(a, b)

    def refresh(self) -> None:
        """Repaint the entire stack without moving the cursor."""
        self.renderer.draw_arrangement(self.layers)

    # -- Drawing --------------------------------------------------------

    def draw_layer(self, layer: Layer) -> None:
        self.renderer.draw_layer(layer)

    def draw_layer_static(self, layer: Layer) -> None:
        self.renderer.draw_layer_static(layer)

    def draw_layer2d(self, grid: Layer2D) -> None:
        self.renderer.draw_layer2d(grid)

    def draw_layer2d_static(self, grid: Layer2D) -> None:
        self.renderer.draw_layer2d_static(grid)

    # -- Output ---------------------------------------------------------

    def out(self, text: str) -> None:
        """Write at the cursor and refresh."""
        self.driver.write(text)
        self.refresh()

    def out_static(self, text: str) -> None:
        here = self.cursor.position()
        self.out(text)
        self.cursor.move_to(*here)

    def outln(self, text: str) -> None:
        self.driver.write(text)
        self.outbr()

    def outbr(self) -> None:
        self.driver.write("\n")
        self.refresh()

    def raw_out(self, text: str) -> None:
        """Write at the cursor without refreshing."""
        self.driver.write(text)

    def raw_out_static(self, text: str) -> None:
        here = self.cursor.position()
        self.driver.write(text)
        self.cursor.move_to(*here)

    def raw_outln(self, text: str) -> None:
        self.driver.write(text)
        self.raw_br()

    def raw_br(self) -> None:
        self.driver.write("\n")

    # -- Keys -----------------------------------------------------------

    def get_char(self) -> Optional[KeySymbol]:
        return self.driver.read_key()

    def get_char_hidden(self) -> Optional[KeySymbol]:
        """Read a key, removing the driver's echo of typed characters."""
        here = self.cursor.position()
        key = self.driver.read_key()
        if isinstance(key, Alpha) and self.driver.echo:
            self.cursor.delete_prev()
        self.cursor.move_to(*here)
        return key

    # -- Widgets --------------------------------------------------------

    def ask(self, prefix: str) -> str:
        """Prompt for a line of text after *prefix*."""
        from termlayers.widgets.prompt import AskPrompt
        return AskPrompt(self, prefix).run()

    def mask(self, prefix: str, mask_char: str = "*") -> str:
        """Prompt for hidden text, showing *mask_char* per typed character."""
        from termlayers.widgets.prompt import MaskPrompt
        return MaskPrompt(self, prefix, mask_char).run()

    def yesno(self, suffix: str, default: bool = True) -> bool:
        """Ask a yes/no question; *suffix* looks like "y/n"."""
        from termlayers.widgets.yesno import YesNoPrompt
        return YesNoPrompt(self, suffix, default).run()

    def choices(self, prefix: str, items: list[str]) -> str:
        """Pick one of *items* with the arrow keys; *prefix* marks the selection."""
        from termlayers.widgets.choices import ChoicesPrompt
        return ChoicesPrompt(self, prefix, items).run()
