"""Painting layers and grids through a Driver."""

from __future__ import annotations

from termlayers.core.arrangement import LayerArrangement
from termlayers.core.grid import Layer2D
from termlayers.core.layer import Layer
from termlayers.term.driver import Driver


class Renderer:
    """
    Draws layers by cursor movement alone.

    Each draw blanks the layer's whole allocated width before writing the
    content, so shorter content never leaves stale characters behind.
    """

    def __init__(self, driver: Driver) -> None:
        self._driver = driver

    def _write_static(self, text: str) -> None:
        here = self._driver.cursor_position()
        self._driver.write(text)
        self._driver.move_to(*here)

    def _draw_at(self, layer: Layer, x: int, y: int) -> None:
        self._driver.move_to(x, y)
        self._write_static(" " * layer.length)
        self._driver.write(layer.get_content())

    def draw_layer(self, layer: Layer) -> None:
        """Draw a layer, leaving the cursor after its content."""
        self._draw_at(layer, layer.posx, layer.posy)

    def draw_layer_static(self, layer: Layer) -> None:
        """Draw a layer without moving the cursor."""
        here = self._driver.cursor_position()
        self.draw_layer(layer)
        self._driver.move_to(*here)

    def draw_layer2d(self, grid: Layer2D) -> None:
        """Draw every cell of a grid, in order, relative to its origin."""
        self._driver.move_to(grid.posx, grid.posy)
        for cell in grid.layers:
            here = self._driver.cursor_position()
            self._draw_at(cell, grid.posx + cell.posx, grid.posy + cell.posy)
            self._driver.move_to(*here)

    def draw_layer2d_static(self, grid: Layer2D) -> None:
        """Draw every cell of a grid without moving the cursor."""
        here = self._driver.cursor_position()
        self.draw_layer2d(grid)
        self._driver.move_to(*here)

    def draw_arrangement(self, arrangement: LayerArrangement) -> None:
        """Repaint the whole stack bottom-first, then restore the cursor."""
        here = self._driver.cursor_position()
        for grid in arrangement:
            self.draw_layer2d(grid)
        self._driver.move_to(*here)
        self._driver.flush()
