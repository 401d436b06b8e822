"""Layer2D - a rectangular grid of layers cloned from one populator."""

from __future__ import annotations

from termlayers.core.layer import Layer


class Layer2D:
    """
    A length x height grid of Layers.

    Every cell starts as a copy of the *populator*. Cells are packed
    left-to-right, top-to-bottom: the horizontal pitch is the populator's
    content width and the vertical pitch is one row. Cell positions are
    offsets from the grid origin (posx, posy).

    Example:
        >>> dot = Layer().set_content("X")
        >>> grid = Layer2D(0, 0, 5, 5, dot)   # a 5x5 box of X
        >>> grid[3, 4].set_content("O")
    """

    def __init__(
        self,
        posx: int,
        posy: int,
        length: int,
        height: int,
        populator: Layer,
    ) -> None:
        self.posx = posx
        self.posy = posy
        self.length = length
        self.height = height
        self.layers: list[Layer] = []
        self.stack_loc = 0
        self._char_count = 0
        self.populate(populator)

    @property
    def char_count(self) -> int:
        """Content width of the populator used for the last populate."""
        return self._char_count

    def populate(self, populator: Layer) -> None:
        """Replace every cell with a copy of *populator*."""
        self._char_count = len(populator.get_content())
        self.layers = []
        for i in range(self.length * self.height):
            cell = populator.copy()
            cell.posx = (i % self.length) * self._char_count
            cell.posy = i // self.length
            self.layers.append(cell)

    def get(self, x: int, y: int) -> Layer:
        """Get the cell at column x, row y."""
        if not (0 <= x < self.length and 0 <= y < self.height):
            raise IndexError(
                f"Cell ({x}, {y}) out of bounds ({self.length}x{self.height})"
            )
        return self.layers[x + y * self.length]

    index = get

    def __getitem__(self, pos: tuple[int, int]) -> Layer:
        x, y = pos
        return self.get(x, y)

    def __len__(self) -> int:
        return len(self.layers)

    def __repr__(self) -> str:
        return (
            f"Layer2D(posx={self.posx}, posy={self.posy}, length={self.length}, "
            f"height={self.height}, stack_loc={self.stack_loc})"
        )
