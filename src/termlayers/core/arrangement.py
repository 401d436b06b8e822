"""LayerArrangement - the z-ordered stack of grids painted on refresh."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from termlayers.core.grid import Layer2D

logger = logging.getLogger(__name__)


def locate_idx(length: int, l: int) -> int:
    """
    Resolve a relative stack index to an absolute list index.

    Positive values count up from the bottom (1 is the second grid pushed);
    zero and negative values count down from the top (0 is the last grid
    pushed, -1 the one below it). The result is not range-checked.
    """
    if l > 0:
        return l
    return length - 1 + l


class LayerArrangement:
    """
    Ordered stack of Layer2D panels.

    Paint order is list order, so later pushes appear on top. Given a
    stack of four grids:

        [ L4 ] <- locate(0) / front()
        [ L3 ] <- locate(-1)
        [ L2 ] <- locate(1) or locate(-2)
        [ L1 ] <- back()
    """

    def __init__(self) -> None:
        self._stack: list[Layer2D] = []

    def push(self, grid: Layer2D) -> Layer2D:
        grid.stack_loc = -len(self._stack)
        self._stack.append(grid)
        logger.debug("Pushed %r (stack size %d)", grid, len(self._stack))
        return grid

    def pop(self) -> Optional[Layer2D]:
        if not self._stack:
            return None
        grid = self._stack.pop()
        logger.debug("Popped %r (stack size %d)", grid, len(self._stack))
        return grid

    def _resolve(self, l: int) -> int:
        idx = locate_idx(len(self._stack), l)
        if not 0 <= idx < len(self._stack):
            raise IndexError(
                f"Relative index {l} resolves to {idx}, "
                f"outside stack of {len(self._stack)}"
            )
        return idx

    def locate(self, l: int) -> Layer2D:
        return self._stack[self._resolve(l)]

    def front(self) -> Layer2D:
        """The top (last pushed) grid."""
        if not self._stack:
            raise IndexError("front() on an empty layer stack")
        return self._stack[-1]

    def back(self) -> Layer2D:
        """The bottom (first pushed) grid."""
        if not self._stack:
            raise IndexError("back() on an empty layer stack")
        return self._stack[0]

    def swap(self, a: int, b: int) -> None:
        """Swap two grids addressed by relative index, changing paint order."""
        ia, ib = self._resolve(a), self._resolve(b)
        self._stack[ia], self._stack[ib] = self._stack[ib], self._stack[ia]
        logger.debug("Swapped stack slots %d and %d", ia, ib)

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Layer2D]:
        return iter(self._stack)
