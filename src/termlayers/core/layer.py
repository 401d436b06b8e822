"""Layer - a positioned, single-line text region."""

from __future__ import annotations


class Layer:
    """
    A single-line text region anchored at (posx, posy).

    A layer keeps the widest footprint it has ever displayed: replacing
    "Hello" with "Bye" leaves ``length`` at 5, so the next draw blanks the
    two stale cells. ``shrink`` drops that footprint.

    ``inner_content`` is never drawn; widgets use it to hold the plain text
    behind a decorated display string.
    """

    __slots__ = ("posx", "posy", "inner_content", "_content", "_length")

    def __init__(self, posx: int = 0, posy: int = 0) -> None:
        self.posx = posx
        self.posy = posy
        self.inner_content = ""
        self._content = ""
        self._length = 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def length(self) -> int:
        """Allocated width in cells (high-water mark of content length)."""
        return self._length

    def get_content(self) -> str:
        return self._content

    def set_content(self, text: str) -> Layer:
        """Replace the displayed text, growing the footprint if needed."""
        self._content = text
        if len(text) > self._length:
            self._length = len(text)
        return self

    def inner_to_outer(self) -> None:
        """Display the inner content."""
        self.set_content(self.inner_content)

    def shrink(self) -> None:
        """Forget any padding beyond the current content."""
        self._length = len(self._content)

    def copy(self) -> Layer:
        clone = Layer(self.posx, self.posy)
        clone.inner_content = self.inner_content
        clone._content = self._content
        clone._length = self._length
        return clone

    def __repr__(self) -> str:
        return (
            f"Layer(posx={self.posx}, posy={self.posy}, "
            f"content={self._content!r}, length={self._length})"
        )
