"""Cursor movement and deletion primitives built on a Driver."""

from __future__ import annotations

from termlayers.term.driver import Driver


class Cursor:
    """Stateless helpers for moving the cursor and deleting characters."""

    def __init__(self, driver: Driver) -> None:
        self._driver = driver

    def position(self) -> tuple[int, int]:
        return self._driver.cursor_position()

    def posx(self) -> int:
        return self._driver.cursor_position()[0]

    def posy(self) -> int:
        return self._driver.cursor_position()[1]

    def move_to(self, x: int, y: int) -> None:
        self._driver.move_to(x, y)

    def move_offset(self, dx: int, dy: int) -> None:
        x, y = self._driver.cursor_position()
        self._driver.move_to(x + dx, y + dy)

    def move_first(self) -> None:
        """Move to column 0 of the current row."""
        self._driver.move_to(0, self.posy())

    def move_prev(self) -> None:
        self.move_offset(-1, 0)

    def move_next(self) -> None:
        self.move_offset(1, 0)

    def delete(self) -> None:
        """Delete the character under the cursor."""
        self._driver.delete_at_cursor()

    def delete_prev(self) -> None:
        """Delete the character left of the cursor."""
        self.move_prev()
        self.delete()

    def delete_offset(self, offset: int) -> None:
        """
        Delete characters while walking *offset* columns from the cursor.

        With "Hello world!" written and the cursor after it,
        ``delete_offset(-6)`` leaves "Hello ".
        Targets left of column 0 stop at column 0.
        """
        if offset == 0:
            return
        step = 1 if offset > 0 else -1
        target = max(0, self.posx() + offset)
        while self.posx() != target:
            self.move_offset(step, 0)
            self.delete()

    def delete_to(self, x: int) -> None:
        """
        Delete characters while walking to column *x*.

        With "Hello world!" written and the cursor after it,
        ``delete_to(5)`` leaves "Hello".
        """
        x = max(0, x)
        step = 1 if x > self.posx() else -1
        while self.posx() != x:
            self.move_offset(step, 0)
            self.delete()

    def delete_from(self, chars: int) -> None:
        """
        Delete the first *chars* characters of the current row.

        With "Hello world!" written, ``delete_from(5)`` leaves " world!".
        """
        self.move_first()
        self.move_offset(chars, 0)
        self.delete_to(0)
