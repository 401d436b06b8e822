"""Terminal driver boundary and its VT100 implementation."""

from __future__ import annotations

import logging
import sys
import termios
import tty
from typing import Optional, Protocol, TextIO, runtime_checkable

from termlayers.config import TerminalConfig
from termlayers.term.input import InputReader
from termlayers.term.keys import Alpha, KeySymbol

logger = logging.getLogger(__name__)


@runtime_checkable
class Driver(Protocol):
    """Everything the compositor and widgets need from a terminal."""

    @property
    def echo(self) -> bool:
        """True when read_key() writes typed characters at the cursor."""
        ...

    def init(self) -> None:
        """Enter cbreak input mode and prepare the screen."""
        ...

    def restore(self) -> None:
        """Undo init(). Safe to call more than once."""
        ...

    def write(self, text: str) -> None:
        """Emit text at the cursor, advancing it."""
        ...

    def flush(self) -> None:
        ...

    def move_to(self, x: int, y: int) -> None:
        """Set the absolute cursor cell (0-indexed)."""
        ...

    def delete_at_cursor(self) -> None:
        """Remove the character under the cursor, shifting the rest left."""
        ...

    def cursor_position(self) -> tuple[int, int]:
        """Current cursor cell as (x, y)."""
        ...

    def read_key(self) -> Optional[KeySymbol]:
        """Block for the next key; None when input is exhausted."""
        ...


class AnsiDriver:
    """
    Driver for VT100-compatible terminals on Unix.

    The cursor position is tracked locally rather than queried: every
    write and move goes through this object, so it always knows where
    the cursor is. Line wrapping at the right margin is not modelled.
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.config = config or TerminalConfig()
        self._stdin = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._reader: Optional[InputReader] = None
        self._saved_attrs: Optional[list] = None
        self._active = False
        self._x = 0
        self._y = 0

    @property
    def echo(self) -> bool:
        return self.config.echo

    def init(self) -> None:
        if self._active:
            return
        fd = self._stdin.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self._reader = InputReader(fd, escape_timeout=self.config.escape_timeout)
        if self.config.alternate_screen:
            self._out.write('\x1b[?1049h')
        self._out.write('\x1b[2J\x1b[H')
        self._out.flush()
        self._x = self._y = 0
        self._active = True
        logger.debug("Terminal initialized (fd=%d, %s)", fd, self.config.to_dict())

    def restore(self) -> None:
        if not self._active:
            return
        self._active = False
        try:
            if self.config.alternate_screen:
                self._out.write('\x1b[?1049l')
            self._out.write('\x1b[0m')
            self._out.flush()
        finally:
            if self._saved_attrs is not None:
                termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
                self._saved_attrs = None
        logger.debug("Terminal restored")

    def write(self, text: str) -> None:
        for i, line in enumerate(text.split('\n')):
            if i:
                self._out.write('\r\n')
                self._x = 0
                self._y += 1
            if line:
                self._out.write(line)
                self._x += len(line)

    def flush(self) -> None:
        self._out.flush()

    def move_to(self, x: int, y: int) -> None:
        x, y = max(0, x), max(0, y)
        self._out.write(f'\x1b[{y + 1};{x + 1}H')
        self._x, self._y = x, y

    def delete_at_cursor(self) -> None:
        self._out.write('\x1b[P')

    def cursor_position(self) -> tuple[int, int]:
        return self._x, self._y

    def read_key(self) -> Optional[KeySymbol]:
        if self._reader is None:
            raise RuntimeError("read_key() before init()")
        self._out.flush()
        key = self._reader.read_blocking()
        if key is None:
            logger.debug("Input exhausted")
        elif isinstance(key, Alpha) and self.echo:
            self.write(key.char)
            self._out.flush()
        return key
