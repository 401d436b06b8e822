"""Tests for the VT100 driver."""

import io
import logging
import os
from typing import Iterator

import pytest

from termlayers.config import TerminalConfig
from termlayers.term.driver import AnsiDriver, Driver
from termlayers.term.keys import Alpha, Key
from termlayers.term.terminal import Terminal

from screen_driver import ScreenDriver


class TestOutputTracking:
    """Cursor bookkeeping without a real terminal."""

    def test_write_advances_cursor(self) -> None:
        out = io.StringIO()
        drv = AnsiDriver(stdout=out)
        drv.write("Hello")
        assert drv.cursor_position() == (5, 0)
        assert out.getvalue() == "Hello"

    def test_newline_returns_to_column_zero(self) -> None:
        out = io.StringIO()
        drv = AnsiDriver(stdout=out)
        drv.write("ab\ncd\n")
        assert drv.cursor_position() == (0, 2)
        assert out.getvalue() == "ab\r\ncd\r\n"

    def test_move_to_is_one_indexed_on_the_wire(self) -> None:
        out = io.StringIO()
        drv = AnsiDriver(stdout=out)
        drv.move_to(3, 4)
        assert drv.cursor_position() == (3, 4)
        assert out.getvalue() == "\x1b[5;4H"

    def test_move_to_clamps_negative(self) -> None:
        drv = AnsiDriver(stdout=io.StringIO())
        drv.move_to(-2, -1)
        assert drv.cursor_position() == (0, 0)

    def test_delete_uses_dch(self) -> None:
        out = io.StringIO()
        drv = AnsiDriver(stdout=out)
        drv.write("x")
        drv.delete_at_cursor()
        assert out.getvalue() == "x\x1b[P"
        assert drv.cursor_position() == (1, 0)

    def test_read_before_init(self) -> None:
        drv = AnsiDriver(stdout=io.StringIO())
        with pytest.raises(RuntimeError):
            drv.read_key()

    def test_echo_comes_from_config(self) -> None:
        assert AnsiDriver(stdout=io.StringIO()).echo is True
        assert AnsiDriver(TerminalConfig(echo=False), stdout=io.StringIO()).echo is False

    def test_drivers_satisfy_protocol(self) -> None:
        assert isinstance(AnsiDriver(stdout=io.StringIO()), Driver)
        assert isinstance(ScreenDriver(), Driver)


@pytest.fixture
def pty_pair() -> Iterator[tuple[int, io.TextIOWrapper]]:
    """A pseudo-terminal: (master fd, slave opened as a text stream)."""
    master, slave = os.openpty()
    stdin = os.fdopen(slave, "r")
    yield master, stdin
    stdin.close()
    os.close(master)


class TestPseudoTerminal:
    """The full driver against a pseudo-terminal."""

    def test_init_restore_and_read(self, pty_pair) -> None:
        master, stdin = pty_pair
        out = io.StringIO()
        config = TerminalConfig(escape_timeout=0.05)
        drv = AnsiDriver(config, stdin=stdin, stdout=out)

        drv.init()
        assert out.getvalue() == "\x1b[?1049h\x1b[2J\x1b[H"
        assert drv.cursor_position() == (0, 0)

        os.write(master, b"a\x1b[B\r")
        assert drv.read_key() == Alpha("a")
        assert drv.cursor_position() == (1, 0)
        assert drv.read_key() is Key.DOWN
        assert drv.read_key() is Key.ENTER

        drv.restore()
        drv.restore()
        assert out.getvalue().endswith("\x1b[?1049l\x1b[0m")

    def test_no_echo_no_alternate_screen(self, pty_pair) -> None:
        master, stdin = pty_pair
        out = io.StringIO()
        config = TerminalConfig(echo=False, alternate_screen=False)
        drv = AnsiDriver(config, stdin=stdin, stdout=out)
        drv.init()
        os.write(master, b"z")
        assert drv.read_key() == Alpha("z")
        assert drv.cursor_position() == (0, 0)
        drv.restore()
        assert "\x1b[?1049" not in out.getvalue()

    def test_terminal_session(self, pty_pair) -> None:
        master, stdin = pty_pair
        out = io.StringIO()
        drv = AnsiDriver(stdin=stdin, stdout=out)
        with Terminal.open(drv) as t:
            # cbreak mode flushes pending input, so type only once it is active
            os.write(master, b"hi\x7f!\r")
            answer = t.ask("> ")
        assert answer == "h!"
        assert out.getvalue().endswith("\x1b[?1049l\x1b[0m")

    def test_session_without_echo_keeps_prompt(self, pty_pair) -> None:
        master, stdin = pty_pair
        out = io.StringIO()
        drv = AnsiDriver(TerminalConfig(echo=False), stdin=stdin, stdout=out)
        with Terminal.open(drv) as t:
            os.write(master, b"ab\r")
            answer = t.ask("Name:")
        assert answer == "ab"
        assert "\x1b[P" not in out.getvalue()

    def test_init_logs_settings(self, pty_pair, caplog) -> None:
        _, stdin = pty_pair
        drv = AnsiDriver(TerminalConfig(alternate_screen=False), stdin=stdin, stdout=io.StringIO())
        with caplog.at_level(logging.DEBUG, logger="termlayers"):
            drv.init()
            drv.restore()
        assert "'alternate_screen': False" in caplog.text


class TestSessionLifecycle:
    """Terminal.open always restores the driver."""

    def test_restore_on_error(self) -> None:
        drv = ScreenDriver()
        with pytest.raises(ValueError):
            with Terminal.open(drv) as t:
                t.yesno("no separator")
        assert drv.initialized
        assert drv.restored
