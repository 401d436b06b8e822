"""Tests for raw input decoding into key symbols."""

import os
from typing import Iterator

import pytest

from termlayers.term.input import InputReader
from termlayers.term.keys import Alpha, Key


@pytest.fixture
def pipe() -> Iterator[tuple[int, int]]:
    """A pipe whose read end stands in for the terminal."""
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    try:
        os.close(write_fd)
    except OSError:
        pass


def decode(pipe: tuple[int, int], data: bytes) -> list:
    """Write *data*, close the stream, and collect every key until EOF."""
    read_fd, write_fd = pipe
    os.write(write_fd, data)
    os.close(write_fd)
    reader = InputReader(read_fd, escape_timeout=0.05)
    keys = []
    while (key := reader.read_blocking()) is not None:
        keys.append(key)
    assert reader.at_eof
    return keys


class TestSimpleKeys:
    """Single-byte mappings."""

    def test_printable_characters(self, pipe) -> None:
        assert decode(pipe, b"Ab1") == [Alpha("A"), Alpha("b"), Alpha("1")]

    def test_space_is_a_character(self, pipe) -> None:
        assert decode(pipe, b" ") == [Alpha(" ")]

    def test_enter(self, pipe) -> None:
        assert decode(pipe, b"\r\n") == [Key.ENTER, Key.ENTER]

    def test_backspace(self, pipe) -> None:
        assert decode(pipe, b"\x08\x7f") == [Key.BACKSPACE, Key.BACKSPACE]

    def test_unicode_character(self, pipe) -> None:
        assert decode(pipe, "é".encode()) == [Alpha("é")]

    def test_character_split_across_reads(self, pipe) -> None:
        read_fd, write_fd = pipe
        encoded = "é".encode()
        reader = InputReader(read_fd)
        os.write(write_fd, encoded[:1])
        reader._read_available()
        os.write(write_fd, encoded[1:] + b"x")
        os.close(write_fd)
        assert reader.read_blocking() == Alpha("é")
        assert reader.read_blocking() == Alpha("x")
        assert reader.read_blocking() is None

    def test_truncated_character_at_end_of_input(self, pipe) -> None:
        assert decode(pipe, b"a" + "é".encode()[:1]) == [Alpha("a"), Alpha("\ufffd")]

    def test_unknown_controls_swallowed(self, pipe) -> None:
        assert decode(pipe, b"\t\x01a\x02") == [Alpha("a")]


class TestEscapeSequences:
    """Multi-byte sequences."""

    @pytest.mark.parametrize("seq, key", [
        (b"\x1b[A", Key.UP),
        (b"\x1b[B", Key.DOWN),
        (b"\x1b[C", Key.RIGHT),
        (b"\x1b[D", Key.LEFT),
        (b"\x1bOA", Key.UP),
        (b"\x1bOD", Key.LEFT),
    ])
    def test_arrows(self, pipe, seq: bytes, key: Key) -> None:
        assert decode(pipe, seq) == [key]

    @pytest.mark.parametrize("seq, key", [
        (b"\x1bOP", Key.F1),
        (b"\x1bOS", Key.F4),
        (b"\x1b[15~", Key.F5),
        (b"\x1b[17~", Key.F6),
        (b"\x1b[21~", Key.F10),
        (b"\x1b[23~", Key.F11),
        (b"\x1b[24~", Key.F12),
    ])
    def test_function_keys(self, pipe, seq: bytes, key: Key) -> None:
        assert decode(pipe, seq) == [key]

    def test_sequences_mixed_with_text(self, pipe) -> None:
        data = b"a\x1b[Bb\x1b[A\r"
        assert decode(pipe, data) == [Alpha("a"), Key.DOWN, Alpha("b"), Key.UP, Key.ENTER]

    def test_back_to_back_sequences(self, pipe) -> None:
        assert decode(pipe, b"\x1b[A\x1b[A\x1b[B") == [Key.UP, Key.UP, Key.DOWN]

    def test_unknown_sequence_swallowed(self, pipe) -> None:
        assert decode(pipe, b"\x1b[99~x") == [Alpha("x")]

    def test_lone_escape_swallowed(self, pipe) -> None:
        assert decode(pipe, b"\x1b") == []

    def test_home_is_not_in_key_set(self, pipe) -> None:
        assert decode(pipe, b"\x1b[Hz") == [Alpha("z")]


class TestEndOfInput:
    """Stream exhaustion."""

    def test_empty_stream(self, pipe) -> None:
        assert decode(pipe, b"") == []

    def test_buffered_keys_drain_before_eof(self, pipe) -> None:
        read_fd, write_fd = pipe
        os.write(write_fd, b"xy")
        os.close(write_fd)
        reader = InputReader(read_fd)
        assert reader.read_blocking() == Alpha("x")
        assert not reader.at_eof
        assert reader.read_blocking() == Alpha("y")
        assert reader.read_blocking() is None
        assert reader.read_blocking() is None
