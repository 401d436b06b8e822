"""Keyboard input decoding from a raw file descriptor."""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from typing import Optional

from termlayers.term.keys import Alpha, Key, KeySymbol


class InputReader:
    """
    Blocking keyboard reader that yields KeySymbols.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    Input outside the closed key set is dropped here so widgets never
    see it.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Function keys
        'OP': Key.F1,
        'OQ': Key.F2,
        'OR': Key.F3,
        'OS': Key.F4,
        '[1P': Key.F1,
        '[1Q': Key.F2,
        '[1R': Key.F3,
        '[1S': Key.F4,
        '[11~': Key.F1,
        '[12~': Key.F2,
        '[13~': Key.F3,
        '[14~': Key.F4,
        '[15~': Key.F5,
        '[17~': Key.F6,
        '[18~': Key.F7,
        '[19~': Key.F8,
        '[20~': Key.F9,
        '[21~': Key.F10,
        '[23~': Key.F11,
        '[24~': Key.F12,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    def __init__(self, fd: Optional[int] = None, escape_timeout: float = 0.1) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._escape_timeout = escape_timeout
        self._eof = False
        # keeps a multi-byte character split across reads together
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    @property
    def at_eof(self) -> bool:
        """True once the stream is closed and every buffered key was consumed."""
        return self._eof and not self._buffer

    def read_blocking(self) -> Optional[KeySymbol]:
        """
        Read the next recognised key, blocking until one arrives.

        Returns None once the input stream is exhausted.
        """
        while True:
            while self._buffer:
                symbol = self._process_buffer()
                if symbol is not None:
                    return symbol
            if self._eof:
                return None
            if self._has_input(1.0):
                self._read_available()

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            data = os.read(self._fd, 1024)
        except BlockingIOError:
            return
        except OSError:
            # EIO once the other end of a pty has gone away
            self._eof = True
            return
        if not data:
            self._finish()
            return
        self._buffer += self._decoder.decode(data)

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + self._escape_timeout

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                except BlockingIOError:
                    continue
                except OSError:
                    data = b""
                if not data:
                    self._finish()
                    return
                self._buffer += self._decoder.decode(data)

                # Check if sequence looks complete
                rest = self._buffer[1:]
                if len(rest) > 1 and (rest[-1].isalpha() or rest[-1] == '~'):
                    return
                if rest in self.SEQUENCES:
                    return

    def _finish(self) -> None:
        """Mark end of input, flushing any incomplete trailing character."""
        self._buffer += self._decoder.decode(b'', final=True)
        self._eof = True

    def _process_buffer(self) -> Optional[KeySymbol]:
        """Consume the next unit of buffered input; None if it was dropped."""
        ch = self._buffer[0]

        if ch in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return self.SIMPLE_KEYS[ch]

        if ch == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if ch.isprintable():
            return Alpha(ch)

        # Unknown control character
        return None

    def _parse_escape_sequence(self) -> Optional[KeySymbol]:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if i > 0 and (ch.isalpha() or ch == '~'):
                end_idx = i + 1
                break
            end_idx = i + 1

        if end_idx == 0:
            # Lone escape
            self._buffer = self._buffer[1:]
            return None

        seq = rest[:end_idx]
        self._buffer = self._buffer[1 + end_idx:]
        return self.SEQUENCES.get(seq)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            self._eof = True
            return False
