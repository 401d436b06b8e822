"""Base class for the blocking, single-layer prompt widgets."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from termlayers.term.keys import Key, KeySymbol

if TYPE_CHECKING:
    from termlayers.term.terminal import Terminal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BasePrompt(ABC, Generic[T]):
    """
    Read-key/repaint loop shared by every prompt.

    ``run`` draws the initial state, then feeds each key from the hidden
    key read to ``handle_key`` until Enter is pressed or input runs out,
    and returns ``value``.
    """

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    @abstractmethod
    def start(self) -> None:
        """Draw the prompt and position the cursor."""
        pass

    @abstractmethod
    def handle_key(self, key: KeySymbol) -> bool:
        """Handle one key. Returns True if consumed."""
        pass

    @property
    @abstractmethod
    def value(self) -> T:
        pass

    def run(self) -> T:
        self.start()
        while not self._done:
            key = self.terminal.get_char_hidden()
            if key is None or key is Key.ENTER:
                self._done = True
                break
            self.handle_key(key)
        self.terminal.driver.flush()
        logger.debug("%s finished", type(self).__name__)
        return self.value
