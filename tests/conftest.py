"""Pytest configuration: in-memory drivers and terminals."""

from typing import Callable

import pytest

from screen_driver import ScreenDriver

from termlayers.config import TerminalConfig
from termlayers.term.keys import KeySymbol
from termlayers.term.terminal import Terminal


@pytest.fixture
def driver() -> ScreenDriver:
    """Fixture providing an empty in-memory driver."""
    return ScreenDriver()


@pytest.fixture
def terminal(driver: ScreenDriver) -> Terminal:
    """Fixture providing a Terminal over the in-memory driver."""
    return Terminal(driver)


@pytest.fixture
def scripted() -> Callable[..., tuple[Terminal, ScreenDriver]]:
    """Factory building a Terminal whose driver replays the given keys."""
    def make(*keys: KeySymbol, echo: bool = True) -> tuple[Terminal, ScreenDriver]:
        drv = ScreenDriver(keys, echo=echo)
        return Terminal(drv, TerminalConfig(echo=echo)), drv
    return make
