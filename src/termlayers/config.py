"""Runtime configuration, overridable through TERMLAYERS_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

ENV_PREFIX = "TERMLAYERS_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name}: expected a boolean, got {raw!r}")


@dataclass(frozen=True)
class TerminalConfig:
    """
    Settings for the terminal driver and diagnostics.

    Attributes:
        echo: Echo typed characters back like a cooked terminal does; the
            hidden key read expects this and removes the echo itself.
        alternate_screen: Draw on the alternate screen buffer.
        escape_timeout: Seconds to wait for the rest of an escape sequence.
        log_level: Level name for the ``termlayers`` logger.
        log_file: Optional file receiving log records.
    """
    echo: bool = True
    alternate_screen: bool = True
    escape_timeout: float = 0.1
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> TerminalConfig:
        """Build a config from defaults overlaid with environment variables."""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        if (raw := env.get(f"{ENV_PREFIX}ECHO")) is not None:
            overrides["echo"] = _parse_bool("ECHO", raw)
        if (raw := env.get(f"{ENV_PREFIX}ALT_SCREEN")) is not None:
            overrides["alternate_screen"] = _parse_bool("ALT_SCREEN", raw)
        if (raw := env.get(f"{ENV_PREFIX}ESCAPE_TIMEOUT")) is not None:
            try:
                overrides["escape_timeout"] = float(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}ESCAPE_TIMEOUT: expected seconds, got {raw!r}"
                ) from None
        if (raw := env.get(f"{ENV_PREFIX}LOG_LEVEL")) is not None:
            overrides["log_level"] = raw.strip().upper()
        if (raw := env.get(f"{ENV_PREFIX}LOG_FILE")):
            overrides["log_file"] = raw

        return cls(**overrides)

    def to_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
