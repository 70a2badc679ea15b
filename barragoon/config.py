"""Engine configuration.

Values come from the environment with sensible defaults:

- ``BARRAGOON_ENGINE_NAME``: name reported in the protocol handshake
- ``BARRAGOON_ENGINE_AUTHOR``: author reported in the protocol handshake
- ``BARRAGOON_LOG_LEVEL``: logging level name for the console entry point
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from . import __version__

__all__ = ["EngineConfig"]

DEFAULT_ENGINE_NAME = "barragoon-engine"
DEFAULT_AUTHOR = "Barragoon developers"
DEFAULT_LOG_LEVEL = "WARNING"


def _parse_version(version: str) -> tuple[int, int, int]:
    parts = [int(part) for part in version.split(".")[:3]]
    parts += [0] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


@dataclass(frozen=True)
class EngineConfig:
    """Identity and runtime settings of the engine process."""

    name: str = DEFAULT_ENGINE_NAME
    author: str = DEFAULT_AUTHOR
    version: tuple[int, int, int] = _parse_version(__version__)
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def version_string(self) -> str:
        major, minor, patch = self.version
        return f"v{major}.{minor}.{patch}"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def from_env(cls) -> EngineConfig:
        return cls(
            name=os.getenv("BARRAGOON_ENGINE_NAME", DEFAULT_ENGINE_NAME),
            author=os.getenv("BARRAGOON_ENGINE_AUTHOR", DEFAULT_AUTHOR),
            log_level=os.getenv("BARRAGOON_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
