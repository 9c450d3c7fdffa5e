"""User-configurable settings with environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from quoridie.core.types import WALLS_PER_PLAYER

PLAYER_KINDS: tuple[str, ...] = ("human", "random")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_PREFIX = "QUORIDIE_"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Players
    white_player: str = "human"
    black_player: str = "random"

    # Engine
    engine_seed: int | None = None

    # Rules
    walls_per_player: int = WALLS_PER_PLAYER

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for kind in (self.white_player, self.black_player):
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind: {kind!r}")
        if self.walls_per_player < 0:
            raise ValueError("walls_per_player must be >= 0")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``QUORIDIE_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str) -> str | None:
            value = env.get(_ENV_PREFIX + name)
            return value.strip() if value is not None and value.strip() else None

        seed = _get("SEED")
        walls = _get("WALLS")
        return cls(
            white_player=(_get("WHITE") or defaults.white_player).lower(),
            black_player=(_get("BLACK") or defaults.black_player).lower(),
            engine_seed=_parse_int("SEED", seed) if seed is not None else None,
            walls_per_player=(
                _parse_int("WALLS", walls)
                if walls is not None
                else defaults.walls_per_player
            ),
            log_level=_get("LOG_LEVEL") or defaults.log_level,
        )


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {value!r}") from None
