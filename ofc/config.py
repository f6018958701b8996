"""
Configuration for the OFC engine.

Defaults are the standard tournament constants. Any of them can be
overridden through the environment or a .env file; real environment
variables win over the file.
"""

import logging
import os
from typing import Dict, NamedTuple, Optional, Tuple

from dotenv import dotenv_values, find_dotenv

TOTAL_ROUNDS = 10
STARTING_BANKROLL = 1000
CHIP_VALUES = (5, 25, 100, 500)
DRAW_DELAY = 0.5  # seconds between a completed placement and the next draw
LOG_LEVEL = 'INFO'


class Settings(NamedTuple):
    total_rounds: int = TOTAL_ROUNDS
    starting_bankroll: int = STARTING_BANKROLL
    chip_values: Tuple[int, ...] = CHIP_VALUES
    draw_delay: float = DRAW_DELAY
    log_level: str = LOG_LEVEL

    @property
    def min_chip(self) -> int:
        return min(self.chip_values)


def load_env_file(filepath: Optional[str] = None) -> Dict[str, str]:
    """Read a .env file into a dict without touching os.environ."""
    path = filepath or find_dotenv(usecwd=True)
    if not path or not os.path.isfile(path):
        return {}
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def _lookup(name: str, env_vars: Dict[str, str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        value = env_vars.get(name)
    return value


def _positive_int(name: str, raw: str, allow_zero: bool = False) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0 or (value == 0 and not allow_zero):
        raise ValueError(f"{name} must be {'>= 0' if allow_zero else '> 0'}, got {value}")
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build Settings from defaults, the .env file and the environment."""
    env_vars = load_env_file(env_file)
    overrides = {}

    raw = _lookup('OFC_TOTAL_ROUNDS', env_vars)
    if raw is not None:
        overrides['total_rounds'] = _positive_int('OFC_TOTAL_ROUNDS', raw)

    raw = _lookup('OFC_STARTING_BANKROLL', env_vars)
    if raw is not None:
        overrides['starting_bankroll'] = _positive_int('OFC_STARTING_BANKROLL', raw, allow_zero=True)

    raw = _lookup('OFC_CHIP_VALUES', env_vars)
    if raw is not None:
        chips = tuple(_positive_int('OFC_CHIP_VALUES', part) for part in raw.split(',') if part.strip())
        if not chips:
            raise ValueError("OFC_CHIP_VALUES must list at least one chip value")
        overrides['chip_values'] = tuple(sorted(set(chips)))

    raw = _lookup('OFC_DRAW_DELAY', env_vars)
    if raw is not None:
        try:
            delay = float(raw)
        except ValueError:
            raise ValueError(f"OFC_DRAW_DELAY must be a number, got {raw!r}") from None
        if delay < 0:
            raise ValueError(f"OFC_DRAW_DELAY must be >= 0, got {delay}")
        overrides['draw_delay'] = delay

    raw = _lookup('OFC_LOG_LEVEL', env_vars)
    if raw is not None:
        level = raw.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"OFC_LOG_LEVEL is not a logging level: {raw!r}")
        overrides['log_level'] = level

    settings = Settings(**overrides)
    logging.debug(f"Loaded settings: {settings}")
    return settings
