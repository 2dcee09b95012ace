"""Sweepstake configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import SweepstakeConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'sweepstake_config.json'


@lru_cache(maxsize=1)
def get_config() -> SweepstakeConfig:
    """
    Load sweepstake configuration from data/sweepstake_config.json.

    Configuration is cached after first load.

    Returns:
        SweepstakeConfig object with validated settings

    Raises:
        FileNotFoundError: If sweepstake_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from sweepstake.config import get_config
        config = get_config()
        print(f"Players per game: {config.max_players}")
    """
    return load_json(CONFIG_PATH, schema=SweepstakeConfig)


def get_starter_count() -> int:
    """Get the number of starters a complete roster needs."""
    return get_config().starter_count


def get_substitute_count() -> int:
    """Get the number of substitutes a complete roster needs."""
    return get_config().substitute_count


def get_player_limits() -> tuple[int, int]:
    """Get (min_players, max_players) allowed in a game."""
    config = get_config()
    return config.min_players, config.max_players


def get_score_values() -> dict[str, int]:
    """Get points per scoring event."""
    return get_config().score_values


def get_data_dir() -> Path:
    """Get the directory used for persisted game state."""
    return Path(get_config().data_dir)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
