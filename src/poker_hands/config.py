"""Configuration settings for the showdown runner."""

import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() == "true"


class Config:
    """Base configuration class."""

    # Logging settings
    LOG_LEVEL = os.environ.get("POKER_HANDS_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Parsing settings
    STRICT_CARDS = _env_flag("POKER_HANDS_STRICT_CARDS")
    HAND_SEPARATOR = os.environ.get("POKER_HANDS_HAND_SEPARATOR", "|")

    # What to do with a line that fails to parse: skip, report or abort
    ON_ERROR = os.environ.get("POKER_HANDS_ON_ERROR", "report").lower()


class StrictConfig(Config):
    """Reject anything that is not a clean two character card code."""

    STRICT_CARDS = True
    ON_ERROR = "abort"


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "DEBUG"
    STRICT_CARDS = False
    HAND_SEPARATOR = "|"
    ON_ERROR = "report"


# Configuration mapping
config = {
    "default": Config,
    "strict": StrictConfig,
    "testing": TestingConfig,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class by name."""
    if config_name is None:
        config_name = os.environ.get("POKER_HANDS_CONFIG", "default")

    return config.get(config_name, Config)
