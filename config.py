"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field
from random import Random

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_seed() -> int | None:
    """Parse PARLOR_SEED environment variable."""
    raw = os.getenv("PARLOR_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PARLOR_SEED must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass(frozen=True)
class RandomConfig:
    """Random number generation configuration."""

    seed: int | None = field(default_factory=_parse_seed)

    def make_rng(self) -> Random:
        """Build a generator, seeded when a seed is configured."""
        return Random(self.seed) if self.seed is not None else Random()


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    log: LoggingConfig = field(default_factory=LoggingConfig)
    random: RandomConfig = field(default_factory=RandomConfig)


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Apply the configured log level to the root logger."""
    app_config = app_config or config
    level = logging.DEBUG if app_config.debug else app_config.log.level
    logging.basicConfig(level=level, format=LOG_FORMAT)


# Global configuration instance
config = AppConfig()
