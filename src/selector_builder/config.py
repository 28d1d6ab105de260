from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class CliConfig:
    log_level: str = "WARNING"  # any stdlib logging level name

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")


def configure_logging(config: CliConfig) -> None:
    """Route library log records to stderr at the configured level."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
