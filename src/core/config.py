"""
Runtime configuration, read from the environment.

CHESS_LOG_LEVEL     logging level name (default INFO)
CHESS_STARTING_FEN  position new games start from when a request does not supply one
"""

import logging
import os
from dataclasses import dataclass

from src.chess.fen import STARTING_FEN


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    starting_fen: str = STARTING_FEN


def get_settings() -> Settings:
    return Settings(
        log_level=os.environ.get("CHESS_LOG_LEVEL", "INFO").upper(),
        starting_fen=os.environ.get("CHESS_STARTING_FEN", STARTING_FEN),
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Basic logging setup for whoever embeds the engine (a CLI, a web app, ...)"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
