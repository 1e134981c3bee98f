"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
Notation = str
SquareName = str


@dataclass
class GameModel:
    """Transport-safe representation of a chess game used between API, Service, DB, and Game layers."""

    fen: str
    moves: list[Notation] = field(default_factory=list)
    captured: list[str] = field(default_factory=list)  # FEN letters, most recent first
    checks: list[SquareName] = field(default_factory=list)
    message: str = ""
    status: str = "running"
