"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    RUNNING = "running"
    INVALID = "invalid"
    CHECKMATE = "checkmate"
    DRAW = "draw"


# --- NOTE: the domain layer has its own Color (src/chess/pieces.py) which includes the 'no piece' case.
# --- This one only holds the two sides and is what crosses the API boundary.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
