"""
Exceptions shared across layers.

Move-time problems (wrong turn, illegal move, ...) are NOT exceptions: the Game reports those as a rejected move.
Only malformed input at the boundaries (position strings, requests) and failed lookups raise.
"""


class GameError(Exception):
    """Base class for every error raised by this package."""


class InvalidFENError(GameError):
    """The position string cannot be loaded into a board."""


class InvalidRequestError(GameError):
    """A request to the service does not have the expected shape."""


class RepositoryError(GameError):
    """A game could not be found (or stored) in the repository."""


class GameStateError(GameError):
    """The stored state of a game cannot be turned back into a Game."""
