"""
Errors raised across layers.

Move errors carry a `MoveRejection` code, so the engine can turn them into a result value for its caller.
"""

from typing import Optional

from src.core.shared_types import MoveRejection


class GameError(Exception):
    """Base class for everything the chess domain raises on purpose."""

    reason: Optional[MoveRejection] = None


class NoPieceAtSourceError(GameError):
    reason = MoveRejection.NO_PIECE_AT_SOURCE


class NotYourTurnError(GameError):
    reason = MoveRejection.NOT_YOUR_TURN


class IllegalMoveError(GameError):
    reason = MoveRejection.ILLEGAL_MOVE


class GameOverError(GameError):
    reason = MoveRejection.GAME_OVER


class InvalidBoardError(GameError):
    """A board layout that cannot be played on (malformed placement string, wrong number of kings)."""


class InvalidRequestError(GameError):
    """Request data coming from outside the domain that cannot be interpreted."""
