"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


class MoveRejection(StrEnum):
    """Reason codes for a move that was not accepted by the engine."""

    NO_PIECE_AT_SOURCE = "no piece at source"
    NOT_YOUR_TURN = "not your turn"
    ILLEGAL_MOVE = "illegal move"
    GAME_OVER = "game over"
