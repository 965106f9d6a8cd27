"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.game import GameState, MoveResult
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.position import BOARD_SIZE, FILES
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, MoveRejection, PieceType, Status

SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    file_character = value[0]
    rank_character = value[1]
    if file_character not in FILES:
        return False
    return rank_character.isdigit() and 1 <= int(rank_character) <= BOARD_SIZE


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class LegalMovesRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    type: PieceType
    color: Color
    has_moved: bool

    @classmethod
    def from_piece(cls, piece: Piece) -> "PieceResponse":
        return cls(type=piece.type, color=piece.color, has_moved=piece.has_moved)


class MoveRecordResponse(BaseModel):
    from_square: SquareName
    to_square: SquareName
    piece: PieceResponse
    captured_piece: Optional[PieceResponse] = None

    @classmethod
    def from_move(cls, move: Move) -> "MoveRecordResponse":
        return cls(
            from_square=move.from_position.to_algebraic(),
            to_square=move.to_position.to_algebraic(),
            piece=PieceResponse.from_piece(move.piece),
            captured_piece=(
                PieceResponse.from_piece(move.captured_piece)
                if move.captured_piece
                else None
            ),
        )


class GameStateResponse(BaseModel):
    current_player: Color
    is_in_check: bool
    is_checkmate: bool
    is_stalemate: bool
    status: Status
    winner: Optional[Color] = None
    move_history: list[MoveRecordResponse]

    @classmethod
    def from_state(cls, state: GameState) -> "GameStateResponse":
        return cls(
            current_player=state.current_player,
            is_in_check=state.is_in_check,
            is_checkmate=state.is_checkmate,
            is_stalemate=state.is_stalemate,
            status=state.status,
            winner=state.winner,
            move_history=[MoveRecordResponse.from_move(move) for move in state.moves],
        )


class BoardResponse(BaseModel):
    """Occupied squares only, keyed by square name."""

    pieces: dict[SquareName, PieceResponse]
    current_player: Color


class LegalMovesResponse(BaseModel):
    square: SquareName
    legal_moves: list[SquareName]


class MoveResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    reason: Optional[MoveRejection] = None
    state: GameStateResponse

    @classmethod
    def from_result(cls, result: MoveResult, state: GameState) -> "MoveResponse":
        return cls(
            success=result.success,
            message=result.message,
            reason=result.reason,
            state=GameStateResponse.from_state(state),
        )
