"""
The GameEngine is the entrypoint into the domain layer.
It is responsible for orchestrating all the rules required to play a turn:
turn order, legal moves (self-check prevention), executing moves and deriving check/checkmate/stalemate.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.position import Position
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    GameError,
    GameOverError,
    IllegalMoveError,
    InvalidBoardError,
    NoPieceAtSourceError,
    NotYourTurnError,
)
from src.core.shared_types import MoveRejection, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """Snapshot of the game, derived from the board and the side to move."""

    current_player: Color
    is_in_check: bool
    is_checkmate: bool
    is_stalemate: bool
    moves: tuple[Move, ...]

    @property
    def status(self) -> Status:
        if self.is_checkmate:
            return Status.CHECKMATE
        if self.is_stalemate:
            return Status.STALEMATE
        if self.is_in_check:
            return Status.CHECK
        return Status.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_stalemate

    @property
    def winner(self) -> Optional[Color]:
        """
        Only defined for checkmate.
        The player to move just got mated, so the opponent must be the winner
        """
        if not self.is_checkmate:
            return None
        return self.current_player.opponent


@dataclass(frozen=True)
class MoveResult:
    success: bool
    message: Optional[str] = None
    reason: Optional[MoveRejection] = None


@dataclass
class GameEngine:
    # --- DOMAIN LAYER API CALLED BY THE DRIVER (service, UI controller, tests) ---

    board: Board = field(default_factory=Board.starting_position)
    current_player: Color = Color.WHITE
    moves: list[Move] = field(default_factory=list)
    settings: Settings = field(default_factory=get_settings, repr=False)
    state: GameState = field(init=False)

    def __post_init__(self) -> None:
        self._update_game_state()

    @classmethod
    def from_fen(
        cls,
        placement: str,
        color_to_move: Color = Color.WHITE,
        settings: Optional[Settings] = None,
    ) -> Self:
        """
        Start from an arbitrary layout (piece placement part of a FEN string).
        Check detection assumes exactly one king per side, so anything else is refused.
        """
        board = Board.from_fen(placement)
        for color in Color:
            num_kings = len(board.locate_pieces(PieceType.KING, color))
            if num_kings != 1:
                raise InvalidBoardError(
                    f"Board layout must hold exactly one {color} king, found {num_kings}: {placement!r}"
                )
        return cls(
            board=board,
            current_player=color_to_move,
            settings=settings or get_settings(),
        )

    def get_piece_at(self, position: Position) -> Optional[Piece]:
        if not position.is_within_bounds():
            return None
        return self.board.piece_at(position)

    def get_valid_moves(self, position: Position) -> set[Position]:
        """
        Legal destinations for the piece on the given square.
        ----

        1. Empty square, or not your piece? Nothing to do.
        2. Generate the candidate moves using the basic movement rules (the board does this calculation)
        3. Remove the ones that would put (or leave) your own king in check.
        """
        piece = self.get_piece_at(position)
        if piece is None or piece.color != self.current_player:
            return set()

        return {
            target
            for target in self.board.candidate_moves(position)
            if not self._is_putting_yourself_in_check(position, target)
        }

    def make_move(self, from_position: Position, to_position: Position) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. validate (piece present, your turn, legal destination)
        2. update the board
        3. update the (history of) moves
        4. hand the turn to the opponent
        5. recompute the game state

        A rejected move changes nothing and is reported in the result, never raised.
        """
        try:
            piece = self._validate_move(from_position, to_position)
        except GameError as error:
            logger.debug(
                "Rejected move %s-%s: %s", from_position, to_position, error
            )
            return MoveResult(success=False, message=str(error), reason=error.reason)

        captured_piece = self.board.move_piece(from_position, to_position)
        self.moves.append(Move(from_position, to_position, piece, captured_piece))
        self.current_player = self.current_player.opponent
        self._update_game_state()

        logger.info(
            "%s %s %s-%s%s",
            piece.color,
            piece.type,
            from_position,
            to_position,
            f" takes {captured_piece.type}" if captured_piece else "",
        )
        if self.state.is_game_over:
            logger.info("Game over: %s", self.state.status)
        return MoveResult(success=True)

    def get_game_state(self) -> GameState:
        """The state is frozen and holds the history as a tuple, so callers get a snapshot, not a live view."""
        return self.state

    def get_king(self, color: Color) -> Optional[Position]:
        return self.board.locate_king(color)

    def reset_game(self) -> None:
        """Back to the standard starting layout, white to move, no history."""
        self.board = Board.starting_position()
        self.current_player = Color.WHITE
        self.moves = []
        self._update_game_state()
        logger.info("Game reset")

    def is_in_check(self, color: Color) -> bool:
        return self.board.is_check(color)

    def has_valid_moves(self, color: Color) -> bool:
        """
        Does the player have any legal move at all?
        NOTE: legal moves are computed for the side to move, so this is only meaningful for `current_player`.
        """
        return any(
            self.get_valid_moves(position)
            for position in self.board.locate_color(color)
        )

    # -- PRIVATE HELPERS ---
    def _validate_move(self, from_position: Position, to_position: Position) -> Piece:
        """Raise the appropriate GameError if the move cannot be played. Returns the piece that is moving."""
        if self.settings.reject_moves_after_game_over and self.state.is_game_over:
            raise GameOverError(f"Game is over. status: {self.state.status}")

        piece = self.get_piece_at(from_position)
        if piece is None:
            raise NoPieceAtSourceError(f"No piece at source position {from_position}")

        if piece.color != self.current_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.current_player} to make a move first."
            )

        if to_position not in self.get_valid_moves(from_position):
            raise IllegalMoveError(f"Move not allowed: {from_position}-{to_position}")
        return piece

    def _is_putting_yourself_in_check(
        self, from_position: Position, to_position: Position
    ) -> bool:
        """Return True if the move puts you in check

        plan:
        1. Copy the board (the live board is never touched)
        2. make the candidate move
        3. determine if king is in check on the new board
        """
        board = self.board.copy()
        board.move_piece(from_position, to_position)
        return board.is_check(self.current_player)

    def _update_game_state(self) -> None:
        """Recompute from scratch (never patched incrementally)."""
        is_in_check = self.is_in_check(self.current_player)
        has_valid_moves = self.has_valid_moves(self.current_player)
        self.state = GameState(
            current_player=self.current_player,
            is_in_check=is_in_check,
            is_checkmate=is_in_check and not has_valid_moves,
            is_stalemate=not is_in_check and not has_valid_moves,
            moves=tuple(self.moves),
        )
