"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the pseudo-legal destinations for each piece type.


Legality (not leaving your own king in check) is checked later by the GameEngine
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.position import BOARD_SIZE, Position


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, position: Position) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """A move that has been played. Never changed once recorded in the history."""

    from_position: Position
    to_position: Position
    piece: Piece
    captured_piece: Optional[Piece] = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None


# --- DIRECTIONS, as (delta file, delta rank) ---
STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS

# white moves UP the board, black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: BOARD_SIZE - 1}


# --- MOVEMENT RULES ---
def raycasting_move(
    position: Position, board: Board, directions: list[Vector]
) -> list[Position]:
    """
    Raycasting algorithm
    -----

    ---
    We define move directions and move along them until we hit another piece or
    the edge of the board. A ray can never be longer than the board itself.
    """
    player_color = _color_at(position, board)

    targets: list[Position] = []
    for df, dr in directions:
        for distance in range(1, BOARD_SIZE):
            target = position.offset(df * distance, dr * distance)
            if not target.is_within_bounds():
                break

            piece_found = board.piece_at(target)
            if piece_found is not None:
                # only the first occupied square counts, and only if it can be captured.
                if piece_found.color != player_color:
                    targets.append(target)
                break

            targets.append(target)
    return targets


def single_step_move(
    position: Position, board: Board, deltas: list[Vector]
) -> list[Position]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that jump a single step along a direction"""
    player_color = _color_at(position, board)

    targets: list[Position] = []
    for df, dr in deltas:
        target = position.offset(df, dr)
        if not target.is_within_bounds():
            continue

        piece_found = board.piece_at(target)
        if piece_found is None or piece_found.color != player_color:
            targets.append(target)
    return targets


def candidate_pawn_moves(position: Position, board: Board) -> list[Position]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - can move by two from its starting rank, if both squares are empty.
    - takes diagonally forward, only when an opponent's piece stands there.
    """
    player_color = _color_at(position, board)
    direction = PAWN_DIRECTION[player_color]

    targets: list[Position] = []
    one_step = position.offset(0, direction)
    if one_step.is_within_bounds() and board.piece_at(one_step) is None:
        targets.append(one_step)

        two_steps = position.offset(0, 2 * direction)
        is_on_starting_rank = position.rank == PAWN_STARTING_RANK[player_color]
        if is_on_starting_rank and board.piece_at(two_steps) is None:
            targets.append(two_steps)

    for df in (-1, 1):
        target = position.offset(df, direction)
        if not target.is_within_bounds():
            continue
        piece_found = board.piece_at(target)
        if piece_found is not None and piece_found.color != player_color:
            targets.append(target)
    return targets


def candidate_knight_moves(position: Position, board: Board) -> list[Position]:
    """Knights always move such that |delta_rank| + |delta_file| = 3"""
    return single_step_move(position, board, KNIGHT_DELTAS)


def candidate_bishop_moves(position: Position, board: Board) -> list[Position]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(position, board, DIAGONALS)


def candidate_rook_moves(position: Position, board: Board) -> list[Position]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(position, board, STRAIGHTS)


def candidate_queen_moves(position: Position, board: Board) -> list[Position]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_rook_moves(position, board) + candidate_bishop_moves(
        position, board
    )


def candidate_king_moves(position: Position, board: Board) -> list[Position]:
    """The king can move by a single square at the time."""
    return single_step_move(position, board, KING_DELTAS)


def _color_at(position: Position, board: Board) -> Color:
    piece = board.piece_at(position)
    # for the type checker: movement rules are only ever asked about occupied squares
    assert piece is not None
    return piece.color


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Position, Board], list[Position]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}
