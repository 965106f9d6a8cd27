"""Unit tests for /src/chess/moves.py"""

import pytest

from src.chess.board import Board
from src.chess.moves import (
    MOVEMENT_RULES,
    Move,
    candidate_bishop_moves,
    candidate_king_moves,
    candidate_knight_moves,
    candidate_pawn_moves,
    candidate_queen_moves,
    candidate_rook_moves,
    raycasting_move,
    single_step_move,
)
from src.chess.pieces import Piece
from src.chess.position import BOARD_SIZE, Position
from src.core.shared_types import Color, PieceType


def board_with(pieces: dict[str, str]) -> Board:
    """Empty board with the pieces placed on it. ex. {'e2': 'P', 'd3': 'n'}"""
    board = Board()
    for square_name, fen_char in pieces.items():
        board.place_piece(Piece.from_fen(fen_char), Position.from_algebraic(square_name))
    return board


def names(positions: list[Position]) -> set[str]:
    """Move lists are unordered: compare them as sets of square names"""
    return {position.to_algebraic() for position in positions}


# -- MOVE RECORD --
def test_move_record_capture_flag() -> None:
    pawn = Piece(PieceType.PAWN, Color.WHITE)
    knight = Piece(PieceType.KNIGHT, Color.BLACK)
    quiet = Move(Position("e", 2), Position("e", 4), pawn)
    capture = Move(Position("e", 4), Position("d", 5), pawn, captured_piece=knight)
    assert not quiet.is_capture
    assert capture.is_capture


def test_every_piece_type_has_a_movement_rule() -> None:
    assert set(MOVEMENT_RULES.keys()) == set(PieceType)


# -- PAWNS --
def test_white_pawn_on_starting_rank() -> None:
    board = board_with({"e2": "P"})
    assert names(candidate_pawn_moves(Position("e", 2), board)) == {"e3", "e4"}


def test_black_pawn_on_starting_rank() -> None:
    """Black moves DOWN the board"""
    board = board_with({"d7": "p"})
    assert names(candidate_pawn_moves(Position("d", 7), board)) == {"d6", "d5"}


def test_pawn_off_starting_rank_moves_single_square() -> None:
    board = board_with({"e3": "P", "c5": "p"})
    assert names(candidate_pawn_moves(Position("e", 3), board)) == {"e4"}
    assert names(candidate_pawn_moves(Position("c", 5), board)) == {"c4"}


@pytest.mark.parametrize("blocker", ["N", "n"])
def test_pawn_blocked_directly_in_front(blocker: str) -> None:
    """Pawns cannot take straight ahead, and cannot jump over a blocking piece"""
    board = board_with({"e2": "P", "e3": blocker})
    assert candidate_pawn_moves(Position("e", 2), board) == []


def test_pawn_double_step_blocked_on_destination() -> None:
    board = board_with({"e2": "P", "e4": "p"})
    assert names(candidate_pawn_moves(Position("e", 2), board)) == {"e3"}


def test_pawn_takes_diagonally() -> None:
    board = board_with({"e4": "P", "d5": "p", "f5": "n", "e5": "p"})
    assert names(candidate_pawn_moves(Position("e", 4), board)) == {"d5", "f5"}


def test_pawn_does_not_take_own_piece_or_move_diagonally_to_empty_square() -> None:
    board = board_with({"e4": "P", "d5": "N"})
    assert names(candidate_pawn_moves(Position("e", 4), board)) == {"e5"}


def test_black_pawn_takes_down_the_board() -> None:
    board = board_with({"b6": "p", "a5": "P", "c7": "P"})
    assert names(candidate_pawn_moves(Position("b", 6), board)) == {"b5", "a5"}


def test_pawn_on_edge_file_only_takes_inwards() -> None:
    board = board_with({"a4": "P", "b5": "p"})
    assert names(candidate_pawn_moves(Position("a", 4), board)) == {"a5", "b5"}


def test_pawn_on_final_rank_has_no_moves() -> None:
    """No promotion: a pawn that reached the end of the board is stuck"""
    board = board_with({"c8": "P", "f1": "p"})
    assert candidate_pawn_moves(Position("c", 8), board) == []
    assert candidate_pawn_moves(Position("f", 1), board) == []


# -- KNIGHTS --
@pytest.mark.parametrize(
    "square_name, expected",
    [
        ("d4", {"b3", "b5", "c2", "c6", "e2", "e6", "f3", "f5"}),
        ("a1", {"b3", "c2"}),
        ("h8", {"g6", "f7"}),
        ("b1", {"a3", "c3", "d2"}),
    ],
)
def test_knight_moves_on_empty_board(square_name: str, expected: set[str]) -> None:
    board = board_with({square_name: "N"})
    assert names(candidate_knight_moves(Position.from_algebraic(square_name), board)) == expected


def test_knight_jumps_over_pieces_but_not_onto_own_pieces() -> None:
    board = board_with({"b1": "N", "a2": "P", "b2": "P", "c2": "P", "d2": "P", "a3": "P", "c3": "p"})
    assert names(candidate_knight_moves(Position("b", 1), board)) == {"c3"}


# -- SLIDERS --
def test_rook_on_empty_board() -> None:
    board = board_with({"d4": "R"})
    moves = candidate_rook_moves(Position("d", 4), board)
    assert len(moves) == 2 * (BOARD_SIZE - 1)
    assert all(move.file == "d" or move.rank == 4 for move in moves)


def test_rook_stops_at_own_piece_and_takes_opponent_piece() -> None:
    board = board_with({"a1": "R", "a3": "P", "c1": "n"})
    assert names(candidate_rook_moves(Position("a", 1), board)) == {"a2", "b1", "c1"}


def test_bishop_on_empty_board() -> None:
    board = board_with({"d4": "B"})
    assert len(candidate_bishop_moves(Position("d", 4), board)) == 13


def test_bishop_blocked() -> None:
    board = board_with({"c1": "B", "d2": "P", "a3": "p"})
    assert names(candidate_bishop_moves(Position("c", 1), board)) == {"b2", "a3"}


def test_queen_is_rook_plus_bishop() -> None:
    board = board_with({"d4": "Q", "d6": "p", "f6": "P", "b2": "n"})
    queen_square = Position("d", 4)
    expected = names(candidate_rook_moves(queen_square, board)) | names(
        candidate_bishop_moves(queen_square, board)
    )
    assert names(candidate_queen_moves(queen_square, board)) == expected
    assert "d6" in expected
    assert "d7" not in expected
    assert "f6" not in expected
    assert "b2" in expected
    assert "a1" not in expected


def test_queen_on_empty_board() -> None:
    board = board_with({"d4": "q"})
    assert len(candidate_queen_moves(Position("d", 4), board)) == 27


def test_raycasting_never_leaves_the_board() -> None:
    board = board_with({"a1": "R"})
    moves = raycasting_move(Position("a", 1), board, [(1, 1)])
    assert names(moves) == {"b2", "c3", "d4", "e5", "f6", "g7", "h8"}


# -- KINGS --
def test_king_in_the_middle() -> None:
    board = board_with({"e4": "K"})
    assert len(candidate_king_moves(Position("e", 4), board)) == 8


def test_king_in_the_corner() -> None:
    board = board_with({"h1": "k"})
    assert names(candidate_king_moves(Position("h", 1), board)) == {"g1", "g2", "h2"}


def test_king_does_not_take_own_pieces() -> None:
    board = board_with({"e1": "K", "d1": "Q", "f1": "B", "d2": "P", "e2": "P", "f2": "p"})
    assert names(candidate_king_moves(Position("e", 1), board)) == {"f2"}


def test_single_step_move_skips_off_board_targets() -> None:
    board = board_with({"a1": "N"})
    assert single_step_move(Position("a", 1), board, [(-1, 0), (0, -1), (1, 0)]) == [
        Position("b", 1)
    ]
