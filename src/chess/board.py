"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.moves import MOVEMENT_RULES, CandidateMovesFn
from src.chess.pieces import BACK_RANK_ORDER, Color, Piece, PieceType
from src.chess.position import BOARD_SIZE, Position, all_positions
from src.core.exceptions import InvalidBoardError

Grid = list[list[Optional[Piece]]]

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_BOARD_FEN = "/".join(["8"] * BOARD_SIZE)
EMPTY_SQUARE_COUNTS = "12345678"


def _empty_grid() -> Grid:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """
    8x8 grid of (optional) pieces.
    grid[rank_index][file_index], where rank index 0 is the 8th rank and file index 0 is the a-file.
    """

    grid: Grid = field(default_factory=_empty_grid)

    @classmethod
    def starting_position(cls) -> Self:
        """Standard layout: White on ranks 1 and 2, Black on ranks 8 and 7"""
        board = cls()
        for file_index, piece_type in enumerate(BACK_RANK_ORDER):
            board.grid[0][file_index] = Piece(piece_type, Color.BLACK)
            board.grid[1][file_index] = Piece(PieceType.PAWN, Color.BLACK)
            board.grid[BOARD_SIZE - 2][file_index] = Piece(PieceType.PAWN, Color.WHITE)
            board.grid[BOARD_SIZE - 1][file_index] = Piece(piece_type, Color.WHITE)
        return board

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * ranks are listed from the 8th down to the 1st, separated by slashes
        * each rank reads from the a-file to the h-file
        * a letter is a piece (capital letters for the white pieces), a digit is that many empty squares
        """
        fen_by_ranks = fen_str.strip().split("/")
        if len(fen_by_ranks) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Expected {BOARD_SIZE} ranks in board layout, got {len(fen_by_ranks)}: {fen_str!r}"
            )

        board = cls()
        for rank_index, fen_one_rank in enumerate(fen_by_ranks):
            file_index = 0
            for character in fen_one_rank:
                if character in EMPTY_SQUARE_COUNTS:
                    file_index += int(character)
                    continue
                if file_index >= BOARD_SIZE or character.lower() not in "pnbrqk":
                    raise InvalidBoardError(
                        f"Cannot read rank {BOARD_SIZE - rank_index} of board layout: {fen_one_rank!r}"
                    )
                board.grid[rank_index][file_index] = Piece.from_fen(character)
                file_index += 1

            if file_index != BOARD_SIZE:
                raise InvalidBoardError(
                    f"Rank {BOARD_SIZE - rank_index} of board layout does not cover {BOARD_SIZE} squares: {fen_one_rank!r}"
                )
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._rank_to_fen(row) for row in self.grid)

    def _rank_to_fen(self, row: list[Optional[Piece]]) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def copy(self) -> Self:
        """Independent grid. Pieces are immutable so they can be shared."""
        return type(self)([row.copy() for row in self.grid])

    # --- SQUARE ACCESS ---
    def piece_at(self, position: Position) -> Optional[Piece]:
        rank_index, file_index = position.to_indices()
        return self.grid[rank_index][file_index]

    def place_piece(self, piece: Optional[Piece], position: Position) -> None:
        rank_index, file_index = position.to_indices()
        self.grid[rank_index][file_index] = piece

    def remove_piece(self, position: Position) -> None:
        self.place_piece(None, position)

    def move_piece(self, from_position: Position, to_position: Position) -> Optional[Piece]:
        """Update the position on the board. Returns whatever piece got captured on the target square."""
        piece_that_moved = self.piece_at(from_position)
        captured_piece = self.piece_at(to_position)
        self.remove_piece(from_position)
        self.place_piece(
            piece_that_moved.moved() if piece_that_moved else None, to_position
        )
        return captured_piece

    # --- LOCATING PIECES ---
    def locate_color(self, color: Color) -> list[Position]:
        return [
            position
            for position in all_positions()
            if (piece := self.piece_at(position)) is not None and piece.color == color
        ]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Position]:
        return [
            position
            for position in self.locate_color(color)
            if self.piece_at(position).type == piece_type
        ]

    def locate_king(self, color: Color) -> Optional[Position]:
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    def count_pieces(self, color: Color) -> dict[PieceType, int]:
        """Tally how many pieces of each type a player still has on the board"""
        counts = {piece_type: 0 for piece_type in PieceType}
        for position in self.locate_color(color):
            counts[self.piece_at(position).type] += 1
        return counts

    # --- MOVES AND ATTACKS ---
    def candidate_moves(self, position: Position) -> list[Position]:
        """
        Pseudo-legal destinations of the piece standing on the given square.
        These still need to be tested for legality (making sure it does not put yourself in check.)
        """
        piece = self.piece_at(position)
        if piece is None:
            return []
        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece.type]
        return movement_rule(position, self)

    def is_under_attack(self, position: Position, by_color: Color) -> bool:
        """Can any piece of the given color move onto this square?"""
        return any(
            position in self.candidate_moves(attacker_square)
            for attacker_square in self.locate_color(by_color)
        )

    def is_check(self, color: Color) -> bool:
        """Is the king of this color attacked? A board without that king is never in check."""
        king_square = self.locate_king(color)
        if king_square is None:
            return False
        return self.is_under_attack(king_square, color.opponent)
