"""
A position (square) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Standard chess board is 8x8. Also bounds how far a sliding piece can travel.
BOARD_SIZE = 8
FILES = "abcdefgh"


@dataclass(frozen=True)
class Position:
    """
    A square named by its file letter ('a' - 'h') and rank number (1 - 8).

    The board itself stores pieces in a grid of rows and columns:
    * row (rank index) 0 is the 8th rank, row 7 is the 1st rank
    * column (file index) 0 is the a-file, column 7 is the h-file
    """

    file: str
    rank: int

    @classmethod
    def from_algebraic(cls, name: str) -> Position:
        """Algebraic notation: 'a1' - 'h8'"""
        return cls(name[0], int(name[1:]))

    def to_algebraic(self) -> str:
        return f"{self.file}{self.rank}"

    @classmethod
    def from_indices(cls, rank_index: int, file_index: int) -> Position:
        file = chr(ord("a") + file_index)
        rank = BOARD_SIZE - rank_index
        return cls(file, rank)

    def to_indices(self) -> tuple[int, int]:
        """(rank index, file index) of the grid cell holding this square"""
        rank_index = BOARD_SIZE - self.rank
        file_index = ord(self.file) - ord("a")
        return rank_index, file_index

    def offset(self, d_file: int, d_rank: int) -> Position:
        """The square reached by stepping along a vector. Can fall off the board: check with `is_within_bounds()`"""
        return Position(chr(ord(self.file) + d_file), self.rank + d_rank)

    def is_within_bounds(self) -> bool:
        if len(self.file) != 1:
            return False
        rank_index, file_index = self.to_indices()
        return (0 <= file_index < BOARD_SIZE) and (0 <= rank_index < BOARD_SIZE)

    def __str__(self) -> str:
        return self.to_algebraic()


def all_positions() -> list[Position]:
    """Every square on the board, from a8 through h1 (grid order)"""
    return [
        Position.from_indices(rank_index, file_index)
        for rank_index in range(BOARD_SIZE)
        for file_index in range(BOARD_SIZE)
    ]
