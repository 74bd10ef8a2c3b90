"""Colors, pieces and board squares."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Color(Enum):
    """The side a piece belongs to."""

    WHITE = "white"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Piece:
    """A chess piece: a letter (K, Q, R, B, N, P) and an optional color.

    The null piece has an empty letter. A piece with no color is what a
    move's text tells: the letter alone, without the side that played it.
    """

    letter: str = ""
    color: Optional[Color] = None

    def __str__(self) -> str:
        # Pawns have no letter in move notation.
        return "" if self.letter == "P" else self.letter

    def is_null(self) -> bool:
        """True for the empty piece."""
        return self.letter == ""

    def with_color(self, color: Optional[Color]) -> "Piece":
        """Return the same kind of piece belonging to color."""
        return Piece(self.letter, color)


Piece.NULL = Piece()
Piece.PAWN = Piece("P")
Piece.KNIGHT = Piece("N")
Piece.BISHOP = Piece("B")
Piece.ROOK = Piece("R")
Piece.QUEEN = Piece("Q")
Piece.KING = Piece("K")
Piece.WHITE_PAWN = Piece("P", Color.WHITE)
Piece.WHITE_KNIGHT = Piece("N", Color.WHITE)
Piece.WHITE_BISHOP = Piece("B", Color.WHITE)
Piece.WHITE_ROOK = Piece("R", Color.WHITE)
Piece.WHITE_QUEEN = Piece("Q", Color.WHITE)
Piece.WHITE_KING = Piece("K", Color.WHITE)
Piece.BLACK_PAWN = Piece("P", Color.BLACK)
Piece.BLACK_KNIGHT = Piece("N", Color.BLACK)
Piece.BLACK_BISHOP = Piece("B", Color.BLACK)
Piece.BLACK_ROOK = Piece("R", Color.BLACK)
Piece.BLACK_QUEEN = Piece("Q", Color.BLACK)
Piece.BLACK_KING = Piece("K", Color.BLACK)


@dataclass(frozen=True)
class Square:
    """A board square such as e4, possibly holding a piece.

    Either coordinate may be empty: a square with only a column or only a
    row is a partial square, one with neither is the null square.
    """

    col: str = ""
    row: str = ""
    piece: Piece = field(default=Piece.NULL)

    @classmethod
    def parse(cls, text: str, piece: Piece = Piece.NULL) -> "Square":
        """Build a square from text such as 'e4'."""
        if len(text) < 2:
            raise ValueError(f"square text too short: {text!r}")
        return cls(text[0], text[1], piece)

    def valid(self) -> bool:
        """True when both column and row are known."""
        return self.col != "" and self.row != ""

    def null(self) -> bool:
        """True when neither column nor row is known."""
        return self.col == "" and self.row == ""

    def __str__(self) -> str:
        return f"{self.col}{self.row}"