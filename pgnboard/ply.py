"""A single half-move in PGN notation."""

from __future__ import annotations

import copy as _copy
import re
from typing import Any, List, Optional, Tuple

from pgnboard.square import Piece, Square

_FILES = "abcdefgh"
_RANKS = "12345678"
_PIECE_BY_LETTER = {
    "R": Piece.ROOK,
    "K": Piece.KING,
    "Q": Piece.QUEEN,
    "B": Piece.BISHOP,
    "N": Piece.KNIGHT,
}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Ply:
    """One half-move, kept as its PGN text plus optional annotations.

    The destination square is read from the text. The origin square is
    only as complete as the text makes it, unless it is filled in with
    :meth:`set_from_square`. A ply may carry one comment and any number
    of variations; neither the origin square nor the variations take
    part in equality.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._from_col = ""
        self._from_row = ""
        self._comment: Optional[Any] = None
        self._variations: List[Any] = []
        self.piece: Piece = self._from_piece() if text else Piece.NULL

    # -- basic protocol ---------------------------------------------------

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Ply({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ply):
            return NotImplemented
        return self._text == other._text and self._comment == other._comment

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "Ply":
        """Return an independent copy, annotations included."""
        result = Ply.__new__(Ply)
        result._text = self._text
        result._from_col = self._from_col
        result._from_row = self._from_row
        result.piece = self.piece
        result._comment = _copy.deepcopy(self._comment)
        result._variations = [_copy.deepcopy(v) for v in self._variations]
        return result

    @property
    def comment(self) -> Optional[Any]:
        """The bound comment, or None."""
        return self._comment

    @property
    def variations(self) -> Tuple[Any, ...]:
        """The bound variations, in the order they were bound."""
        return tuple(self._variations)

    # -- parsing the text -------------------------------------------------

    def _coords(self) -> Tuple[str, str, str]:
        """Return (disambiguation, to-column, to-row) read from the text."""
        found = [c for c in self._text if c in _FILES or c in _RANKS]
        extra = found[0] if found else ""
        col = found[1] if len(found) > 1 else ""
        row = found[-1] if len(found) > 2 else ""
        if not row:
            extra, col, row = "", extra, col
        return extra, col, row

    def _squares(self, complete_from: bool) -> Tuple[str, str]:
        extra, col, row = self._coords()
        if complete_from and self._from_col and self._from_row:
            origin = self._from_col + self._from_row
        else:
            origin = extra
        return origin, col + row

    def _from_piece(self) -> Piece:
        if self.is_long_castle() or self.is_short_castle():
            return Piece.KING
        return _PIECE_BY_LETTER.get(self._text[:1], Piece.PAWN)

    def _to_piece(self) -> Piece:
        if self.is_promotion():
            pos = self._text.find("=")
            return Piece(self._text[pos + 1:pos + 2])
        return self._from_piece()

    # -- queries ------------------------------------------------------------

    def is_long_castle(self) -> bool:
        """True for O-O-O."""
        return "O-O-O" in self._text

    def is_short_castle(self) -> bool:
        """True for O-O."""
        return "O-O" in self._text and not self.is_long_castle()

    def is_capture(self) -> bool:
        """True when the move takes a piece."""
        return "x" in self._text

    def is_check(self) -> bool:
        """True when the move gives check."""
        return "+" in self._text

    def is_checkmate(self) -> bool:
        """True when the move gives mate."""
        return "#" in self._text

    def is_promotion(self) -> bool:
        """True when a pawn promotes."""
        return "=" in self._text

    def promoted(self) -> Piece:
        """The piece a pawn promotes to, or the null piece."""
        if self.is_promotion():
            return self.to_square().piece
        return Piece.NULL

    def valid(self) -> bool:
        """True for castling or a move with a full destination square."""
        return self.is_short_castle() or self.is_long_castle() or self.to_square().valid()

    def from_square(self) -> Square:
        """The origin square, as much of it as is known."""
        origin, _ = self._squares(True)
        piece = self._from_piece()
        if not origin:
            return Square("", "", piece)
        if len(origin) == 1 and origin in _RANKS:
            return Square("", origin, piece)
        if len(origin) == 1 and origin in _FILES:
            return Square(origin, "", piece)
        return Square(origin[0], origin[1:2], piece)

    def to_square(self) -> Square:
        """The destination square; null for castling."""
        _, target = self._squares(True)
        return Square(target[:1], target[1:2], self._to_piece())

    def glyph_value(self) -> int:
        """The numeric annotation glyph after '$', or -1 when there is none."""
        pos = self._text.find("$")
        if pos < 0:
            return -1
        match = _LEADING_INT.match(self._text[pos + 1:])
        return int(match.group(1)) if match else 0

    # -- changes ------------------------------------------------------------

    def set_glyph_value(self, value: int) -> None:
        """Replace any annotation glyph with value."""
        pos = self._text.find("$")
        if pos >= 0:
            self._text = self._text[:pos]
        self._text = f"{self._text}${value}"

    def set_from_square(self, square: Square) -> None:
        """Record the full origin square of the move."""
        self._from_col = square.col
        self._from_row = square.row

    def set_to_square(self, square: Square) -> None:
        """Rewrite the destination square in the move text."""
        pos = max(self._text.rfind(c) for c in _FILES)
        if pos < 0 or pos + 1 >= len(self._text):
            raise ValueError(f"ply {self._text!r} has no destination square")
        self._text = self._text[:pos] + square.col + square.row + self._text[pos + 2:]

    def bind_comment(self, comment: Any) -> None:
        """Attach comment, replacing any earlier one."""
        self._comment = comment

    def unbind_comment(self) -> None:
        """Drop the comment."""
        self._comment = None

    def bind_variation(self, variation: Any) -> None:
        """Attach one more variation."""
        self._variations.append(variation)

    def unbind_variations(self) -> None:
        """Drop every variation."""
        self._variations.clear()

    # -- output -------------------------------------------------------------

    def notation(self) -> str:
        """Write the move in PGN, with glyph, comment and variations."""
        if not self.valid():
            return ""
        suffix = "#" if self.is_checkmate() else "+" if self.is_check() else ""
        if self.is_long_castle():
            parts = ["O-O-O", suffix]
        elif self.is_short_castle():
            parts = ["O-O", suffix]
        else:
            origin, _ = self._squares(False)
            parts = [str(self.piece), origin]
            if self.is_capture():
                parts.append("x")
            parts.append(str(self.to_square()))
            if self.is_promotion():
                parts.append(f"={self.promoted()}")
            parts.append(suffix)
        glyph = self.glyph_value()
        if glyph >= 0:
            parts.append(f"${glyph}")
        if self._comment is not None:
            parts.append(str(self._comment))
        parts.extend(f"({variation}) " for variation in self._variations)
        return "".join(parts)