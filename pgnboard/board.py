"""Board state, piece movement rules and FEN conversion."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pgnboard.ply import Ply
from pgnboard.square import Color, Piece, Square

_FILES = "abcdefgh"
_RANKS = "12345678"
_LETTERS = frozenset("PNBRQK")


class InvalidFenError(ValueError):
    """Raised when a FEN string cannot be read."""


def _index(col: str, row: str) -> Tuple[int, int]:
    """Return zero-based (column, row) for a square's coordinates."""
    if len(col) != 1 or col not in _FILES or len(row) != 1 or row not in _RANKS:
        raise ValueError(f"not a board square: {col!r}{row!r}")
    return _FILES.index(col), _RANKS.index(row)


def _empty_squares() -> List[Square]:
    return [Square(col, row) for row in _RANKS for col in _FILES]


@dataclass
class Board:
    """The full state of a chess position: pieces, side to move and counters."""

    squares: List[Square] = field(default_factory=_empty_squares)
    side_to_move: Color = Color.WHITE
    move_number: int = 0
    halfmove_clock: int = 0
    white_king_castling: bool = True
    white_queen_castling: bool = True
    black_king_castling: bool = True
    black_queen_castling: bool = True
    en_passant_target: Square = field(default_factory=Square)

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        return dataclasses.replace(self, squares=list(self.squares))

    def _at(self, col: int, row: int) -> Piece:
        return self.squares[row * 8 + col].piece

    def piece_at(self, col: str, row: str) -> Piece:
        """The piece standing on the square col+row."""
        c, r = _index(col, row)
        return self._at(c, r)

    def set_piece_at(self, piece: Piece, col: str, row: str) -> None:
        """Put piece on the square col+row, replacing what was there."""
        c, r = _index(col, row)
        self.squares[r * 8 + c] = Square(col, row, piece)

    def fill_from_square(self, ply: Ply) -> Square:
        """Find the square the ply's piece moves from and record it on the ply.

        The ply keeps only its text, origin and piece: any comment or
        variation bound to it is dropped. Returns the origin square.
        """
        piece = ply.piece
        if piece.letter not in _LETTERS:
            raise ValueError(f"Invalid piece letter .{piece.letter}. in ply {ply.notation()}")
        wanted = piece.with_color(self.side_to_move)
        origin = ply.from_square()
        target = ply.to_square()
        capture = ply.is_capture()

        def matches(candidate: Square) -> bool:
            if candidate.piece != wanted:
                return False
            if not origin.null() and not (
                candidate.col == origin.col or candidate.row == origin.row
            ):
                return False
            return legal_movement(self, piece.letter, capture, candidate, target)

        found = next((s for s in self.squares if matches(s)), None)
        if found is None:
            raise ValueError(f"No piece found on the board for the ply {ply.notation()}")
        start = Square(found.col, found.row, piece)
        ply.unbind_comment()
        ply.unbind_variations()
        ply.set_from_square(start)
        ply.piece = piece
        return start

    def is_en_passant(self, ply: Ply) -> bool:
        """True for a pawn capture towards an empty square."""
        if not ply.is_capture():
            return False
        if ply.piece not in (Piece.PAWN, Piece.WHITE_PAWN, Piece.BLACK_PAWN):
            return False
        target = ply.to_square()
        return self.piece_at(target.col, target.row).is_null()

    def is_double_pawn_move(self, ply: Ply) -> bool:
        """True for a colored pawn moving two ranks."""
        if ply.piece not in (Piece.WHITE_PAWN, Piece.BLACK_PAWN):
            return False
        to_row = ply.to_square().row
        from_row = ply.from_square().row
        if not to_row or not from_row:
            return False
        return abs(ord(to_row) - ord(from_row)) == 2

    def has_piece_on_side(self, square: Square, piece: Piece) -> bool:
        """True when piece stands right beside square on the same rank."""
        c, r = _index(square.col, square.row)
        return any(0 <= n <= 7 and self._at(n, r) == piece for n in (c + 1, c - 1))


def is_blocked_line(board: Board, start: Square, end: Square) -> bool:
    """True when a piece stands between start and end on a line or diagonal."""
    fc, fr = _index(start.col, start.row)
    tc, tr = _index(end.col, end.row)
    if fc == tc:
        return any(not board._at(fc, r).is_null() for r in range(min(fr, tr) + 1, max(fr, tr)))
    if fr == tr:
        return any(not board._at(c, fr).is_null() for c in range(min(fc, tc) + 1, max(fc, tc)))
    if fc - fr == tc - tr:
        row = min(fr, tr) + 1
        for col in range(min(fc, tc) + 1, max(fc, tc)):
            if not board._at(col, row).is_null():
                return True
            row += 1
        return False
    if fc + fr == tc + tr:
        row = max(fr, tr) - 1
        for col in range(min(fc, tc) + 1, max(fc, tc)):
            if not board._at(col, row).is_null():
                return True
            row -= 1
        return False
    return False


def _ray_hits(board: Board, col: int, row: int, dc: int, dr: int,
              attackers: Tuple[Piece, ...], last_row: int = 7) -> bool:
    col += dc
    row += dr
    while 0 <= col <= 7 and 0 <= row <= last_row:
        piece = board._at(col, row)
        if piece in attackers:
            return True
        if not piece.is_null():
            return False
        col += dc
        row += dr
    return False


def is_piece_pinned(board: Board, start: Square, end: Square) -> bool:
    """True when moving start's piece to end leaves its king exposed on a line.

    Knight checks are not looked at, and king moves are never pinned.
    """
    if start.piece in (Piece.WHITE_KING, Piece.BLACK_KING):
        return False
    trial = board.copy()
    trial.set_piece_at(start.piece, end.col, end.row)
    trial.set_piece_at(Piece.NULL, start.col, start.row)

    white = trial.side_to_move is Color.WHITE
    my_king = Piece.WHITE_KING if white else Piece.BLACK_KING
    king: Optional[Square] = next((s for s in trial.squares if s.piece == my_king), None)
    if king is None:
        return False
    kc, kr = _index(king.col, king.row)

    queen = Piece.BLACK_QUEEN if white else Piece.WHITE_QUEEN
    straight = (Piece.BLACK_ROOK if white else Piece.WHITE_ROOK, queen)
    diagonal = (Piece.BLACK_BISHOP if white else Piece.WHITE_BISHOP, queen)

    # The northward file scan stops before the last rank.
    return (
        _ray_hits(trial, kc, kr, 0, 1, straight, last_row=6)
        or _ray_hits(trial, kc, kr, 0, -1, straight)
        or _ray_hits(trial, kc, kr, 1, 0, straight)
        or _ray_hits(trial, kc, kr, -1, 0, straight)
        or _ray_hits(trial, kc, kr, 1, 1, diagonal)
        or _ray_hits(trial, kc, kr, -1, 1, diagonal)
        or _ray_hits(trial, kc, kr, 1, -1, diagonal)
        or _ray_hits(trial, kc, kr, -1, -1, diagonal)
    )


def _rook_move(board: Board, start: Square, end: Square, dc: int, dr: int) -> bool:
    return (
        (dc == 0 or dr == 0)
        and not is_blocked_line(board, start, end)
        and not is_piece_pinned(board, start, end)
    )


def _bishop_move(board: Board, start: Square, end: Square, dc: int, dr: int) -> bool:
    if (
        dc == dr
        and not is_blocked_line(board, start, end)
        and not is_piece_pinned(board, start, end)
    ):
        return True
    return dc == -dr and not is_blocked_line(board, start, end)


def legal_movement(board: Board, letter: str, capture: bool, start: Square, end: Square) -> bool:
    """True when a piece of kind letter may go from start to end on board."""
    fc, fr = _index(start.col, start.row)
    tc, tr = _index(end.col, end.row)
    dc, dr = tc - fc, tr - fr
    if letter == "K":
        return True
    if letter == "R":
        return _rook_move(board, start, end, dc, dr)
    if letter == "B":
        return _bishop_move(board, start, end, dc, dr)
    if letter == "Q":
        return _rook_move(board, start, end, dc, dr) or _bishop_move(board, start, end, dc, dr)
    if letter == "N":
        return (abs(dc), abs(dr)) in ((1, 2), (2, 1)) and not is_piece_pinned(board, start, end)
    if letter == "P":
        forward = 1 if board.side_to_move is Color.WHITE else -1
        if capture:
            return abs(dc) == 1 and dr == forward and not is_piece_pinned(board, start, end)
        if dc != 0:
            return False
        if dr == forward:
            return not is_piece_pinned(board, start, end)
        if dr == 2 * forward:
            return board._at(fc, fr + forward).is_null() and not is_piece_pinned(board, start, end)
        return False
    raise ValueError(f"Invalid piece letter {letter!r}")


_FEN_PIECES = {
    letter.upper() if color is Color.WHITE else letter.lower(): Piece(letter, color)
    for letter in "PNBRQK"
    for color in (Color.WHITE, Color.BLACK)
}


def _parse_int(text: str, fen: str) -> int:
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        raise InvalidFenError(f"invalid FEN string: {fen}") from None


def board_from_fen(text: str) -> Board:
    """Read a board from a FEN string."""
    fields = text.split()
    fields += [""] * (6 - len(fields))
    placement, color, castling, en_passant, halfmove, fullmove = fields[:6]

    if en_passant in ("", "-"):
        target = Square()
    elif len(en_passant) >= 2:
        target = Square(en_passant[0], en_passant[1])
    else:
        raise InvalidFenError(f"invalid FEN string: {text}")

    board = Board(
        side_to_move=Color.BLACK if color == "b" else Color.WHITE,
        move_number=_parse_int(fullmove, text),
        halfmove_clock=_parse_int(halfmove, text),
        white_king_castling="K" in castling,
        white_queen_castling="Q" in castling,
        black_king_castling="k" in castling,
        black_queen_castling="q" in castling,
        en_passant_target=target,
    )

    col, row = 0, 7

    def place(piece: Piece) -> None:
        nonlocal col, row
        if row < 0:
            raise InvalidFenError(f"invalid FEN string: {text}")
        board.set_piece_at(piece, _FILES[col], _RANKS[row])
        col += 1
        if col == 8:
            col = 0
            row -= 1

    for char in placement:
        if char in _FEN_PIECES:
            place(_FEN_PIECES[char])
        elif char in _RANKS:
            for _ in range(int(char)):
                place(Piece.NULL)
        elif char != "/":
            raise InvalidFenError(f"invalid FEN string: {text}")
    return board


def _fen_letter(piece: Piece) -> str:
    if piece.letter in _LETTERS and piece.color is Color.WHITE:
        return piece.letter
    if piece.letter in _LETTERS and piece.color is Color.BLACK:
        return piece.letter.lower()
    raise ValueError(f"invalid piece '{piece.letter}-{piece.color}' in position.")


def _castling(board: Board) -> str:
    rights = ""
    if board.squares[4].piece == Piece.WHITE_KING:
        if board.squares[7].piece == Piece.WHITE_ROOK:
            rights += "K"
        if board.squares[0].piece == Piece.WHITE_ROOK:
            rights += "Q"
    if board.squares[60].piece == Piece.BLACK_KING:
        if board.squares[63].piece == Piece.BLACK_ROOK:
            rights += "k"
        if board.squares[56].piece == Piece.BLACK_ROOK:
            rights += "q"
    return rights or "-"


def board_to_fen(board: Board) -> str:
    """Write board as a FEN string.

    Castling rights are derived from where kings and rooks stand, and the
    en passant field is always '-'.
    """
    ranks = []
    for row in range(7, -1, -1):
        out = []
        empty = 0
        for col in range(8):
            piece = board._at(col, row)
            if piece.is_null():
                empty += 1
                if col == 7:
                    out.append(str(empty))
                continue
            if empty:
                out.append(str(empty))
                empty = 0
            out.append(_fen_letter(piece))
        ranks.append("".join(out))
    color = "b" if board.side_to_move is Color.BLACK else "w"
    return (
        f"{'/'.join(ranks)} {color} {_castling(board)} - "
        f"{board.halfmove_clock} {board.move_number}"
    )