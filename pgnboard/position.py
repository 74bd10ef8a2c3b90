"""A chess position that follows the moves of a game."""

from __future__ import annotations

from typing import Iterator, Optional

from pgnboard.board import Board, board_from_fen, board_to_fen
from pgnboard.ply import Ply
from pgnboard.square import Color, Piece, Square

_FILES = "abcdefgh"

_BACK_RANK = (
    Piece.ROOK,
    Piece.KNIGHT,
    Piece.BISHOP,
    Piece.QUEEN,
    Piece.KING,
    Piece.BISHOP,
    Piece.KNIGHT,
    Piece.ROOK,
)

_PAWNS = (Piece.PAWN, Piece.WHITE_PAWN, Piece.BLACK_PAWN)


def _shift_row(row: str, step: int) -> str:
    return chr(ord(row) + step)


class Position:
    """A chess position: the pieces on the board plus the state of play.

    Built from a FEN string, or at the initial position when none is
    given. Only partial FEN support: the en passant square and halfmove
    clock are kept but not relied upon. Equality looks at the side to
    move and the squares only; the counters are left out.
    """

    def __init__(self, fen: Optional[str] = None) -> None:
        if fen is None:
            self._board = Board()
            self.reset()
        else:
            self._board = board_from_fen(fen)

    def copy(self) -> "Position":
        """Return a copy holding the squares, side to move and counters.

        Castling rights start out available again and the en passant
        target is cleared in the copy.
        """
        result = Position.__new__(Position)
        result._board = Board(
            squares=list(self._board.squares),
            side_to_move=self._board.side_to_move,
            move_number=self._board.move_number,
            halfmove_clock=self._board.halfmove_clock,
        )
        return result

    def _restart(self) -> None:
        self._board.side_to_move = Color.WHITE
        self._board.move_number = 1
        self._board.halfmove_clock = 0

    def clear(self) -> None:
        """Empty the board; white to move on move one."""
        self._restart()
        self._board.squares = [
            Square(col, str(row)) for row in range(1, 9) for col in _FILES
        ]

    def reset(self) -> None:
        """Set up the initial chess position."""
        self._restart()
        squares = []
        for row in range(1, 9):
            for col, kind in zip(_FILES, _BACK_RANK):
                if row in (1, 8):
                    color = Color.WHITE if row == 1 else Color.BLACK
                    piece = kind.with_color(color)
                elif row == 2:
                    piece = Piece.WHITE_PAWN
                elif row == 7:
                    piece = Piece.BLACK_PAWN
                else:
                    piece = Piece.NULL
                squares.append(Square(col, str(row), piece))
        self._board.squares = squares

    def fen(self) -> str:
        """The position as a FEN string."""
        return board_to_fen(self._board)

    # -- state ----------------------------------------------------------------

    @property
    def side_to_move(self) -> Color:
        return self._board.side_to_move

    @side_to_move.setter
    def side_to_move(self, color: Color) -> None:
        self._board.side_to_move = color

    @property
    def move_number(self) -> int:
        return self._board.move_number

    @move_number.setter
    def move_number(self, value: int) -> None:
        self._board.move_number = value

    @property
    def halfmove_clock(self) -> int:
        """Half-moves since the last capture or pawn move."""
        return self._board.halfmove_clock

    @halfmove_clock.setter
    def halfmove_clock(self, value: int) -> None:
        self._board.halfmove_clock = value

    @property
    def white_king_side_castling(self) -> bool:
        return self._board.white_king_castling

    @property
    def white_queen_side_castling(self) -> bool:
        return self._board.white_queen_castling

    @property
    def black_king_side_castling(self) -> bool:
        return self._board.black_king_castling

    @property
    def black_queen_side_castling(self) -> bool:
        return self._board.black_queen_castling

    @property
    def en_passant_target(self) -> Square:
        return self._board.en_passant_target

    def piece_at(self, col: str, row: str) -> Piece:
        """The piece on the square col+row."""
        return self._board.piece_at(col, row)

    def set_piece_at(self, piece: Piece, col: str, row: str) -> None:
        """Put piece on the square col+row."""
        self._board.set_piece_at(piece, col, row)

    # -- playing moves ----------------------------------------------------------

    def _castle(self, king_col: str, rook_from: str, rook_to: str) -> None:
        white = self._board.side_to_move is Color.WHITE
        rank = "1" if white else "8"
        king = Piece.WHITE_KING if white else Piece.BLACK_KING
        rook = Piece.WHITE_ROOK if white else Piece.BLACK_ROOK
        self.set_piece_at(Piece.NULL, "e", rank)
        self.set_piece_at(Piece.NULL, rook_from, rank)
        self.set_piece_at(king, king_col, rank)
        self.set_piece_at(rook, rook_to, rank)

    def _normal_move(self, ply: Ply) -> None:
        board = self._board
        board.fill_from_square(ply)
        start = ply.from_square()
        end = ply.to_square()
        side = board.side_to_move
        if ply.is_promotion():
            piece = Piece(ply.promoted().letter, side)
        else:
            if board.is_en_passant(ply):
                step = -1 if side is Color.WHITE else 1
                self.set_piece_at(Piece.NULL, end.col, _shift_row(end.row, step))
            piece = Piece(ply.piece.letter, side)
        self.set_piece_at(Piece.NULL, start.col, start.row)
        self.set_piece_at(piece, end.col, end.row)
        ply.piece = piece

    def _update_castling_rights(self) -> None:
        board = self._board
        if self.piece_at("e", "1") != Piece.WHITE_KING:
            board.white_king_castling = False
            board.white_queen_castling = False
        if self.piece_at("e", "8") != Piece.BLACK_KING:
            board.black_king_castling = False
            board.black_queen_castling = False
        if self.piece_at("a", "1") != Piece.WHITE_ROOK:
            board.white_queen_castling = False
        if self.piece_at("h", "1") != Piece.WHITE_ROOK:
            board.white_king_castling = False
        if self.piece_at("a", "8") != Piece.BLACK_ROOK:
            board.black_queen_castling = False
        if self.piece_at("h", "8") != Piece.BLACK_ROOK:
            board.black_king_castling = False

    def update(self, ply: Ply) -> None:
        """Play ply on the position.

        As a side effect the ply gets its full origin square and its
        colored piece. Raises ValueError when no piece can play it.
        """
        if ply.is_short_castle():
            self._castle("g", "h", "f")
        elif ply.is_long_castle():
            self._castle("c", "a", "d")
        else:
            self._normal_move(ply)

        self._update_castling_rights()
        board = self._board
        if board.side_to_move is Color.BLACK:
            board.side_to_move = Color.WHITE
            board.move_number += 1
        else:
            board.side_to_move = Color.BLACK

        if ply.is_capture() or ply.piece in _PAWNS:
            board.halfmove_clock = 0
        else:
            board.halfmove_clock += 1

        for mover, enemy, step in (
            (Piece.BLACK_PAWN, Piece.WHITE_PAWN, -1),
            (Piece.WHITE_PAWN, Piece.BLACK_PAWN, 1),
        ):
            if (
                ply.piece == mover
                and board.is_double_pawn_move(ply)
                and board.has_piece_on_side(ply.to_square(), enemy)
            ):
                start = ply.from_square()
                board.en_passant_target = Square(start.col, _shift_row(start.row, step))

    # -- protocol ---------------------------------------------------------------

    def __iter__(self) -> Iterator[Square]:
        return iter(self._board.squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._board.side_to_move == other._board.side_to_move
            and self._board.squares == other._board.squares
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Position({self.fen()!r})"