import pytest

from pgnboard.board import InvalidFenError
from pgnboard.ply import Ply
from pgnboard.position import Position
from pgnboard.square import Color, Piece, Square

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def test_default_is_start_position():
    assert Position().fen() == START_FEN


def test_fen_round_trip():
    pos = Position(START_FEN)
    assert pos.fen() == START_FEN
    assert pos == Position()


def test_iteration_covers_board_from_a1():
    squares = list(Position())
    assert len(squares) == 64
    assert squares[0] == Square("a", "1", Piece.WHITE_ROOK)
    assert squares[-1] == Square("h", "8", Piece.BLACK_ROOK)


def test_clear_empties_board():
    pos = Position()
    pos.clear()
    assert all(s.piece.is_null() for s in pos)
    assert len(list(pos)) == 64
    assert pos.move_number == 1
    assert pos.side_to_move is Color.WHITE


def test_pawn_move():
    pos = Position()
    ply = Ply("e4")
    pos.update(ply)
    assert pos.piece_at("e", "4") == Piece.WHITE_PAWN
    assert pos.piece_at("e", "2").is_null()
    assert pos.side_to_move is Color.BLACK
    assert pos.move_number == 1
    assert pos.halfmove_clock == 0
    assert ply.from_square().col == "e"
    assert ply.from_square().row == "2"
    assert ply.piece == Piece.WHITE_PAWN


def test_knight_move_and_counters():
    pos = Position()
    for text in ("e4", "e5"):
        pos.update(Ply(text))
    ply = Ply("Nf3")
    pos.update(ply)
    assert pos.piece_at("f", "3") == Piece.WHITE_KNIGHT
    assert pos.piece_at("g", "1").is_null()
    assert pos.move_number == 2
    assert pos.halfmove_clock == 1
    assert pos.side_to_move is Color.BLACK
    assert (ply.from_square().col, ply.from_square().row) == ("g", "1")


def test_impossible_move_raises():
    with pytest.raises(ValueError):
        Position().update(Ply("Nd4"))


def test_pinned_knight_cannot_move():
    pos = Position("4k3/8/8/8/8/8/8/4KN1r w - - 0 1")
    with pytest.raises(ValueError):
        pos.update(Ply("Ng3"))


def test_white_short_castle():
    pos = Position("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    pos.update(Ply("O-O"))
    assert pos.piece_at("g", "1") == Piece.WHITE_KING
    assert pos.piece_at("f", "1") == Piece.WHITE_ROOK
    assert pos.piece_at("e", "1").is_null()
    assert pos.piece_at("h", "1").is_null()
    assert not pos.white_king_side_castling
    assert not pos.white_queen_side_castling
    assert pos.black_king_side_castling
    assert pos.black_queen_side_castling


def test_black_long_castle():
    pos = Position("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
    pos.update(Ply("O-O-O"))
    assert pos.piece_at("c", "8") == Piece.BLACK_KING
    assert pos.piece_at("d", "8") == Piece.BLACK_ROOK
    assert pos.piece_at("a", "8").is_null()
    assert not pos.black_queen_side_castling
    assert pos.white_king_side_castling
    assert pos.move_number == 2
    assert pos.side_to_move is Color.WHITE


def test_en_passant_capture():
    pos = Position("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
    assert pos.en_passant_target == Square("d", "6")
    pos.update(Ply("exd6"))
    assert pos.piece_at("d", "6") == Piece.WHITE_PAWN
    assert pos.piece_at("d", "5").is_null()
    assert pos.piece_at("e", "5").is_null()


def test_double_pawn_move_sets_en_passant_target():
    pos = Position("4k3/8/8/8/3p4/8/4P3/4K3 w - - 0 1")
    pos.update(Ply("e4"))
    assert pos.en_passant_target == Square("e", "3")


def test_promotion():
    pos = Position("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
    pos.update(Ply("a8=Q"))
    assert pos.piece_at("a", "8") == Piece.WHITE_QUEEN
    assert pos.piece_at("a", "7").is_null()


def test_equality_ignores_counters():
    a = Position()
    b = Position()
    b.move_number = 30
    b.halfmove_clock = 7
    assert a == b
    b.side_to_move = Color.BLACK
    assert a != b


def test_copy_is_independent():
    pos = Position()
    twin = pos.copy()
    assert twin == pos
    twin.update(Ply("d4"))
    assert twin != pos
    assert pos.piece_at("d", "2") == Piece.WHITE_PAWN


def test_set_piece_at():
    pos = Position()
    pos.clear()
    pos.set_piece_at(Piece.BLACK_QUEEN, "d", "5")
    assert pos.piece_at("d", "5") == Piece.BLACK_QUEEN


def test_invalid_fen_raises():
    with pytest.raises(InvalidFenError):
        Position("rnbqkXnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")


def test_fen_counters_read():
    pos = Position("4k3/8/8/8/8/8/8/4K3 b - - 12 40")
    assert pos.halfmove_clock == 12
    assert pos.move_number == 40
    assert pos.side_to_move is Color.BLACK