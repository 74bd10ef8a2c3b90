# pgnboard

A small library for the pieces of a chess game record: single moves in SAN
text, PGN header tags, FEN strings and a board position that follows a game
one half-move at a time.

## Modules

- `pgnboard.square`: `Color` (`WHITE`, `BLACK`), `Piece` and `Square`.
  `Piece` is a frozen dataclass of a letter (`K`, `Q`, `R`, `B`, `N`, `P`) and
  an optional color, with ready-made constants such as `Piece.KNIGHT`,
  `Piece.WHITE_KING` and `Piece.NULL`; `str()` of a pawn is empty, as in SAN.
  `Square` holds a column, a row and a piece; `Square.parse("e4")` builds one
  from text, `valid()` tells whether both coordinates are known and `null()`
  whether neither is.
- `pgnboard.tags`: `Tag`, a `[Name "Value"]` pair, and `TagList`, an ordered
  list with unique names. Inserting a tag whose name is already present
  replaces it; `erase()` removes by name; `"White" in tags` and
  `tags["White"]` look tags up, the latter raising `KeyError` when missing.
  `str()` of a list gives one tag per line.
- `pgnboard.ply`: `Ply`, one half-move such as `Nf3`, `exd5`, `O-O` or
  `e8=Q+`. It reports castling, captures, check, mate and promotion, gives the
  origin and destination squares (`from_square()`, `to_square()`), reads and
  sets a numeric annotation glyph (`$n`), and can carry a comment and any
  number of variations. `notation()` writes the move back in PGN with its
  glyph, comment and variations.
- `pgnboard.board`: `Board`, the raw state of a position, the movement rules
  (`legal_movement`, `is_blocked_line`, `is_piece_pinned`) used to find which
  piece a SAN move came from, and FEN conversion with `board_from_fen` and
  `board_to_fen`. A malformed FEN string raises `InvalidFenError`.
- `pgnboard.position`: `Position`, a game position built from a FEN string or,
  by default, at the initial setup. `update(ply)` plays a move, fills in the
  ply's full origin square and colored piece, and keeps the side to move, move
  number, halfmove clock, castling rights and en passant target up to date.
  `update()` raises `ValueError` when no piece on the board can play the move.
- `pgnboard.linkedlist`: `LinkedList`, a singly linked list whose `append()`
  skips values already present, with node-level `insert_after()`, `erase()`,
  `search()` and in-place `reverse()`.

## Installation

```
pip install .
```

## Example

```python
from pgnboard.position import Position
from pgnboard.ply import Ply

position = Position()              # the standard starting position
for text in ["e4", "e5", "Nf3", "Nc6"]:
    ply = Ply(text)
    position.update(ply)           # also fills in the ply's origin square
    print(ply.from_square(), "->", ply.to_square())

print(position.fen())
print(position.move_number, position.side_to_move)
```

Tags:

```python
from pgnboard.tags import Tag, TagList

tags = TagList([Tag("White", "Player A"), Tag("Black", "Player B")])
tags.insert(Tag("White", "Player C"))   # replaces the existing White tag
print(tags["White"].value)
print(tags)
```

## Notes and limits

- FEN support is partial. `board_to_fen` always writes `-` for the en passant
  field and derives castling rights from where the kings and rooks stand.
- Position equality looks at the side to move and the squares only; the move
  number and halfmove clock are left out. `Position.copy()` keeps the squares,
  side to move and counters, but not castling rights or the en passant target.
- Move legality is only as deep as needed to pick the moving piece: pins are
  detected along lines and diagonals, knight checks are not considered, and
  king moves are always accepted.

## What this package does not do

It works on single moves, tags and positions only. It does not read or write
whole PGN files or games, has no game collection, and offers no command-line
program.

## Running the tests

```
pip install .[test]
pytest
```