"""Chess plies, PGN tags, FEN conversion and board positions."""

__version__ = "0.1.0"
__all__ = ["board", "linkedlist", "ply", "position", "square", "tags"]