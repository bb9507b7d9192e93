"""Notation package: FEN and coordinate move-token parsing."""

from puzzlecodec.core.notation.errors import FenError, MoveTextError, NotationError
from puzzlecodec.core.notation.fen import STARTING_FEN, board_from_fen, parse_fen
from puzzlecodec.core.notation.models import (
    DEFAULT_MAX_MOVES,
    FenParse,
    MoveListParse,
    ParseOptions,
)
from puzzlecodec.core.notation.moves import moves_from_text, parse_move_string

__all__ = [
    "STARTING_FEN",
    "DEFAULT_MAX_MOVES",
    "FenParse",
    "MoveListParse",
    "ParseOptions",
    "parse_fen",
    "board_from_fen",
    "parse_move_string",
    "moves_from_text",
    "NotationError",
    "FenError",
    "MoveTextError",
]
