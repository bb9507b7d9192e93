"""Core codec layer: board packing and notation parsing, stdlib only.

Quick start::

    from puzzlecodec.core import parse_fen, parse_move_string, STARTING_FEN

    fen = parse_fen(STARTING_FEN)
    print(fen.result, fen.board)
    print(parse_move_string("e2e4 e7e5").moves)
"""

from puzzlecodec.core.board import BOARD_RECORD_SIZE, Board
from puzzlecodec.core.enums import (
    CastlingRights,
    Color,
    FenField,
    OverflowPolicy,
    ParseResult,
    PromotionPiece,
)
from puzzlecodec.core.move import Move
from puzzlecodec.core.notation import (
    DEFAULT_MAX_MOVES,
    STARTING_FEN,
    FenError,
    FenParse,
    MoveListParse,
    MoveTextError,
    NotationError,
    ParseOptions,
    board_from_fen,
    moves_from_text,
    parse_fen,
    parse_move_string,
)
from puzzlecodec.core.piece import Piece
from puzzlecodec.core.types import (
    File,
    Rank,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "FenField",
    "OverflowPolicy",
    "ParseResult",
    "PromotionPiece",
    # Types / helpers
    "File",
    "Rank",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "BOARD_RECORD_SIZE",
    "Board",
    "Move",
    "Piece",
    # Notation
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
