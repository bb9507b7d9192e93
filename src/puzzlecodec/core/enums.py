"""Core enumerations and flags for the puzzle codec."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side to move."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class PromotionPiece(IntEnum):
    """Two-bit promotion slot of a packed move."""

    QUEEN = 0
    ROOK = 1
    KNIGHT = 2
    BISHOP = 3


class ParseResult(IntEnum):
    """Outcome of a notation parse."""

    SUCCESS = 0
    SYNTAX_ERROR = -1
    INVALID_BOARD_STATE = -2
    INCOMPLETE_FEN = -3

    @property
    def ok(self) -> bool:
        return self is ParseResult.SUCCESS


class FenField(IntFlag):
    """FEN fields that were read and applied to the board."""

    NONE = 0
    PLACEMENT = auto()
    ACTIVE_COLOR = auto()
    CASTLING = auto()
    EN_PASSANT = auto()
    HALFMOVE_CLOCK = auto()
    FULLMOVE_COUNTER = auto()

    ALL = (
        PLACEMENT
        | ACTIVE_COLOR
        | CASTLING
        | EN_PASSANT
        | HALFMOVE_CLOCK
        | FULLMOVE_COUNTER
    )


class OverflowPolicy(IntEnum):
    """How clock values wider than their bit field are stored."""

    CLAMP = auto()  # saturate at the field maximum
    TRUNCATE = auto()  # keep the low bits only
    REJECT = auto()  # fail the parse with a syntax error
