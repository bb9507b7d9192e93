"""Four-bit piece codes stored in each board square."""

from __future__ import annotations

from enum import IntEnum

from puzzlecodec.core.enums import Color

_BLACK_BIT = 0x8


class Piece(IntEnum):
    """Nibble value of a square.

    White codes occupy 1–7 and black codes 9–15, so the high bit of a
    non-empty square is its color. Code 8 has no named piece; a board square
    can still hold it and reads it back as a plain ``int``.
    """

    EMPTY = 0
    WHITE_KING = 1
    WHITE_QUEEN = 2
    WHITE_ROOK = 3
    WHITE_BISHOP = 4
    WHITE_KNIGHT = 5
    WHITE_PAWN = 6
    WHITE_PAWN_EP_CAPTURABLE = 7
    BLACK_KING = 9
    BLACK_QUEEN = 10
    BLACK_ROOK = 11
    BLACK_BISHOP = 12
    BLACK_KNIGHT = 13
    BLACK_PAWN = 14
    BLACK_PAWN_EP_CAPTURABLE = 15

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '.' = empty)."""
        return _FEN_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            return _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def color(self) -> Color | None:
        """Owner of the piece, ``None`` for an empty square."""
        if self is Piece.EMPTY:
            return None
        return Color.BLACK if self & _BLACK_BIT else Color.WHITE

    @property
    def is_en_passant_capturable(self) -> bool:
        return self in (Piece.WHITE_PAWN_EP_CAPTURABLE, Piece.BLACK_PAWN_EP_CAPTURABLE)


# FEN character → Piece
_CHAR_MAP: dict[str, Piece] = {
    "K": Piece.WHITE_KING,
    "Q": Piece.WHITE_QUEEN,
    "R": Piece.WHITE_ROOK,
    "B": Piece.WHITE_BISHOP,
    "N": Piece.WHITE_KNIGHT,
    "P": Piece.WHITE_PAWN,
    "k": Piece.BLACK_KING,
    "q": Piece.BLACK_QUEEN,
    "r": Piece.BLACK_ROOK,
    "b": Piece.BLACK_BISHOP,
    "n": Piece.BLACK_KNIGHT,
    "p": Piece.BLACK_PAWN,
}

_FEN_CHARS: dict[Piece, str] = {v: k for k, v in _CHAR_MAP.items()}
_FEN_CHARS[Piece.EMPTY] = "."
_FEN_CHARS[Piece.WHITE_PAWN_EP_CAPTURABLE] = "P"
_FEN_CHARS[Piece.BLACK_PAWN_EP_CAPTURABLE] = "p"
