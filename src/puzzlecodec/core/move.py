"""Move value object and its 16-bit packed form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from puzzlecodec.core.enums import PromotionPiece
from puzzlecodec.core.types import (
    File,
    Rank,
    check_coords,
    make_square,
    square_name,
)

# Packed layout, high to low:
# from_file(3) | from_rank(3) | to_file(3) | to_rank(3) | promotion(2) | zero(2)
FROM_FILE_SHIFT: Final = 13
FROM_RANK_SHIFT: Final = 10
TO_FILE_SHIFT: Final = 7
TO_RANK_SHIFT: Final = 4
PROMOTION_SHIFT: Final = 2

_COORD_MASK: Final = 0x7
_PROMOTION_MASK: Final = 0x3
_RESERVED_MASK: Final = 0x3

_PROMO_CHARS: dict[PromotionPiece, str] = {
    PromotionPiece.QUEEN: "q",
    PromotionPiece.ROOK: "r",
    PromotionPiece.KNIGHT: "n",
    PromotionPiece.BISHOP: "b",
}
PROMOTION_BY_CHAR: dict[str, PromotionPiece] = {
    **{ch: piece for piece, ch in _PROMO_CHARS.items()},
    **{ch.upper(): piece for piece, ch in _PROMO_CHARS.items()},
}


@dataclass(frozen=True, slots=True)
class Move:
    """Source and destination coordinates plus the promotion slot.

    The packed form cannot tell "no promotion" from "promotes to a queen";
    ``promotion`` is always ``QUEEN`` unless a promotion letter said otherwise.
    """

    from_file: File
    from_rank: Rank
    to_file: File
    to_rank: Rank
    promotion: PromotionPiece = PromotionPiece.QUEEN

    def __post_init__(self) -> None:
        check_coords(self.from_file, self.from_rank)
        check_coords(self.to_file, self.to_rank)

    # ── Packing ──────────────────────────────────────────────────────────

    def pack(self) -> int:
        """16-bit move code."""
        return (
            (self.from_file << FROM_FILE_SHIFT)
            | (self.from_rank << FROM_RANK_SHIFT)
            | (self.to_file << TO_FILE_SHIFT)
            | (self.to_rank << TO_RANK_SHIFT)
            | (int(self.promotion) << PROMOTION_SHIFT)
        )

    @classmethod
    def unpack(cls, code: int) -> Move:
        if not (0 <= code <= 0xFFFF) or code & _RESERVED_MASK:
            raise ValueError(f"Invalid packed move: {code!r}")
        return cls(
            (code >> FROM_FILE_SHIFT) & _COORD_MASK,
            (code >> FROM_RANK_SHIFT) & _COORD_MASK,
            (code >> TO_FILE_SHIFT) & _COORD_MASK,
            (code >> TO_RANK_SHIFT) & _COORD_MASK,
            PromotionPiece((code >> PROMOTION_SHIFT) & _PROMOTION_MASK),
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self, promotion: bool = False) -> str:
        """Coordinate notation, e.g. ``e7e8`` or ``e7e8q`` with *promotion*."""
        src = make_square(self.from_file, self.from_rank)
        dst = make_square(self.to_file, self.to_rank)
        text = square_name(src) + square_name(dst)
        if promotion:
            text += _PROMO_CHARS[self.promotion]
        return text
