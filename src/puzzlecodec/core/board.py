"""Board - nibble-packed piece placement plus game-state metadata."""

from __future__ import annotations

import struct
from typing import Final

from puzzlecodec.core.enums import CastlingRights, Color
from puzzlecodec.core.piece import Piece
from puzzlecodec.core.types import (
    File,
    Rank,
    Square,
    check_coords,
    is_valid_square,
)

SQUARE_BYTES: Final = 32
BOARD_RECORD_SIZE: Final = SQUARE_BYTES + 4

HALFMOVE_CLOCK_BITS: Final = 7
FULLMOVE_COUNTER_BITS: Final = 12
HALFMOVE_CLOCK_MAX: Final = (1 << HALFMOVE_CLOCK_BITS) - 1
FULLMOVE_COUNTER_MAX: Final = (1 << FULLMOVE_COUNTER_BITS) - 1

# Metadata word: halfmove(7) | fullmove(12) | castling(4) | side(1) | padding(8)
_FULLMOVE_SHIFT: Final = HALFMOVE_CLOCK_BITS
_CASTLING_SHIFT: Final = _FULLMOVE_SHIFT + FULLMOVE_COUNTER_BITS
_SIDE_SHIFT: Final = _CASTLING_SHIFT + 4
_META: Final = struct.Struct("<I")
_PIECES: Final[dict[int, Piece]] = {int(p): p for p in Piece}


class Board:
    """64 four-bit squares packed two per byte.

    Square ``rank * 8 + file`` lives in byte ``index // 2``: even indexes in the
    low nibble, odd indexes in the high nibble.
    """

    __slots__ = (
        "_data",
        "_halfmove_clock",
        "_fullmove_counter",
        "castling",
        "player_to_move",
    )

    def __init__(self) -> None:
        self._data = bytearray(SQUARE_BYTES)
        self._halfmove_clock = 0
        self._fullmove_counter = 1
        self.castling = CastlingRights.NONE
        self.player_to_move = Color.WHITE

    # -- Element access -----------------------------------------------------

    def get_square(self, file: File, rank: Rank) -> Piece | int:
        check_coords(file, rank)
        return self._read(rank * 8 + file)

    def set_square(self, file: File, rank: Rank, piece: Piece | int) -> None:
        check_coords(file, rank)
        self._write(rank * 8 + file, piece)

    def __getitem__(self, sq: Square) -> Piece | int:
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq!r}")
        return self._read(sq)

    def __setitem__(self, sq: Square, piece: Piece | int) -> None:
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq!r}")
        self._write(sq, piece)

    def _read(self, sq: Square) -> Piece | int:
        """Nibble at ``sq``; codes without a named piece come back as ``int``."""
        byte = self._data[sq >> 1]
        value = (byte >> 4) & 0x0F if sq & 1 else byte & 0x0F
        return _PIECES.get(value, value)

    def _write(self, sq: Square, piece: Piece | int) -> None:
        value = int(piece)
        if not (0 <= value <= 0x0F):
            raise ValueError(f"Invalid piece code: {piece!r}")
        idx = sq >> 1
        if sq & 1:
            self._data[idx] = (self._data[idx] & 0x0F) | (value << 4)
        else:
            self._data[idx] = (self._data[idx] & 0xF0) | value

    # -- Metadata -----------------------------------------------------------

    @property
    def halfmove_clock(self) -> int:
        return self._halfmove_clock

    @halfmove_clock.setter
    def halfmove_clock(self, value: int) -> None:
        if not (0 <= value <= HALFMOVE_CLOCK_MAX):
            raise ValueError(f"Halfmove clock out of range: {value!r}")
        self._halfmove_clock = value

    @property
    def fullmove_counter(self) -> int:
        return self._fullmove_counter

    @fullmove_counter.setter
    def fullmove_counter(self, value: int) -> None:
        """Set the fullmove counter; 0 is stored as 1."""
        if not (0 <= value <= FULLMOVE_COUNTER_MAX):
            raise ValueError(f"Fullmove counter out of range: {value!r}")
        self._fullmove_counter = value or 1

    # -- Binary record ------------------------------------------------------

    @property
    def data(self) -> bytes:
        """The 32 packed square bytes."""
        return bytes(self._data)

    def to_bytes(self) -> bytes:
        """Squares followed by the little-endian metadata word."""
        meta = (
            self._halfmove_clock
            | (self._fullmove_counter << _FULLMOVE_SHIFT)
            | ((int(self.castling) & 0xF) << _CASTLING_SHIFT)
            | (int(self.player_to_move) << _SIDE_SHIFT)
        )
        return bytes(self._data) + _META.pack(meta)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Board:
        if len(raw) != BOARD_RECORD_SIZE:
            raise ValueError(
                f"Board record must be {BOARD_RECORD_SIZE} bytes, got {len(raw)}"
            )
        b = cls()
        b._data[:] = raw[:SQUARE_BYTES]
        (meta,) = _META.unpack_from(raw, SQUARE_BYTES)
        b._halfmove_clock = meta & HALFMOVE_CLOCK_MAX
        b.fullmove_counter = (meta >> _FULLMOVE_SHIFT) & FULLMOVE_COUNTER_MAX
        b.castling = CastlingRights((meta >> _CASTLING_SHIFT) & 0xF)
        b.player_to_move = Color((meta >> _SIDE_SHIFT) & 1)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [_square_char(self._read(rank * 8 + file)) for file in range(8)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        rows.append(
            f"{self.player_to_move!s} to move, castling={int(self.castling)}, "
            f"halfmove={self._halfmove_clock}, fullmove={self._fullmove_counter}"
        )
        return "\n".join(rows)


def _square_char(piece: Piece | int) -> str:
    return str(piece) if isinstance(piece, Piece) else "?"
