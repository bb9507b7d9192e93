"""Fixed-size puzzle record built from decoded FEN and move text."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Final

from puzzlecodec.core.board import BOARD_RECORD_SIZE, Board
from puzzlecodec.core.move import Move

PUZZLE_MAX_MOVES: Final = 40

# id | rating | deviation | moves[40] | num_moves | 3 pad bytes to align the board
_HEADER: Final = struct.Struct(f"<IHH{PUZZLE_MAX_MOVES}HB3x")
PUZZLE_RECORD_SIZE: Final = _HEADER.size + BOARD_RECORD_SIZE

_U16_MAX: Final = 0xFFFF
_U32_MAX: Final = 0xFFFFFFFF


@dataclass(slots=True, frozen=True)
class Puzzle:
    """One puzzle: identity, rating, solution moves and starting board.

    ``moves`` holds packed 16-bit move codes in play order. The starting
    position is kept as its 36-byte board record, so an assembled puzzle
    never shares a mutable ``Board``; ``board`` decodes a fresh copy.
    """

    puzzle_id: int
    rating: int
    rating_deviation: int
    moves: tuple[int, ...]
    board_record: bytes

    def __post_init__(self) -> None:
        if not (0 <= self.puzzle_id <= _U32_MAX):
            raise ValueError(f"Puzzle id out of range: {self.puzzle_id!r}")
        if not (0 <= self.rating <= _U16_MAX):
            raise ValueError(f"Rating out of range: {self.rating!r}")
        if not (0 <= self.rating_deviation <= _U16_MAX):
            raise ValueError(
                f"Rating deviation out of range: {self.rating_deviation!r}"
            )
        if len(self.moves) > PUZZLE_MAX_MOVES:
            raise ValueError(
                f"Puzzle holds at most {PUZZLE_MAX_MOVES} moves, got {len(self.moves)}"
            )
        for code in self.moves:
            Move.unpack(code)
        Board.from_bytes(self.board_record)
        object.__setattr__(self, "moves", tuple(self.moves))
        object.__setattr__(self, "board_record", bytes(self.board_record))

    @property
    def board(self) -> Board:
        return Board.from_bytes(self.board_record)

    @property
    def num_moves(self) -> int:
        return len(self.moves)

    def decoded_moves(self) -> list[Move]:
        return [Move.unpack(code) for code in self.moves]

    # ── Binary record ────────────────────────────────────────────────────

    def to_bytes(self) -> bytes:
        padded = self.moves + (0,) * (PUZZLE_MAX_MOVES - len(self.moves))
        header = _HEADER.pack(
            self.puzzle_id,
            self.rating,
            self.rating_deviation,
            *padded,
            len(self.moves),
        )
        return header + self.board_record

    @classmethod
    def from_bytes(cls, raw: bytes) -> Puzzle:
        if len(raw) != PUZZLE_RECORD_SIZE:
            raise ValueError(
                f"Puzzle record must be {PUZZLE_RECORD_SIZE} bytes, got {len(raw)}"
            )
        puzzle_id, rating, deviation, *slots = _HEADER.unpack_from(raw)
        num_moves = slots.pop()
        if num_moves > PUZZLE_MAX_MOVES:
            raise ValueError(f"Puzzle record move count out of range: {num_moves}")
        return cls(
            puzzle_id, rating, deviation, tuple(slots[:num_moves]), raw[_HEADER.size :]
        )
