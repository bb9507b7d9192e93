"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from puzzlecodec.core.board import Board
from puzzlecodec.core.enums import FenField, OverflowPolicy, ParseResult

DEFAULT_MAX_MOVES = 40


@dataclass(slots=True, frozen=True)
class ParseOptions:
    """Knobs shared by the FEN parser and puzzle assembly."""

    overflow: OverflowPolicy = OverflowPolicy.CLAMP
    max_moves: int = DEFAULT_MAX_MOVES


@dataclass(slots=True)
class FenParse:
    """Board produced by :func:`parse_fen` and how far parsing got.

    On a non-success result the board holds every field listed in ``fields``
    plus whatever squares of the placement field were written before the
    failure.
    """

    board: Board
    result: ParseResult
    fields: FenField = FenField.NONE

    @property
    def ok(self) -> bool:
        return self.result.ok


@dataclass(slots=True)
class MoveListParse:
    """Packed move codes produced by :func:`parse_move_string`."""

    moves: list[int] = field(default_factory=list)
    result: ParseResult = ParseResult.SUCCESS

    @property
    def ok(self) -> bool:
        return self.result.ok
