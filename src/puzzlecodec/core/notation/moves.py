"""Coordinate move tokens (``e2e4``, ``e7e8q``) to packed 16-bit move codes."""

from __future__ import annotations

from dataclasses import replace

from puzzlecodec.core.enums import ParseResult
from puzzlecodec.core.move import PROMOTION_BY_CHAR, Move
from puzzlecodec.core.notation.errors import MoveTextError
from puzzlecodec.core.notation.models import DEFAULT_MAX_MOVES, MoveListParse
from puzzlecodec.core.types import file_of, parse_square, rank_of

_SQUARES_WIDTH = 4


def _read_squares(token: str) -> Move | None:
    """Source and destination squares of a four-character token."""
    try:
        src = parse_square(token[:2])
        dst = parse_square(token[2:])
    except ValueError:
        return None
    return Move(file_of(src), rank_of(src), file_of(dst), rank_of(dst))


def parse_move_string(
    text: str,
    max_moves: int = DEFAULT_MAX_MOVES,
    moves: list[int] | None = None,
) -> MoveListParse:
    """Pack move tokens from *text* until it runs out or *max_moves* are read.

    Codes are appended to *moves* when given. Tokens may be separated by
    whitespace. A fifth non-space character after the squares is read as the
    promotion letter of the same token. On a syntax error the codes packed
    before the bad token are kept.
    """
    if max_moves < 0:
        raise ValueError(f"max_moves must be non-negative: {max_moves!r}")

    parse = MoveListParse([] if moves is None else moves)
    end = len(text)
    pos = 0
    produced = 0

    while produced < max_moves:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            break

        start = pos
        token = text[pos : pos + _SQUARES_WIDTH]
        move = _read_squares(token) if len(token) == _SQUARES_WIDTH else None
        if move is None:
            parse.result = ParseResult.SYNTAX_ERROR
            return parse
        pos += _SQUARES_WIDTH

        if pos < end and not text[pos].isspace():
            promotion = PROMOTION_BY_CHAR.get(text[pos])
            if promotion is None:
                parse.result = ParseResult.SYNTAX_ERROR
                return parse
            move = replace(move, promotion=promotion)
            pos += 1

        assert pos > start, f"move cursor stuck at {start} in {text!r}"
        parse.moves.append(move.pack())
        produced += 1

    return parse


def moves_from_text(text: str, max_moves: int = DEFAULT_MAX_MOVES) -> list[int]:
    """Pack every token of *text* into a new list.

    Raises:
        MoveTextError: on the first malformed token.
    """
    parse = parse_move_string(text, max_moves)
    if not parse.ok:
        raise MoveTextError(parse.result, text)
    return parse.moves
