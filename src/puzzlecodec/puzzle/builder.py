"""Assemble :class:`Puzzle` records from FEN and move text."""

from __future__ import annotations

import logging

from puzzlecodec.core.notation import (
    FenError,
    MoveTextError,
    ParseOptions,
    parse_fen,
    parse_move_string,
)
from puzzlecodec.puzzle.models import PUZZLE_MAX_MOVES, Puzzle

_LOGGER = logging.getLogger(__name__)


def build_puzzle(
    puzzle_id: int,
    rating: int,
    rating_deviation: int,
    fen: str,
    moves_text: str,
    options: ParseOptions | None = None,
) -> Puzzle:
    """Decode *fen* and *moves_text* and wrap them with the scalar fields.

    Moves beyond ``options.max_moves`` (capped at 40) are dropped.

    Raises:
        FenError: if the FEN does not parse to completion.
        MoveTextError: if a move token is malformed.
        ValueError: if a scalar field does not fit its record slot.
    """
    if options is None:
        options = ParseOptions()

    fen_parse = parse_fen(fen, options=options)
    if not fen_parse.ok:
        _LOGGER.warning(
            "Puzzle %s: FEN rejected (%s, fields=%s): %r",
            puzzle_id,
            fen_parse.result.name,
            fen_parse.fields,
            fen,
        )
        raise FenError(fen_parse.result, fen)

    max_moves = min(options.max_moves, PUZZLE_MAX_MOVES)
    move_parse = parse_move_string(moves_text, max_moves)
    if not move_parse.ok:
        _LOGGER.warning(
            "Puzzle %s: move text rejected after %d moves (%s): %r",
            puzzle_id,
            len(move_parse.moves),
            move_parse.result.name,
            moves_text,
        )
        raise MoveTextError(move_parse.result, moves_text)

    puzzle = Puzzle(
        puzzle_id,
        rating,
        rating_deviation,
        tuple(move_parse.moves),
        fen_parse.board.to_bytes(),
    )
    _LOGGER.debug("Puzzle %s assembled with %d moves", puzzle_id, puzzle.num_moves)
    return puzzle
