"""Tests for puzzle assembly."""

import logging

import pytest

from puzzlecodec.core.enums import Color, ParseResult
from puzzlecodec.core.notation import (
    STARTING_FEN,
    FenError,
    MoveTextError,
    ParseOptions,
)
from puzzlecodec.core.piece import Piece
from puzzlecodec.core.types import D5, FILE_E, RANK_1
from puzzlecodec.puzzle import build_puzzle

EP_FEN = "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2"


class TestBuildPuzzle:
    def test_assembles_record(self) -> None:
        puzzle = build_puzzle(42, 1600, 80, EP_FEN, "e5d6 c7d6 d1g4")
        assert puzzle.puzzle_id == 42
        assert puzzle.num_moves == 3
        assert puzzle.board.player_to_move == Color.WHITE
        assert puzzle.board.fullmove_counter == 2
        assert puzzle.board[D5] == Piece.BLACK_PAWN_EP_CAPTURABLE

    def test_assembled_record_cannot_be_rewritten(self) -> None:
        puzzle = build_puzzle(1, 1500, 60, STARTING_FEN, "e2e4")
        before = puzzle.to_bytes()
        puzzle.board.set_square(FILE_E, RANK_1, Piece.EMPTY)
        assert puzzle.to_bytes() == before
        assert hash(puzzle) == hash(build_puzzle(1, 1500, 60, STARTING_FEN, "e2e4"))

    def test_logs_debug_on_success(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="puzzlecodec.puzzle.builder"):
            build_puzzle(7, 1500, 60, EP_FEN, "e5d6")
        assert "Puzzle 7 assembled with 1 moves" in caplog.text

    def test_moves_capped_by_options(self) -> None:
        puzzle = build_puzzle(
            1, 1500, 60, EP_FEN, "e5d6 c7d6 d1g4", ParseOptions(max_moves=2)
        )
        assert puzzle.num_moves == 2

    def test_moves_capped_at_record_capacity(self) -> None:
        text = " ".join(["g1f3 f3g1"] * 30)
        puzzle = build_puzzle(
            1, 1500, 60, EP_FEN, text, ParseOptions(max_moves=100)
        )
        assert puzzle.num_moves == 40


class TestBuildPuzzleErrors:
    def test_incomplete_fen(self, caplog: pytest.LogCaptureFixture) -> None:
        fen = EP_FEN.rsplit(" ", 2)[0]
        with caplog.at_level(logging.WARNING, logger="puzzlecodec.puzzle.builder"):
            with pytest.raises(FenError) as excinfo:
                build_puzzle(9, 1500, 60, fen, "e5d6")
        assert excinfo.value.result == ParseResult.INCOMPLETE_FEN
        assert "INCOMPLETE_FEN" in caplog.text

    def test_bad_move_text(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="puzzlecodec.puzzle.builder"):
            with pytest.raises(MoveTextError):
                build_puzzle(9, 1500, 60, EP_FEN, "e5d6 i2e4")
        assert "after 1 moves" in caplog.text

    def test_bad_rating(self) -> None:
        with pytest.raises(ValueError, match="Rating out of range"):
            build_puzzle(9, -1, 60, EP_FEN, "e5d6")
