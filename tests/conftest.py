"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from puzzlecodec.core.board import Board
from puzzlecodec.core.notation import STARTING_FEN, parse_fen


@pytest.fixture
def board() -> Board:
    """A fresh empty board."""
    return Board()


@pytest.fixture
def start_board() -> Board:
    """Board parsed from the standard starting FEN."""
    return parse_fen(STARTING_FEN).board
