"""Puzzle records assembled from decoded FEN and move text."""

from puzzlecodec.puzzle.builder import build_puzzle
from puzzlecodec.puzzle.models import PUZZLE_MAX_MOVES, PUZZLE_RECORD_SIZE, Puzzle

__all__ = [
    "PUZZLE_MAX_MOVES",
    "PUZZLE_RECORD_SIZE",
    "Puzzle",
    "build_puzzle",
]
