"""Exceptions raised by the raising notation helpers."""

from __future__ import annotations

from puzzlecodec.core.enums import ParseResult


class NotationError(ValueError):
    """Text that did not parse cleanly.

    Args:
        result: The non-success parse result.
        text: The offending input.
    """

    kind = "notation"

    def __init__(self, result: ParseResult, text: str) -> None:
        super().__init__(f"Invalid {self.kind} ({result.name}): {text!r}")
        self.result = result
        self.text = text


class FenError(NotationError):
    kind = "FEN"


class MoveTextError(NotationError):
    kind = "move text"
