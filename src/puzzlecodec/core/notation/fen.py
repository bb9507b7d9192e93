"""FEN parsing into a nibble-packed :class:`Board`."""

from __future__ import annotations

from puzzlecodec.core.board import (
    FULLMOVE_COUNTER_MAX,
    HALFMOVE_CLOCK_MAX,
    Board,
)
from puzzlecodec.core.enums import (
    CastlingRights,
    Color,
    FenField,
    OverflowPolicy,
    ParseResult,
)
from puzzlecodec.core.notation.errors import FenError
from puzzlecodec.core.notation.models import FenParse, ParseOptions
from puzzlecodec.core.piece import Piece
from puzzlecodec.core.types import (
    FILE_A,
    FILE_NAMES,
    RANK_1,
    RANK_4,
    RANK_5,
    RANK_8,
    Rank,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_DIGITS = "0123456789"
_EMPTY_RUNS = "12345678"

_SIDES: dict[str, Color] = {
    "w": Color.WHITE,
    "W": Color.WHITE,
    "b": Color.BLACK,
    "B": Color.BLACK,
}

_CASTLING: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# Target-square rank digit → (rank of the pawn that just advanced, its marker)
_EN_PASSANT: dict[str, tuple[Rank, Piece]] = {
    "3": (RANK_4, Piece.WHITE_PAWN_EP_CAPTURABLE),
    "6": (RANK_5, Piece.BLACK_PAWN_EP_CAPTURABLE),
}


# ── Scanning helpers ─────────────────────────────────────────────────────────


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _next_field(text: str, pos: int) -> tuple[str, int]:
    """Return the run of non-space characters at *pos* and the index after it."""
    end = pos
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[pos:end], end


def _read_placement(text: str, board: Board) -> ParseResult:
    """Write the placement field onto *board*, square by square."""
    rank = RANK_8
    file = FILE_A
    for ch in text:
        if ch in _EMPTY_RUNS:
            run = int(ch)
            if file + run > 8:
                return ParseResult.INVALID_BOARD_STATE
            for _ in range(run):
                board.set_square(file, rank, Piece.EMPTY)
                file += 1
        elif ch == "/":
            if file != 8 or rank == RANK_1:
                return ParseResult.INVALID_BOARD_STATE
            file = FILE_A
            rank -= 1
        else:
            try:
                piece = Piece.from_char(ch)
            except ValueError:
                return ParseResult.SYNTAX_ERROR
            if file >= 8:
                return ParseResult.INVALID_BOARD_STATE
            board.set_square(file, rank, piece)
            file += 1

    if file != 8 or rank != RANK_1:
        return ParseResult.INVALID_BOARD_STATE
    return ParseResult.SUCCESS


def _read_counter(text: str, limit: int, policy: OverflowPolicy) -> int | None:
    """Decimal counter fitted into ``[0, limit]``; ``None`` if unusable."""
    if not text or any(ch not in _DIGITS for ch in text):
        return None
    value = int(text)
    if value <= limit:
        return value
    if policy == OverflowPolicy.CLAMP:
        return limit
    if policy == OverflowPolicy.TRUNCATE:
        return value & limit
    return None


# ── FEN ──────────────────────────────────────────────────────────────────────


def parse_fen(
    text: str,
    board: Board | None = None,
    options: ParseOptions | None = None,
) -> FenParse:
    """Parse FEN *text* onto *board* (a fresh one when omitted).

    Fields are applied in order as they are read and are never rolled back.
    Fields the text does not reach keep the board's current values.
    """
    if board is None:
        board = Board()
    if options is None:
        options = ParseOptions()

    parse = FenParse(board, ParseResult.INCOMPLETE_FEN)

    # 1. Piece placement
    pos = _skip_space(text, 0)
    if pos >= len(text):
        return parse
    placement, pos = _next_field(text, pos)
    result = _read_placement(placement, board)
    if result != ParseResult.SUCCESS:
        parse.result = result
        return parse
    parse.fields |= FenField.PLACEMENT

    # 2. Active color
    pos = _skip_space(text, pos)
    if pos >= len(text):
        return parse
    side_part, pos = _next_field(text, pos)
    side = _SIDES.get(side_part)
    if side is None:
        parse.result = ParseResult.SYNTAX_ERROR
        return parse
    board.player_to_move = side
    parse.fields |= FenField.ACTIVE_COLOR

    # 3. Castling
    pos = _skip_space(text, pos)
    if pos >= len(text):
        return parse
    castling_part, pos = _next_field(text, pos)
    castling = CastlingRights.NONE
    if castling_part != "-":
        for ch in castling_part:
            right = _CASTLING.get(ch)
            if right is None:
                parse.result = ParseResult.SYNTAX_ERROR
                return parse
            castling |= right
    board.castling = castling
    parse.fields |= FenField.CASTLING

    # 4. En passant
    pos = _skip_space(text, pos)
    if pos >= len(text):
        return parse
    ep_part, pos = _next_field(text, pos)
    if ep_part != "-":
        if (
            len(ep_part) != 2
            or ep_part[0] not in FILE_NAMES
            or ep_part[1] not in _EN_PASSANT
        ):
            parse.result = ParseResult.SYNTAX_ERROR
            return parse
        pawn_rank, marker = _EN_PASSANT[ep_part[1]]
        board.set_square(FILE_NAMES.index(ep_part[0]), pawn_rank, marker)
    parse.fields |= FenField.EN_PASSANT

    # 5. Halfmove clock
    pos = _skip_space(text, pos)
    if pos >= len(text):
        return parse
    halfmove_part, pos = _next_field(text, pos)
    halfmove = _read_counter(halfmove_part, HALFMOVE_CLOCK_MAX, options.overflow)
    if halfmove is None:
        parse.result = ParseResult.SYNTAX_ERROR
        return parse
    board.halfmove_clock = halfmove
    parse.fields |= FenField.HALFMOVE_CLOCK

    # 6. Fullmove counter
    pos = _skip_space(text, pos)
    if pos >= len(text):
        return parse
    fullmove_part, pos = _next_field(text, pos)
    fullmove = _read_counter(fullmove_part, FULLMOVE_COUNTER_MAX, options.overflow)
    if fullmove is None:
        parse.result = ParseResult.SYNTAX_ERROR
        return parse
    board.fullmove_counter = fullmove  # 0 is stored as 1
    parse.fields |= FenField.FULLMOVE_COUNTER

    parse.result = ParseResult.SUCCESS
    return parse


def board_from_fen(text: str, options: ParseOptions | None = None) -> Board:
    """Parse a complete FEN string into a new :class:`Board`.

    Raises:
        FenError: if the text is malformed or ends before the fullmove counter.
    """
    parse = parse_fen(text, options=options)
    if not parse.ok:
        raise FenError(parse.result, text)
    return parse.board
