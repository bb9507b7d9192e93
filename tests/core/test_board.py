"""Tests for Board."""

import pytest

from puzzlecodec.core.board import BOARD_RECORD_SIZE, Board
from puzzlecodec.core.enums import CastlingRights, Color
from puzzlecodec.core.piece import Piece
from puzzlecodec.core.types import (
    A1, B1, E1, E4, H8,
    FILE_A, FILE_B, FILE_E, FILE_H,
    RANK_1, RANK_4, RANK_8,
)


class TestSquareAccess:
    def test_new_board_is_empty(self, board: Board) -> None:
        assert all(board[sq] is Piece.EMPTY for sq in range(64))

    def test_set_and_get(self, board: Board) -> None:
        board.set_square(FILE_E, RANK_4, Piece.WHITE_PAWN)
        assert board.get_square(FILE_E, RANK_4) == Piece.WHITE_PAWN
        assert board[E4] == Piece.WHITE_PAWN

    def test_every_square_and_code_roundtrips(self) -> None:
        for code in range(16):
            board = Board()
            expected = [(sq * 5 + 3) & 0x0F for sq in range(64)]
            for sq, value in enumerate(expected):
                board[sq] = value
            for file in range(8):
                for rank in range(8):
                    sq = rank * 8 + file
                    board.set_square(file, rank, code)
                    expected[sq] = code
                    assert board.get_square(file, rank) == code
                    assert board[sq ^ 1] == expected[sq ^ 1]

    def test_neighbour_nibble_untouched(self, board: Board) -> None:
        board.set_square(FILE_A, RANK_1, Piece.BLACK_PAWN_EP_CAPTURABLE)
        board.set_square(FILE_B, RANK_1, Piece.WHITE_KING)
        assert board[A1] == Piece.BLACK_PAWN_EP_CAPTURABLE
        board.set_square(FILE_A, RANK_1, Piece.EMPTY)
        assert board[B1] == Piece.WHITE_KING
        assert board[A1] == Piece.EMPTY

    def test_nibble_layout(self, board: Board) -> None:
        board[A1] = Piece.WHITE_QUEEN  # even square → low nibble
        board[B1] = Piece.BLACK_ROOK  # odd square → high nibble
        board[H8] = Piece.BLACK_KING
        data = board.data
        assert data[0] == (Piece.BLACK_ROOK << 4) | Piece.WHITE_QUEEN
        assert data[31] == Piece.BLACK_KING << 4

    def test_accepts_plain_ints(self, board: Board) -> None:
        board.set_square(FILE_H, RANK_8, 9)
        assert board.get_square(FILE_H, RANK_8) is Piece.BLACK_KING

    @pytest.mark.parametrize("file, rank", [(-1, 0), (8, 0), (0, -1), (0, 8)])
    def test_out_of_range_coords_raise(self, board: Board, file: int, rank: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            board.get_square(file, rank)
        with pytest.raises(ValueError, match="out of range"):
            board.set_square(file, rank, Piece.WHITE_KING)

    def test_out_of_range_index_raises(self, board: Board) -> None:
        with pytest.raises(ValueError):
            board[64]
        with pytest.raises(ValueError):
            board[-1] = Piece.WHITE_KING

    def test_unnamed_code_eight_roundtrips(self, board: Board) -> None:
        board.set_square(FILE_A, RANK_1, 8)
        assert board.get_square(FILE_A, RANK_1) == 8
        assert board.data[0] == 0x08
        assert "?" in repr(board)

    @pytest.mark.parametrize("code", [16, -1])
    def test_invalid_piece_code_raises(self, board: Board, code: int) -> None:
        with pytest.raises(ValueError, match="Invalid piece code"):
            board.set_square(FILE_A, RANK_1, code)
        assert board[A1] == Piece.EMPTY


class TestMetadata:
    def test_defaults(self, board: Board) -> None:
        assert board.halfmove_clock == 0
        assert board.fullmove_counter == 1
        assert board.castling == CastlingRights.NONE
        assert board.player_to_move == Color.WHITE

    def test_fullmove_zero_stored_as_one(self, board: Board) -> None:
        board.fullmove_counter = 0
        assert board.fullmove_counter == 1

    def test_clock_limits(self, board: Board) -> None:
        board.halfmove_clock = 127
        board.fullmove_counter = 4095
        with pytest.raises(ValueError, match="Halfmove"):
            board.halfmove_clock = 128
        with pytest.raises(ValueError, match="Fullmove"):
            board.fullmove_counter = 4096
        assert board.halfmove_clock == 127
        assert board.fullmove_counter == 4095


class TestBinaryRecord:
    def test_record_size(self, board: Board) -> None:
        assert len(board.to_bytes()) == BOARD_RECORD_SIZE == 36

    def test_metadata_word(self, board: Board) -> None:
        board.halfmove_clock = 5
        board.fullmove_counter = 3
        board.castling = CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        board.player_to_move = Color.BLACK
        meta = int.from_bytes(board.to_bytes()[32:], "little")
        assert meta & 0x7F == 5
        assert (meta >> 7) & 0xFFF == 3
        assert (meta >> 19) & 0xF == 0b1001
        assert (meta >> 23) & 1 == 1
        assert meta >> 24 == 0

    def test_from_bytes_restores_board(self, start_board: Board) -> None:
        start_board.halfmove_clock = 42
        restored = Board.from_bytes(start_board.to_bytes())
        assert restored == start_board
        assert restored.halfmove_clock == 42
        assert restored[E1] == Piece.WHITE_KING

    def test_from_bytes_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="36 bytes"):
            Board.from_bytes(b"\x00" * 32)

    def test_from_bytes_keeps_code_eight(self) -> None:
        raw = bytearray(BOARD_RECORD_SIZE)
        raw[3] = 0x80
        raw[32:] = (1 << 7).to_bytes(4, "little")
        restored = Board.from_bytes(bytes(raw))
        assert restored[7] == 8
        assert restored[6] == Piece.EMPTY
        assert restored.to_bytes() == bytes(raw)


class TestBoardOperations:
    def test_equality(self, start_board: Board) -> None:
        other = Board.from_bytes(start_board.to_bytes())
        assert other == start_board
        other[E1] = Piece.EMPTY
        assert other != start_board
        assert start_board[E1] == Piece.WHITE_KING

    def test_repr_not_empty(self, start_board: Board) -> None:
        text = repr(start_board)
        assert "K" in text
        assert "a b c d e f g h" in text
        assert "white to move" in text
