"""Exported-call surface for hosts that speak bytes and status codes.

Sides are passed as ``is_white`` flags, boards as 64 ASCII bytes and moves
as packed 3-byte records, matching the layout an embedding host reads from
linear memory.
"""

from __future__ import annotations

import logging

from .board import Board
from .constants import BOARD_SQUARES, STATUS_OK
from .engine import Engine
from .errors import EmptySquareError, InvalidLayoutError, SquareOutOfRangeError
from .move import Move
from .pieces import Color

logger = logging.getLogger(__name__)


def side_from_flag(is_white: bool | int) -> Color:
    return Color.WHITE if is_white else Color.BLACK


class ChessBridge:
    def __init__(self, engine: Engine | None = None):
        self.engine = engine if engine is not None else Engine()

    def reset(self) -> None:
        self.engine.reset()

    def get_board(self) -> Board:
        return self.engine.get_board()

    def board_bytes(self) -> bytes:
        return self.engine.get_board().symbols().encode("ascii")

    def load_board_bytes(self, data: bytes) -> None:
        if len(data) != BOARD_SQUARES:
            raise InvalidLayoutError(f"Board buffer must be {BOARD_SQUARES} bytes, got {len(data)}")
        try:
            layout = data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidLayoutError(f"Board buffer is not ASCII: {exc}") from exc
        self.engine.get_board().load(layout)

    def generate_moves(self, is_white: bool | int) -> int:
        return self.engine.generate_moves(side_from_flag(is_white))

    def get_moves(self) -> list[Move]:
        return self.engine.get_moves().to_list()

    def moves_bytes(self) -> bytes:
        return b"".join(move.to_bytes() for move in self.engine.get_moves())

    def find_move(self, is_white: bool | int, from_square: int, to_square: int) -> Move | None:
        self.generate_moves(is_white)
        for move in self.engine.get_moves():
            if move.from_square == from_square and move.to_square == to_square:
                return move
        return None

    def random_ai(self, is_white: bool | int) -> int:
        return self.engine.random_ai(side_from_flag(is_white))

    def apply_move(self, from_square: int, to_square: int) -> int:
        try:
            self.engine.apply_move(from_square, to_square)
        except (SquareOutOfRangeError, EmptySquareError) as exc:
            logger.warning("apply_move rejected: %s", exc)
            return exc.status
        return STATUS_OK
