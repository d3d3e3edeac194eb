"""Engine-wide constants and square helpers."""

from __future__ import annotations

BOARD_SQUARES = 64
MOVE_BUFFER_SIZE = 256
DEFAULT_SEED = 42

EMPTY_SYMBOL = "."

# Rank 0 is Black's back rank; square indices grow downward in print order.
START_LAYOUT = (
    "rnbqkbnr"
    "pppppppp"
    "........"
    "........"
    "........"
    "........"
    "PPPPPPPP"
    "RNBQKBNR"
)

STATUS_OK = 0
STATUS_OUT_OF_RANGE = -1
STATUS_EMPTY_SOURCE = -2


def on_board(index: int) -> bool:
    return 0 <= index < BOARD_SQUARES


def file_of(index: int) -> int:
    return index % 8


def rank_of(index: int) -> int:
    return index // 8
