"""Fixed 64-square board holding one piece code per square."""

from __future__ import annotations

from typing import Iterator, Sequence

from .constants import BOARD_SQUARES, START_LAYOUT, on_board
from .errors import InvalidLayoutError, SquareOutOfRangeError
from .pieces import Piece, piece_from_symbol, symbol_of


class Board:
    """Row-major board, index 0 at the top-left of the printed layout.

    The square list is allocated once and rewritten in place; callers may
    hold a reference to ``squares`` and observe every later change.
    """

    __slots__ = ("squares",)

    def __init__(self, layout: str = START_LAYOUT):
        self.squares: list[Piece | None] = [None] * BOARD_SQUARES
        self.load(layout)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        if len(rows) != 8:
            raise InvalidLayoutError(f"Board requires 8 rows, got {len(rows)}")
        for row in rows:
            if len(row) != 8:
                raise InvalidLayoutError(f"Board row must have 8 squares: {row!r}")
        return cls("".join(rows))

    def reset(self) -> None:
        self.load(START_LAYOUT)

    def load(self, layout: str) -> None:
        symbols = "".join(layout.split())
        if len(symbols) != BOARD_SQUARES:
            raise InvalidLayoutError(f"Layout must describe {BOARD_SQUARES} squares, got {len(symbols)}")
        decoded = [piece_from_symbol(ch) for ch in symbols]
        self.squares[:] = decoded

    def piece_on(self, square: int) -> Piece | None:
        return self.squares[square]

    def is_empty(self, square: int) -> bool:
        return self.squares[square] is None

    def __getitem__(self, square: int) -> Piece | None:
        self._check(square)
        return self.squares[square]

    def __setitem__(self, square: int, piece: Piece | None) -> None:
        self._check(square)
        if piece is not None and not isinstance(piece, Piece):
            raise TypeError(f"Expected Piece or None, got {type(piece).__name__}")
        self.squares[square] = piece

    def __len__(self) -> int:
        return BOARD_SQUARES

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self.squares)

    def symbols(self) -> str:
        return "".join(symbol_of(piece) for piece in self.squares)

    def rows(self) -> list[str]:
        text = self.symbols()
        return [text[r * 8 : r * 8 + 8] for r in range(8)]

    def debug_state(self) -> tuple:
        return tuple(self.squares)

    @staticmethod
    def _check(square: int) -> None:
        if not isinstance(square, int):
            raise TypeError(f"Square index must be an int, got {type(square).__name__}")
        if not on_board(square):
            raise SquareOutOfRangeError(square, square)

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows())
