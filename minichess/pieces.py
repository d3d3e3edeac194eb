"""Piece values and their one-letter board encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .constants import EMPTY_SYMBOL
from .errors import InvalidPieceError


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(self ^ 1)


class PieceType(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return _TYPE_LETTERS[self]


_TYPE_LETTERS = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_TYPES = {v: k for k, v in _TYPE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    kind: PieceType
    color: Color

    @property
    def symbol(self) -> str:
        letter = self.kind.letter
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        kind = _LETTER_TYPES.get(symbol.upper()) if len(symbol) == 1 else None
        if kind is None:
            raise InvalidPieceError(f"Invalid piece symbol: {symbol!r}")
        color = Color.WHITE if symbol.isupper() else Color.BLACK
        return cls(kind, color)

    def is_opponent_of(self, side: Color) -> bool:
        return self.color != side

    def __str__(self) -> str:
        return self.symbol


def symbol_of(piece: Piece | None) -> str:
    return EMPTY_SYMBOL if piece is None else piece.symbol


def piece_from_symbol(symbol: str) -> Piece | None:
    """Decode one board symbol; ``.`` is an empty square."""
    if symbol == EMPTY_SYMBOL:
        return None
    return Piece.from_symbol(symbol)
