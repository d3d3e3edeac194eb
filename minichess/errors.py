"""Exceptions raised by the engine core."""

from __future__ import annotations

from .constants import STATUS_EMPTY_SOURCE, STATUS_OUT_OF_RANGE


class EngineError(ValueError):
    """Base class for recoverable engine failures."""


class SquareOutOfRangeError(EngineError):
    status = STATUS_OUT_OF_RANGE

    def __init__(self, from_square: int, to_square: int):
        super().__init__(f"Square index out of range: from={from_square} to={to_square}")
        self.from_square = from_square
        self.to_square = to_square


class EmptySquareError(EngineError):
    status = STATUS_EMPTY_SOURCE

    def __init__(self, square: int):
        super().__init__(f"No piece on source square: {square}")
        self.square = square


class InvalidPieceError(EngineError):
    pass


class InvalidLayoutError(EngineError):
    pass
