"""Move record produced by the generator."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .pieces import Piece, piece_from_symbol, symbol_of

# from, to, captured: three packed bytes per record.
MOVE_STRUCT = struct.Struct("<BBc")


@dataclass(frozen=True, slots=True)
class Move:
    from_square: int
    to_square: int
    captured: Piece | None = None

    def to_bytes(self) -> bytes:
        return MOVE_STRUCT.pack(self.from_square, self.to_square, symbol_of(self.captured).encode("ascii"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Move:
        from_square, to_square, captured = MOVE_STRUCT.unpack(data)
        return cls(from_square, to_square, piece_from_symbol(captured.decode("ascii")))

    def __str__(self) -> str:
        suffix = f"x{symbol_of(self.captured)}" if self.captured is not None else ""
        return f"{self.from_square}-{self.to_square}{suffix}"
