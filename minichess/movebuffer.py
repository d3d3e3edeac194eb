"""Fixed-capacity move buffer rebuilt by every generation call."""

from __future__ import annotations

from typing import Iterator, cast

from .constants import MOVE_BUFFER_SIZE
from .move import Move


class MoveBuffer:
    """Preallocated move slots plus a logical length.

    ``clear`` only rewinds the length; slots past it keep whatever an earlier
    generation wrote. Pushes beyond capacity are dropped and counted in
    ``dropped`` instead of growing the buffer.
    """

    __slots__ = ("capacity", "slots", "count", "dropped")

    def __init__(self, capacity: int = MOVE_BUFFER_SIZE):
        if capacity < 1:
            raise ValueError("Move buffer capacity must be >= 1")
        self.capacity = capacity
        self.slots: list[Move | None] = [None] * capacity
        self.count = 0
        self.dropped = 0

    def clear(self) -> None:
        self.count = 0
        self.dropped = 0

    def push(self, move: Move) -> bool:
        if self.count >= self.capacity:
            self.dropped += 1
            return False
        self.slots[self.count] = move
        self.count += 1
        return True

    @property
    def truncated(self) -> bool:
        return self.dropped > 0

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> Move:
        if index < 0:
            index += self.count
        if not 0 <= index < self.count:
            raise IndexError(f"Move index out of range: {index}")
        return cast(Move, self.slots[index])

    def __iter__(self) -> Iterator[Move]:
        for index in range(self.count):
            yield self.slots[index]

    def to_list(self) -> list[Move]:
        return list(self)
