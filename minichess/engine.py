"""Engine session: board, move buffer and random source behind one object."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from .board import Board
from .constants import DEFAULT_SEED, on_board
from .errors import EmptySquareError, SquareOutOfRangeError
from .movebuffer import MoveBuffer
from .movegen import generate_moves
from .pieces import Color

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def seed(self, a: int) -> None: ...

    def randrange(self, stop: int) -> int: ...


class Engine:
    """A single-caller chess position engine.

    All state lives on the instance. Nothing here is locked; hosts that
    share an engine between callers must serialize access themselves.
    """

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        rng: RandomSource | None = None,
        buffer: MoveBuffer | None = None,
    ):
        self.seed = seed
        self.board = Board()
        self.moves = buffer if buffer is not None else MoveBuffer()
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.reset()

    def reset(self) -> None:
        """Restore the start layout and reseed the random source."""
        self.board.reset()
        self.moves.clear()
        self._rng.seed(self.seed)
        logger.debug("engine reset (seed=%d)", self.seed)

    def get_board(self) -> Board:
        return self.board

    def get_moves(self) -> MoveBuffer:
        return self.moves

    def generate_moves(self, side: Color) -> int:
        if not isinstance(side, Color):
            raise TypeError(f"side must be a Color, got {type(side).__name__}")
        count = generate_moves(self.board, side, self.moves)
        if self.moves.truncated:
            logger.debug("move buffer full, dropped %d moves", self.moves.dropped)
        return count

    def apply_move(self, from_square: int, to_square: int) -> None:
        """Move the piece on ``from_square`` to ``to_square``.

        No legality or turn check is made; whatever stands on the target is
        overwritten.

        Raises:
            SquareOutOfRangeError: If either square is outside the board.
            EmptySquareError: If ``from_square`` holds no piece.
        """
        if not (on_board(from_square) and on_board(to_square)):
            raise SquareOutOfRangeError(from_square, to_square)

        moving = self.board.squares[from_square]
        if moving is None:
            raise EmptySquareError(from_square)

        self.board.squares[to_square] = moving
        self.board.squares[from_square] = None

    def random_ai(self, side: Color) -> int:
        """Play one uniformly chosen pseudo-legal move for ``side``.

        Returns the number of candidates, or 0 when ``side`` had none and the
        board was left untouched.
        """
        count = self.generate_moves(side)
        if count == 0:
            return 0
        move = self.moves[self._rng.randrange(count)]
        self.apply_move(move.from_square, move.to_square)
        logger.debug("random move %s out of %d", move, count)
        return count
