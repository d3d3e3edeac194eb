"""Pseudo-legal move generation.

Moves are appended in square-scan order and, within a square, in the fixed
delta order of each rule. Random selection relies on that order being stable.
"""

from __future__ import annotations

from typing import Callable

from .board import Board
from .constants import BOARD_SQUARES, file_of, on_board, rank_of
from .move import Move
from .movebuffer import MoveBuffer
from .pieces import Color, PieceType

KNIGHT_JUMPS = (17, 15, 10, 6, -17, -15, -10, -6)
KING_DELTAS = (-9, -8, -7, -1, 1, 7, 8, 9)
ROOK_DIRS = (-8, 8, -1, 1)
BISHOP_DIRS = (-9, -7, 7, 9)


def _is_opponent(board: Board, square: int, side: Color) -> bool:
    piece = board.piece_on(square)
    return piece is not None and piece.is_opponent_of(side)


def _is_free_or_opponent(board: Board, square: int, side: Color) -> bool:
    return board.is_empty(square) or _is_opponent(board, square, side)


def _push(board: Board, buffer: MoveBuffer, from_sq: int, to_sq: int) -> None:
    buffer.push(Move(from_sq, to_sq, board.piece_on(to_sq)))


def generate_pawn_moves(board: Board, square: int, side: Color, buffer: MoveBuffer) -> None:
    direction = -8 if side == Color.WHITE else 8
    one_step = square + direction

    if on_board(one_step) and board.is_empty(one_step):
        _push(board, buffer, square, one_step)

    # Only the target file is checked for wrap, not the file delta.
    attack_left = one_step - 1
    if on_board(attack_left) and file_of(attack_left) != 7 and _is_opponent(board, attack_left, side):
        _push(board, buffer, square, attack_left)

    attack_right = one_step + 1
    if on_board(attack_right) and file_of(attack_right) != 0 and _is_opponent(board, attack_right, side):
        _push(board, buffer, square, attack_right)


def generate_knight_moves(board: Board, square: int, side: Color, buffer: MoveBuffer) -> None:
    for jump in KNIGHT_JUMPS:
        target = square + jump
        if not on_board(target):
            continue
        file_diff = abs(file_of(target) - file_of(square))
        rank_diff = abs(rank_of(target) - rank_of(square))
        if (file_diff, rank_diff) not in ((1, 2), (2, 1)):
            continue
        if _is_free_or_opponent(board, target, side):
            _push(board, buffer, square, target)


def generate_king_moves(board: Board, square: int, side: Color, buffer: MoveBuffer) -> None:
    for delta in KING_DELTAS:
        target = square + delta
        if not on_board(target):
            continue
        if abs(file_of(target) - file_of(square)) > 1 or abs(rank_of(target) - rank_of(square)) > 1:
            continue
        if _is_free_or_opponent(board, target, side):
            _push(board, buffer, square, target)


def _slide(
    board: Board,
    square: int,
    side: Color,
    buffer: MoveBuffer,
    direction: int,
    wrapped: Callable[[int, int], bool],
) -> None:
    current = square
    while True:
        target = current + direction
        if not on_board(target) or wrapped(current, target):
            return
        if board.is_empty(target):
            _push(board, buffer, square, target)
            current = target
            continue
        if _is_opponent(board, target, side):
            _push(board, buffer, square, target)
        return


def _rook_wrapped(direction: int) -> Callable[[int, int], bool]:
    if direction in (-1, 1):
        return lambda current, target: rank_of(target) != rank_of(current)
    return lambda current, target: False


def _bishop_wrapped(current: int, target: int) -> bool:
    return abs(file_of(target) - file_of(current)) != 1


def generate_rook_moves(board: Board, square: int, side: Color, buffer: MoveBuffer) -> None:
    for direction in ROOK_DIRS:
        _slide(board, square, side, buffer, direction, _rook_wrapped(direction))


def generate_bishop_moves(board: Board, square: int, side: Color, buffer: MoveBuffer) -> None:
    for direction in BISHOP_DIRS:
        _slide(board, square, side, buffer, direction, _bishop_wrapped)


PieceRule = Callable[[Board, int, Color, MoveBuffer], None]

# Queen has no rule: a queen on the board contributes no moves. This is
# inherited behavior and is kept as-is.
PIECE_RULES: dict[PieceType, PieceRule] = {
    PieceType.PAWN: generate_pawn_moves,
    PieceType.KNIGHT: generate_knight_moves,
    PieceType.BISHOP: generate_bishop_moves,
    PieceType.ROOK: generate_rook_moves,
    PieceType.KING: generate_king_moves,
}


def generate_moves(board: Board, side: Color, buffer: MoveBuffer) -> int:
    """Rebuild ``buffer`` with every pseudo-legal move for ``side``.

    Returns the number of moves stored, which never exceeds the buffer
    capacity; moves past capacity are dropped.
    """
    buffer.clear()
    for square in range(BOARD_SQUARES):
        piece = board.piece_on(square)
        if piece is None or piece.color != side:
            continue
        rule = PIECE_RULES.get(piece.kind)
        if rule is not None:
            rule(board, square, side, buffer)
    return len(buffer)
