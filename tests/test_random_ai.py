import pytest

from minichess.board import Board
from minichess.constants import START_LAYOUT
from minichess.engine import Engine
from minichess.pieces import Color, Piece, PieceType


def _play(engine: Engine, plies: int) -> list[tuple[int, str]]:
    trace = []
    side = Color.WHITE
    for _ in range(plies):
        count = engine.random_ai(side)
        trace.append((count, engine.get_board().symbols()))
        side = side.opposite
    return trace


class FirstMoveRandom:
    def __init__(self) -> None:
        self.seeds: list[int] = []
        self.stops: list[int] = []

    def seed(self, a: int) -> None:
        self.seeds.append(a)

    def randrange(self, stop: int) -> int:
        self.stops.append(stop)
        return 0


def test_random_ai_is_reproducible_across_engines() -> None:
    first = Engine()
    second = Engine()
    first.reset()
    second.reset()

    assert _play(first, 40) == _play(second, 40)


def test_reset_reseeds_random_source() -> None:
    engine = Engine()
    first_run = _play(engine, 30)
    engine.reset()
    assert _play(engine, 30) == first_run


def test_random_ai_returns_candidate_count_and_moves_one_piece() -> None:
    engine = Engine()
    assert engine.random_ai(Color.WHITE) == 12

    symbols = engine.get_board().symbols()
    changed = [i for i in range(64) if symbols[i] != START_LAYOUT[i]]
    assert len(changed) == 2


def test_random_ai_without_moves_leaves_board_unchanged() -> None:
    engine = Engine()
    board = engine.get_board()
    board.load("." * 64)
    board[27] = Piece(PieceType.QUEEN, Color.WHITE)
    before = board.debug_state()

    assert engine.random_ai(Color.WHITE) == 0
    assert engine.random_ai(Color.BLACK) == 0
    assert board.debug_state() == before


def test_random_source_is_injectable() -> None:
    rng = FirstMoveRandom()
    engine = Engine(seed=99, rng=rng)
    assert rng.seeds == [99]

    assert engine.random_ai(Color.WHITE) == 12
    assert rng.stops == [12]
    board = engine.get_board()
    assert board[40] == Piece(PieceType.PAWN, Color.WHITE)
    assert board[48] is None

    engine.reset()
    assert rng.seeds == [99, 99]


def test_different_seeds_can_diverge() -> None:
    traces = {tuple(_play(Engine(seed=seed), 10)) for seed in range(5)}
    assert len(traces) > 1


def test_random_play_keeps_board_size() -> None:
    engine = Engine(seed=3)
    _play(engine, 200)
    assert isinstance(engine.get_board(), Board)
    assert len(engine.get_board().symbols()) == 64


def test_engine_rejects_bool_and_int_sides() -> None:
    engine = Engine()
    before = engine.get_board().debug_state()

    for side in (True, False, 0, 1):
        with pytest.raises(TypeError):
            engine.generate_moves(side)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            engine.random_ai(side)  # type: ignore[arg-type]

    assert engine.get_board().debug_state() == before
    engine.generate_moves(Color.WHITE)
    assert {m.from_square for m in engine.get_moves()} == set(range(48, 56)) | {57, 62}
