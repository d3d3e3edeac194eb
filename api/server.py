"""FastAPI host exposing engine sessions over HTTP."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from minichess.constants import DEFAULT_SEED, STATUS_OK
from minichess.engine import Engine
from minichess.errors import EmptySquareError, EngineError, InvalidLayoutError, SquareOutOfRangeError
from minichess.pieces import Color, symbol_of

from .sessions import InMemorySessionStore, Session

logger = logging.getLogger(__name__)


class SideRequest(BaseModel):
    white: bool = Field(default=True)


class ApplyRequest(BaseModel):
    # Squares travel as unsigned bytes; the engine rejects anything >= 64.
    from_square: int = Field(ge=0, le=255)
    to_square: int = Field(ge=0, le=255)


class BoardRequest(BaseModel):
    rows: list[str] = Field(min_length=8, max_length=8)


def _side(white: bool) -> Color:
    return Color.WHITE if white else Color.BLACK


def _board_payload(engine: Engine) -> dict:
    return {"board": engine.get_board().rows()}


def _moves_payload(engine: Engine, count: int) -> dict:
    moves = engine.get_moves()
    return {
        "count": count,
        "truncated": moves.truncated,
        "moves": [
            {"from": m.from_square, "to": m.to_square, "captured": symbol_of(m.captured)}
            for m in moves
        ],
    }


def create_app(seed: int = DEFAULT_SEED) -> FastAPI:
    app = FastAPI(title="Minichess Engine API", version="0.1.0")

    logging.basicConfig(level=logging.INFO)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = InMemorySessionStore(seed=seed)

    def _require(session_id: str) -> Session:
        session = store.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="session not found")
        return session

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/sessions")
    def create_session() -> dict:
        session_id, session = store.create()
        logger.info("session created: %s (%d active)", session_id, len(store))
        with session.lock:
            payload = _board_payload(session.engine)
        payload["session_id"] = session_id
        return payload

    @app.delete("/sessions/{session_id}")
    def delete_session(session_id: str) -> dict[str, str]:
        if not store.delete(session_id):
            raise HTTPException(status_code=404, detail="session not found")
        logger.info("session deleted: %s", session_id)
        return {"status": "deleted"}

    @app.get("/sessions/{session_id}/board")
    def get_board(session_id: str) -> dict:
        session = _require(session_id)
        with session.lock:
            return _board_payload(session.engine)

    @app.put("/sessions/{session_id}/board")
    def set_board(session_id: str, payload: BoardRequest) -> dict:
        session = _require(session_id)
        with session.lock:
            board = session.engine.get_board()
            try:
                if any(len(row) != 8 for row in payload.rows):
                    raise InvalidLayoutError("each board row must have 8 squares")
                board.load("".join(payload.rows))
            except EngineError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            return _board_payload(session.engine)

    @app.post("/sessions/{session_id}/reset")
    def reset(session_id: str) -> dict:
        session = _require(session_id)
        with session.lock:
            session.engine.reset()
            return _board_payload(session.engine)

    @app.post("/sessions/{session_id}/moves")
    def generate(session_id: str, payload: SideRequest) -> dict:
        session = _require(session_id)
        with session.lock:
            count = session.engine.generate_moves(_side(payload.white))
            return _moves_payload(session.engine, count)

    @app.post("/sessions/{session_id}/apply")
    def apply(session_id: str, payload: ApplyRequest) -> dict:
        session = _require(session_id)
        with session.lock:
            try:
                session.engine.apply_move(payload.from_square, payload.to_square)
            except (SquareOutOfRangeError, EmptySquareError) as exc:
                raise HTTPException(
                    status_code=400,
                    detail={"status": exc.status, "message": str(exc)},
                ) from exc
            response = _board_payload(session.engine)
        response["status"] = STATUS_OK
        return response

    @app.post("/sessions/{session_id}/random-ai")
    def random_ai(session_id: str, payload: SideRequest) -> dict:
        session = _require(session_id)
        with session.lock:
            count = session.engine.random_ai(_side(payload.white))
            response = _board_payload(session.engine)
        response["count"] = count
        response["moved"] = count > 0
        return response

    return app


app = create_app()
