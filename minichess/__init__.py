"""Minimal pseudo-legal chess position engine."""

from .board import Board
from .bridge import ChessBridge
from .engine import Engine
from .move import Move
from .movebuffer import MoveBuffer
from .pieces import Color, Piece, PieceType

__all__ = ["Board", "ChessBridge", "Color", "Engine", "Move", "MoveBuffer", "Piece", "PieceType"]
