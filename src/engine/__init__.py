"""
ゲームエンジン - パッケージ初期化
"""

from .piece import Piece, Player, PieceType, PIECE_SYMBOLS
from .errors import (
    GameError,
    CoordinateError,
    FormatError,
    RangeError,
    MoveError,
    NoPieceError,
    WrongColorError,
    IllegalDestinationError,
    SameSquareError,
    GameOverError,
)
from .coords import parse_square, format_square, last_square
from .move import MoveDetail
from .board import Board, MIN_BOARD_SIZE, MAX_BOARD_SIZE
from .rules import Rules
from .config import GameConfig, BoardDimension, parse_dimension
from .game import GameState

__all__ = [
    'Piece',
    'Player',
    'PieceType',
    'PIECE_SYMBOLS',
    'GameError',
    'CoordinateError',
    'FormatError',
    'RangeError',
    'MoveError',
    'NoPieceError',
    'WrongColorError',
    'IllegalDestinationError',
    'SameSquareError',
    'GameOverError',
    'parse_square',
    'format_square',
    'last_square',
    'MoveDetail',
    'Board',
    'MIN_BOARD_SIZE',
    'MAX_BOARD_SIZE',
    'Rules',
    'GameConfig',
    'BoardDimension',
    'parse_dimension',
    'GameState',
]
