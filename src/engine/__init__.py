"""
ドレイクのゲームエンジン - パッケージ初期化
"""

from .side import PlayingSide, TroopFace
from .position import Offset2D, BoardPos, OFF_BOARD, PositionFactory, position_label, parse_label
from .piece import Troop
from .board import Board, BoardTile, TileAt, DEFAULT_DIMENSION
from .move import Move, MoveType
from .actions import TroopAction, SlideAction, ShiftAction, StrikeAction
from .troops import TroopTile, BoardTroops, TroopsPhase, GUARDS_REQUIRED
from .army import Army
from .game_state import GameState, GameResult
from .rules import Rules
from .errors import (
    DrakeError,
    InvalidArgumentError,
    InvalidStateError,
    UnsupportedOperationError,
    ConfigurationError,
)

__all__ = [
    'PlayingSide',
    'TroopFace',
    'Offset2D',
    'BoardPos',
    'OFF_BOARD',
    'PositionFactory',
    'position_label',
    'parse_label',
    'Troop',
    'Board',
    'BoardTile',
    'TileAt',
    'DEFAULT_DIMENSION',
    'Move',
    'MoveType',
    'TroopAction',
    'SlideAction',
    'ShiftAction',
    'StrikeAction',
    'TroopTile',
    'BoardTroops',
    'TroopsPhase',
    'GUARDS_REQUIRED',
    'Army',
    'GameState',
    'GameResult',
    'Rules',
    'DrakeError',
    'InvalidArgumentError',
    'InvalidStateError',
    'UnsupportedOperationError',
    'ConfigurationError',
]
