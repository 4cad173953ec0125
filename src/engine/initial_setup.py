"""
標準の駒の定義と初期状態の組み立て
"""

from typing import Dict, Iterable, List, Optional, Sequence

from .actions import ShiftAction, SlideAction, StrikeAction
from .army import Army
from .board import Board, BoardTile, DEFAULT_DIMENSION, TileAt
from .errors import ConfigurationError, InvalidArgumentError
from .game_state import GameState
from .piece import Troop
from .position import Offset2D
from .side import PlayingSide
from .troops import GUARDS_REQUIRED

# 動きは青の視点（y が正 = 前）で定義
DRAKE = Troop(
    "Drake",
    [SlideAction(1, 0), SlideAction(-1, 0)],
    [SlideAction(0, 1), SlideAction(0, -1)],
)

CLUBMAN = Troop(
    "Clubman",
    [ShiftAction(1, 0), ShiftAction(-1, 0), ShiftAction(0, 1), ShiftAction(0, -1)],
    [ShiftAction(1, 1), ShiftAction(-1, 1), ShiftAction(1, -1), ShiftAction(-1, -1)],
)

MONK = Troop(
    "Monk",
    [SlideAction(1, 1), SlideAction(-1, 1), SlideAction(1, -1), SlideAction(-1, -1)],
    [ShiftAction(1, 0), ShiftAction(-1, 0), ShiftAction(0, 1), ShiftAction(0, -1)],
)

SPEARMAN = Troop(
    "Spearman",
    [ShiftAction(0, 1), StrikeAction(1, 2), StrikeAction(-1, 2)],
    [ShiftAction(1, 1), ShiftAction(-1, 1), ShiftAction(0, -1)],
    avers_pivot=Offset2D(1, 2),
)

SWORDSMAN = Troop(
    "Swordsman",
    [StrikeAction(1, 1), StrikeAction(-1, 1), ShiftAction(1, 0), ShiftAction(-1, 0), ShiftAction(0, 1)],
    [ShiftAction(1, 0), ShiftAction(-1, 0), ShiftAction(0, -1)],
)

ARCHER = Troop(
    "Archer",
    [ShiftAction(1, 0), ShiftAction(-1, 0), ShiftAction(0, -1)],
    [ShiftAction(0, 1), StrikeAction(-1, 1), StrikeAction(1, 1), StrikeAction(0, 2)],
)

# 名前 -> 駒
STANDARD_TROOPS: Dict[str, Troop] = {
    troop.name: troop
    for troop in (DRAKE, CLUBMAN, MONK, SPEARMAN, SWORDSMAN, ARCHER)
}

# 標準のスタック（先頭から順に配置、先頭はリーダー）
STANDARD_STACK_NAMES = [
    "Drake", "Clubman", "Clubman", "Monk", "Spearman", "Swordsman", "Archer",
]


def troop_by_name(name: str) -> Troop:
    """名前から標準の駒を取得"""
    try:
        return STANDARD_TROOPS[name]
    except KeyError:
        raise ConfigurationError(f"Unknown troop: {name}", {"name": name}) from None


def standard_stack() -> List[Troop]:
    """標準のスタックを返す"""
    return [troop_by_name(name) for name in STANDARD_STACK_NAMES]


def build_board(dimension: int = DEFAULT_DIMENSION, mountains: Iterable[str] = ()) -> Board:
    """
    盤面を組み立てる
    mountains: 山を置く位置の表記（例: ["b2", "c3"]）
    """
    factory = Board(dimension).position_factory()
    tile_ats = []
    for label in mountains:
        try:
            pos = factory.pos(label)
        except InvalidArgumentError as e:
            raise ConfigurationError(e.message, {"label": label}) from e
        if not factory.contains(pos):
            raise ConfigurationError("Mountain outside the board", {"label": label})
        tile_ats.append(TileAt(pos, BoardTile.MOUNTAIN))

    return Board(dimension).with_tiles(*tile_ats)


def new_game(
    dimension: int = DEFAULT_DIMENSION,
    mountains: Iterable[str] = (),
    blue_stack: Optional[Sequence[Troop]] = None,
    orange_stack: Optional[Sequence[Troop]] = None,
    guards: int = GUARDS_REQUIRED,
) -> GameState:
    """
    新しいゲームを開始する
    スタックを省略した場合は標準のスタック、手番は青から
    """
    board = build_board(dimension, mountains)
    blue_army = Army.new(
        PlayingSide.BLUE,
        standard_stack() if blue_stack is None else blue_stack,
        guards_required=guards,
    )
    orange_army = Army.new(
        PlayingSide.ORANGE,
        standard_stack() if orange_stack is None else orange_stack,
        guards_required=guards,
    )
    return GameState(board, blue_army, orange_army)
