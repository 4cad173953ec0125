"""
盤上の駒（TroopTile）と、陣営ごとの盤上の駒の管理（BoardTroops）

BoardTroops は不変。配置・移動・裏返し・除去は全て新しいインスタンスを返す。
フェーズはリーダーの位置と護衛の数から導出し、状態として保存しない。
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set

from .errors import InvalidArgumentError, InvalidStateError
from .move import Move
from .piece import Troop
from .position import BoardPos, OFF_BOARD, TilePos
from .side import PlayingSide, TroopFace

# リーダーの周りに置く護衛の数
GUARDS_REQUIRED = 2


@dataclass(frozen=True)
class TroopTile:
    """駒が置かれたマス（駒・陣営・面）"""
    troop: Troop
    side: PlayingSide
    face: TroopFace

    def can_step_on(self) -> bool:
        """駒のいるマスには移動できない"""
        return False

    def has_troop(self) -> bool:
        return True

    def moves_from(self, pos: BoardPos, state: 'GameState') -> List[Move]:
        """
        この駒の現在の面の動きを順に評価し、候補手を連結して返す
        """
        moves = []
        for action in self.troop.actions(self.face):
            moves.extend(action.moves_from(pos, self.side, state))
        return moves

    def flipped(self) -> 'TroopTile':
        """面を裏返した新しい TroopTile"""
        return TroopTile(self.troop, self.side, self.face.flipped())

    def __str__(self):
        prefix = 'b' if self.side == PlayingSide.BLUE else 'o'
        return f"{prefix}{self.troop.name}{'' if self.face == TroopFace.AVERS else '*'}"

    def to_dict(self) -> dict:
        return {
            "troop": self.troop.to_dict(),
            "side": self.side.to_dict(),
            "face": self.face.to_dict(),
        }


class TroopsPhase(Enum):
    """配置フェーズ（BoardTroops から導出される）"""
    NO_LEADER = auto()       # リーダー未配置
    PLACING_GUARDS = auto()  # 護衛の配置中
    OPEN = auto()            # 通常の手番


class BoardTroops:
    """一つの陣営の盤上の駒"""

    def __init__(
        self,
        playing_side: PlayingSide,
        troop_map: Optional[Mapping[BoardPos, TroopTile]] = None,
        leader_position: TilePos = OFF_BOARD,
        guards: int = 0,
        guards_required: int = GUARDS_REQUIRED,
    ):
        self._playing_side = playing_side
        self._troop_map: Dict[BoardPos, TroopTile] = dict(troop_map or {})
        self._leader_position = leader_position
        self._guards = guards
        self._guards_required = guards_required

    @property
    def playing_side(self) -> PlayingSide:
        return self._playing_side

    @property
    def leader_position(self) -> TilePos:
        """リーダーの位置（未配置なら OFF_BOARD）"""
        return self._leader_position

    @property
    def guards(self) -> int:
        return self._guards

    @property
    def guards_required(self) -> int:
        return self._guards_required

    @property
    def troop_map(self) -> Mapping[BoardPos, TroopTile]:
        """読み取り専用の位置 -> TroopTile の対応"""
        return MappingProxyType(self._troop_map)

    def at(self, pos: TilePos) -> Optional[TroopTile]:
        """指定位置の駒を取得（いなければ None）"""
        if pos is OFF_BOARD:
            return None
        return self._troop_map.get(pos)

    def troop_positions(self) -> Set[BoardPos]:
        """駒のいる位置の集合"""
        return set(self._troop_map)

    def is_leader_placed(self) -> bool:
        return self._leader_position is not OFF_BOARD

    def is_placing_guards(self) -> bool:
        """リーダー配置後、護衛が揃うまで"""
        return self.is_leader_placed() and self._guards < self._guards_required

    @property
    def phase(self) -> TroopsPhase:
        if not self.is_leader_placed():
            return TroopsPhase.NO_LEADER
        if self.is_placing_guards():
            return TroopsPhase.PLACING_GUARDS
        return TroopsPhase.OPEN

    def _copy(self, troop_map, leader_position, guards) -> 'BoardTroops':
        return BoardTroops(
            self._playing_side, troop_map, leader_position, guards, self._guards_required
        )

    def _check_open(self, action: str):
        if self.phase != TroopsPhase.OPEN:
            raise InvalidStateError(
                f"Cannot {action} troops while placing leader or guards",
                {"side": self._playing_side.name, "phase": self.phase.name},
            )

    def place_troop(self, troop: Troop, target: BoardPos) -> 'BoardTroops':
        """
        駒を表向きで配置する
        最初の配置はリーダー、護衛の配置中なら護衛の数が増える
        """
        if target is OFF_BOARD:
            raise InvalidArgumentError("Cannot place a troop off the board")
        if target in self._troop_map:
            raise InvalidArgumentError("Tile already occupied", {"target": target})

        new_troops = dict(self._troop_map)
        new_troops[target] = TroopTile(troop, self._playing_side, TroopFace.AVERS)

        new_leader_position = self._leader_position if self.is_leader_placed() else target
        new_guards = self._guards + 1 if self.is_placing_guards() else self._guards

        return self._copy(new_troops, new_leader_position, new_guards)

    def troop_step(self, origin: BoardPos, target: BoardPos) -> 'BoardTroops':
        """駒を移動して裏返す"""
        self._check_open("move")

        if origin not in self._troop_map:
            raise InvalidArgumentError("An origin position is empty", {"origin": origin})
        if target in self._troop_map:
            raise InvalidArgumentError("A target position is occupied", {"target": target})

        new_troops = dict(self._troop_map)
        tile = new_troops.pop(origin)
        new_troops[target] = tile.flipped()

        new_leader_position = target if self._leader_position == origin else self._leader_position

        return self._copy(new_troops, new_leader_position, self._guards)

    def troop_flip(self, origin: BoardPos) -> 'BoardTroops':
        """駒をその場で裏返す"""
        self._check_open("flip")

        if origin not in self._troop_map:
            raise InvalidArgumentError("An origin position is empty", {"origin": origin})

        new_troops = dict(self._troop_map)
        new_troops[origin] = new_troops[origin].flipped()

        return self._copy(new_troops, self._leader_position, self._guards)

    def remove_troop(self, target: BoardPos) -> 'BoardTroops':
        """駒を取り除く（リーダーなら位置を OFF_BOARD に戻す）"""
        self._check_open("remove")

        if target not in self._troop_map:
            raise InvalidArgumentError("The position is empty", {"target": target})

        new_troops = dict(self._troop_map)
        del new_troops[target]

        new_leader_position = OFF_BOARD if self._leader_position == target else self._leader_position

        return self._copy(new_troops, new_leader_position, self._guards)

    def __eq__(self, other):
        if not isinstance(other, BoardTroops):
            return NotImplemented
        return (
            self._playing_side == other._playing_side
            and self._troop_map == other._troop_map
            and self._leader_position == other._leader_position
            and self._guards == other._guards
            and self._guards_required == other._guards_required
        )

    def __hash__(self):
        return hash((self._playing_side, frozenset(self._troop_map.items()),
                     self._leader_position, self._guards))

    def __repr__(self):
        return (
            f"BoardTroops({self._playing_side.name}, leader={self._leader_position!r}, "
            f"guards={self._guards}, troops={len(self._troop_map)})"
        )

    def to_dict(self) -> dict:
        """
        辞書形式に変換
        troopMap は位置の表記をキーにして表記順に並べる
        """
        positions = sorted(self._troop_map, key=str)
        return {
            "side": self._playing_side.to_dict(),
            "leaderPosition": self._leader_position.to_dict(),
            "guards": self._guards,
            "troopMap": {str(pos): self._troop_map[pos].to_dict() for pos in positions},
        }
