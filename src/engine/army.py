"""
陣営ごとの軍（盤上の駒 + 未配置の駒のスタック + 取った駒）
"""

from typing import Sequence, Tuple

from .errors import InvalidArgumentError, InvalidStateError
from .piece import Troop
from .position import BoardPos, OFF_BOARD, TilePos
from .side import PlayingSide
from .troops import BoardTroops, GUARDS_REQUIRED


class Army:
    """ドレイクの軍を表すクラス"""

    def __init__(
        self,
        board_troops: BoardTroops,
        stack: Sequence[Troop] = (),
        captured: Sequence[Troop] = (),
    ):
        self._board_troops = board_troops
        self._stack: Tuple[Troop, ...] = tuple(stack)  # 先頭が次に配置される駒
        self._captured: Tuple[Troop, ...] = tuple(captured)  # 取った順

    @classmethod
    def new(
        cls,
        playing_side: PlayingSide,
        stack: Sequence[Troop],
        guards_required: int = GUARDS_REQUIRED,
    ) -> 'Army':
        """盤上に駒のない新しい軍を作成"""
        return cls(BoardTroops(playing_side, guards_required=guards_required), stack, ())

    @property
    def side(self) -> PlayingSide:
        return self._board_troops.playing_side

    @property
    def board_troops(self) -> BoardTroops:
        return self._board_troops

    @property
    def stack(self) -> Tuple[Troop, ...]:
        return self._stack

    @property
    def captured(self) -> Tuple[Troop, ...]:
        return self._captured

    def place_from_stack(self, target: TilePos) -> 'Army':
        """スタックの先頭の駒を配置する"""
        if target is OFF_BOARD:
            raise InvalidArgumentError("Cannot place a troop off the board")

        if not self._stack:
            raise InvalidStateError("The stack is empty", {"side": self.side.name})

        if self._board_troops.at(target) is not None:
            raise InvalidStateError("Tile already occupied", {"target": target})

        return Army(
            self._board_troops.place_troop(self._stack[0], target),
            self._stack[1:],
            self._captured,
        )

    def troop_step(self, origin: BoardPos, target: BoardPos) -> 'Army':
        return Army(self._board_troops.troop_step(origin, target), self._stack, self._captured)

    def troop_flip(self, origin: BoardPos) -> 'Army':
        return Army(self._board_troops.troop_flip(origin), self._stack, self._captured)

    def remove_troop(self, target: BoardPos) -> 'Army':
        return Army(self._board_troops.remove_troop(target), self._stack, self._captured)

    def capture(self, troop: Troop) -> 'Army':
        """取った敵の駒を記録する"""
        return Army(self._board_troops, self._stack, self._captured + (troop,))

    def __eq__(self, other):
        if not isinstance(other, Army):
            return NotImplemented
        return (
            self._board_troops == other._board_troops
            and self._stack == other._stack
            and self._captured == other._captured
        )

    def __hash__(self):
        return hash((self._board_troops, self._stack, self._captured))

    def __repr__(self):
        return (
            f"Army({self.side.name}, stack={len(self._stack)}, "
            f"captured={len(self._captured)}, {self._board_troops!r})"
        )

    def to_dict(self) -> dict:
        return {
            "boardTroops": self._board_troops.to_dict(),
            "stack": [troop.to_dict() for troop in self._stack],
            "captured": [troop.to_dict() for troop in self._captured],
        }
