"""
ドレイクの駒（部隊）の定義を扱うモジュール
"""

from typing import Sequence, Tuple

from .position import Offset2D
from .side import TroopFace

# 回転の支点の既定値
DEFAULT_PIVOT = Offset2D(1, 1)


class Troop:
    """
    駒の定義
    名前と、面ごとの回転の支点・動き（TroopAction）のリストを持つ。
    不変で、盤上の全ての TroopTile から参照で共有される。
    """

    def __init__(
        self,
        name: str,
        avers_actions: Sequence['TroopAction'] = (),
        revers_actions: Sequence['TroopAction'] = (),
        avers_pivot: Offset2D = DEFAULT_PIVOT,
        revers_pivot: Offset2D = None,
    ):
        self._name = name
        self._avers_pivot = avers_pivot
        # 裏の支点を省略した場合は表と同じ
        self._revers_pivot = revers_pivot if revers_pivot is not None else avers_pivot
        self._avers_actions: Tuple['TroopAction', ...] = tuple(avers_actions)
        self._revers_actions: Tuple['TroopAction', ...] = tuple(revers_actions)

    @property
    def name(self) -> str:
        return self._name

    def pivot(self, face: TroopFace) -> Offset2D:
        """指定された面の回転の支点"""
        return self._avers_pivot if face == TroopFace.AVERS else self._revers_pivot

    def actions(self, face: TroopFace) -> Tuple['TroopAction', ...]:
        """指定された面で使える動き"""
        return self._avers_actions if face == TroopFace.AVERS else self._revers_actions

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Troop({self._name})"

    def to_dict(self) -> str:
        return self._name


__all__ = ['Troop', 'DEFAULT_PIVOT']
