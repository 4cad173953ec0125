"""
駒の動き（TroopAction）の定義

動きはオフセットを一つ持ち、起点・陣営・GameState から候補手を作る。
合法性の判断は全て GameState の can_step / can_capture に任せる。
オフセットは青の視点で書き、オレンジでは上下を反転して使う。
"""

from typing import List

from .move import Move
from .position import BoardPos, Offset2D, OFF_BOARD
from .side import PlayingSide


class TroopAction:
    """動きの基底クラス"""

    def __init__(self, offset_x, offset_y: int = None):
        if isinstance(offset_x, Offset2D):
            self._offset = offset_x
        else:
            self._offset = Offset2D(offset_x, offset_y)

    @property
    def offset(self) -> Offset2D:
        return self._offset

    def moves_from(self, origin: BoardPos, side: PlayingSide, state: 'GameState') -> List[Move]:
        raise NotImplementedError

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._offset == other._offset

    def __hash__(self):
        return hash((type(self).__name__, self._offset))

    def __repr__(self):
        return f"{type(self).__name__}({self._offset.x}, {self._offset.y})"


class SlideAction(TroopAction):
    """
    スライド: 同じ方向に進み続ける
    空いていれば移動の手を出して続行、敵の駒なら取る手を出して停止、
    それ以外（味方の駒、山、盤外）で停止
    """

    def moves_from(self, origin: BoardPos, side: PlayingSide, state: 'GameState') -> List[Move]:
        moves = []
        target = origin.step_by_playing_side(self._offset, side)

        while target is not OFF_BOARD:
            if state.can_step(origin, target):
                moves.append(Move.create_step_only(origin, target))
            elif state.can_capture(origin, target):
                moves.append(Move.create_step_and_capture(origin, target))
                break
            else:
                break

            target = target.step_by_playing_side(self._offset, side)

        return moves


class ShiftAction(TroopAction):
    """シフト: 一マスだけ移動する（敵の駒なら取る）"""

    def moves_from(self, origin: BoardPos, side: PlayingSide, state: 'GameState') -> List[Move]:
        target = origin.step_by_playing_side(self._offset, side)

        if state.can_step(origin, target):
            return [Move.create_step_only(origin, target)]
        if state.can_capture(origin, target):
            return [Move.create_step_and_capture(origin, target)]
        return []


class StrikeAction(TroopAction):
    """ストライク: 移動せずにその場で一マス先の敵の駒を取る"""

    def moves_from(self, origin: BoardPos, side: PlayingSide, state: 'GameState') -> List[Move]:
        target = origin.step_by_playing_side(self._offset, side)

        if state.can_capture(origin, target):
            return [Move.create_capture_only(origin, target)]
        return []
