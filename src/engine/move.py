"""
ドレイクの手（Move）を表現するモジュール
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .position import BoardPos, PositionFactory


class MoveType(Enum):
    """手の種類"""
    STEP_ONLY = auto()         # 移動のみ
    STEP_AND_CAPTURE = auto()  # 移動して駒を取る
    CAPTURE_ONLY = auto()      # その場で裏返って駒を取る（移動しない）
    PLACE_FROM_STACK = auto()  # スタックの先頭の駒を配置


@dataclass(frozen=True)
class Move:
    """ドレイクの一手を表すクラス"""
    move_type: MoveType
    target: BoardPos
    origin: Optional[BoardPos] = None  # 配置の場合は None

    def __str__(self):
        if self.move_type == MoveType.PLACE_FROM_STACK:
            return f"{self.move_type.name} -> {self.target}"
        return f"{self.origin} -> {self.target} ({self.move_type.name})"

    def execute(self, state: 'GameState') -> 'GameState':
        """
        手を適用した新しい GameState を返す
        不正な手なら GameState 側が InvalidArgumentError を送出する
        """
        if self.move_type == MoveType.STEP_ONLY:
            return state.step_only(self.origin, self.target)
        elif self.move_type == MoveType.STEP_AND_CAPTURE:
            return state.step_and_capture(self.origin, self.target)
        elif self.move_type == MoveType.CAPTURE_ONLY:
            return state.capture_only(self.origin, self.target)
        else:  # PLACE_FROM_STACK
            return state.place_from_stack(self.target)

    def to_dict(self) -> dict:
        """手を辞書形式に変換"""
        return {
            "type": self.move_type.name,
            "origin": str(self.origin) if self.origin is not None else None,
            "target": str(self.target),
        }

    @staticmethod
    def from_dict(data: dict, factory: PositionFactory) -> 'Move':
        """辞書形式から手を復元"""
        move_type = MoveType[data["type"]]
        origin = factory.pos(data["origin"]) if data.get("origin") else None
        target = factory.pos(data["target"])
        return Move(move_type=move_type, target=target, origin=origin)

    @staticmethod
    def create_step_only(origin: BoardPos, target: BoardPos) -> 'Move':
        """移動のみの手を作成"""
        return Move(MoveType.STEP_ONLY, target, origin)

    @staticmethod
    def create_step_and_capture(origin: BoardPos, target: BoardPos) -> 'Move':
        """移動して駒を取る手を作成"""
        return Move(MoveType.STEP_AND_CAPTURE, target, origin)

    @staticmethod
    def create_capture_only(origin: BoardPos, target: BoardPos) -> 'Move':
        """移動せずに駒を取る手を作成"""
        return Move(MoveType.CAPTURE_ONLY, target, origin)

    @staticmethod
    def create_place_from_stack(target: BoardPos) -> 'Move':
        """スタックから駒を配置する手を作成"""
        return Move(MoveType.PLACE_FROM_STACK, target)
