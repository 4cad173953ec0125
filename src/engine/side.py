"""
陣営と駒の面の定義
"""

from enum import Enum


class PlayingSide(Enum):
    """陣営の定義"""
    ORANGE = 0  # 先の陣営（盤の上側、最終行が初期行）
    BLUE = 1    # 後の陣営（盤の下側、1行目が初期行、最初の手番）

    @property
    def opponent(self) -> 'PlayingSide':
        """相手の陣営を返す"""
        return PlayingSide.BLUE if self == PlayingSide.ORANGE else PlayingSide.ORANGE

    def to_dict(self) -> str:
        return self.name


class TroopFace(Enum):
    """駒の面（表=AVERS, 裏=REVERS）"""
    AVERS = 0
    REVERS = 1

    def flipped(self) -> 'TroopFace':
        """裏返した面を返す"""
        return TroopFace.REVERS if self == TroopFace.AVERS else TroopFace.AVERS

    def to_dict(self) -> str:
        return self.name
