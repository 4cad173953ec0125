"""
ドレイクの盤面（地形）を管理するモジュール
盤面は不変で、地形の変更は新しい Board を返す
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from .errors import InvalidArgumentError
from .position import BoardPos, PositionFactory

# 盤面サイズの既定値
DEFAULT_DIMENSION = 4


class BoardTile(Enum):
    """地形のマス"""
    EMPTY = "empty"        # 何もない、踏める
    MOUNTAIN = "mountain"  # 山、踏めない

    def can_step_on(self) -> bool:
        """このマスに駒が移動できるか"""
        return self == BoardTile.EMPTY

    def has_troop(self) -> bool:
        """地形のマスに駒はいない"""
        return False

    def moves_from(self, pos: BoardPos, state) -> List['Move']:
        """地形からの手は存在しない"""
        return []

    def to_dict(self) -> str:
        return self.value


class TileAt(NamedTuple):
    """位置とそこに置く地形の組"""
    pos: BoardPos
    tile: BoardTile


class Board:
    """ドレイクの盤面（地形のみ、駒は Army が管理する）"""

    def __init__(self, dimension: int = DEFAULT_DIMENSION):
        self._dimension = dimension
        # tiles[i][j] = (列i, 行j) の地形
        self._tiles: Tuple[Tuple[BoardTile, ...], ...] = tuple(
            tuple(BoardTile.EMPTY for _ in range(dimension))
            for _ in range(dimension)
        )

    @property
    def dimension(self) -> int:
        return self._dimension

    def at(self, pos: BoardPos) -> Optional[BoardTile]:
        """指定位置の地形を取得（盤外の座標なら None）"""
        if not (0 <= pos.i < self._dimension and 0 <= pos.j < self._dimension):
            return None
        return self._tiles[pos.i][pos.j]

    def with_tiles(self, *ats: TileAt) -> 'Board':
        """
        指定位置の地形を置き換えた新しい盤面を返す
        元の盤面は変更しない（盤の外の位置は InvalidArgumentError）
        """
        tiles = [list(column) for column in self._tiles]
        for pos, tile in ats:
            if not (0 <= pos.i < self._dimension and 0 <= pos.j < self._dimension):
                raise InvalidArgumentError("Tile position outside the board", {"pos": repr(pos)})
            tiles[pos.i][pos.j] = tile

        new_board = Board.__new__(Board)
        new_board._dimension = self._dimension
        new_board._tiles = tuple(tuple(column) for column in tiles)
        return new_board

    def position_factory(self) -> PositionFactory:
        """この盤のサイズで位置を作るファクトリ"""
        return PositionFactory(self._dimension)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._dimension == other._dimension and self._tiles == other._tiles

    def __hash__(self):
        return hash((self._dimension, self._tiles))

    def __str__(self):
        """盤面の文字列表現（上が最終行）"""
        result = []
        for j in reversed(range(self._dimension)):
            row_str = f"{j + 1:>2} |"
            for i in range(self._dimension):
                row_str += " ^ |" if self._tiles[i][j] == BoardTile.MOUNTAIN else "   |"
            result.append(row_str)

        footer = "    " + "".join(f" {chr(ord('a') + i)}  " for i in range(self._dimension))
        result.append(footer)
        return "\n".join(result)

    def to_dict(self) -> dict:
        """
        盤面を辞書形式に変換
        tiles は外側が行、内側が列の順で平らに並べる
        """
        return {
            "dimension": self._dimension,
            "tiles": [
                self._tiles[i][j].to_dict()
                for j in range(self._dimension)
                for i in range(self._dimension)
            ],
        }
