"""
盤上の座標とオフセットを扱うモジュール

座標は (i, j) = (列, 行) の0始まり。
表記は列を 'a' から、行を 1 から数える（例: (0, 0) -> "a1", (1, 3) -> "b4"）。
"""

from dataclasses import dataclass, field
from typing import Set, Tuple, Union

from .errors import InvalidArgumentError, UnsupportedOperationError
from .side import PlayingSide


@dataclass(frozen=True)
class Offset2D:
    """符号付きの移動量 (x, y)"""
    x: int
    y: int

    def equals_to(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y

    def y_flipped(self) -> 'Offset2D':
        """上下を反転したオフセット（相手側から見た「前」）"""
        return Offset2D(self.x, -self.y)


def position_label(i: int, j: int) -> str:
    """
    座標を文字列に変換
    例: (0, 0) -> "a1", (2, 3) -> "c4"
    """
    return f"{chr(ord('a') + i)}{j + 1}"


def parse_label(label: str) -> Tuple[int, int]:
    """
    文字列を座標に変換
    例: "a1" -> (0, 0), "c4" -> (2, 3)
    """
    if len(label) < 2 or not label[0].isalpha() or not label[1:].isdigit():
        raise InvalidArgumentError(f"Invalid position string: {label}")

    i = ord(label[0].lower()) - ord('a')
    j = int(label[1:]) - 1
    return i, j


@dataclass(frozen=True)
class BoardPos:
    """
    盤上の位置
    同値判定とハッシュは (i, j) のみで行う（dimension は文脈情報）
    """
    i: int
    j: int
    dimension: int = field(compare=False)

    @property
    def column(self) -> str:
        return chr(ord('a') + self.i)

    @property
    def row(self) -> int:
        return self.j + 1

    def step(self, offset: Union[Offset2D, int], row_step: int = None) -> 'TilePos':
        """
        オフセット分だけ進んだ位置を返す
        盤外に出た場合は OFF_BOARD
        step(Offset2D(1, 0)) と step(1, 0) のどちらでも呼べる
        """
        if isinstance(offset, Offset2D):
            column_step, row_step = offset.x, offset.y
        else:
            if row_step is None:
                raise InvalidArgumentError("step(dx, dy) needs both steps", {"dx": offset})
            column_step = offset

        new_i = self.i + column_step
        new_j = self.j + row_step
        if 0 <= new_i < self.dimension and 0 <= new_j < self.dimension:
            return BoardPos(new_i, new_j, self.dimension)
        return OFF_BOARD

    def neighbours(self) -> Set['BoardPos']:
        """上下左右で盤内にある隣接位置（端や角では4つ未満）"""
        result = set()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            pos = self.step(dx, dy)
            if pos is not OFF_BOARD:
                result.add(pos)
        return result

    def is_next_to(self, pos: 'TilePos') -> bool:
        """同じ行か列で隣り合っているか"""
        if pos is OFF_BOARD:
            return False
        if self.i == pos.i and abs(self.j - pos.j) == 1:
            return True
        if self.j == pos.j and abs(self.i - pos.i) == 1:
            return True
        return False

    def step_by_playing_side(self, offset: Offset2D, side: PlayingSide) -> 'TilePos':
        """
        陣営から見た向きでオフセットを適用
        駒の動きは青の視点で定義し、オレンジは上下反転して使う
        """
        return self.step(offset) if side == PlayingSide.BLUE else self.step(offset.y_flipped())

    def equals_to(self, i: int, j: int) -> bool:
        return self.i == i and self.j == j

    def __str__(self):
        return position_label(self.i, self.j)

    def __repr__(self):
        return f"BoardPos({self})"

    def to_dict(self) -> str:
        return str(self)


class _OffBoard:
    """
    盤外を表す番兵
    同値判定と真偽を返す判定以外の操作は UnsupportedOperationError
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _unsupported(self, *args, **kwargs):
        raise UnsupportedOperationError("Position is off the board.")

    i = property(_unsupported)
    j = property(_unsupported)
    column = property(_unsupported)
    row = property(_unsupported)
    step = _unsupported
    neighbours = _unsupported
    is_next_to = _unsupported
    step_by_playing_side = _unsupported

    def equals_to(self, i: int, j: int) -> bool:
        return False

    def __str__(self):
        return "off-board"

    def __repr__(self):
        return "OFF_BOARD"

    def __reduce__(self):
        return (_OffBoard, ())

    def to_dict(self) -> str:
        return str(self)


OFF_BOARD = _OffBoard()

TilePos = Union[BoardPos, _OffBoard]


class PositionFactory:
    """指定された盤サイズの BoardPos を作るファクトリ"""

    def __init__(self, dimension: int):
        if dimension < 0:
            raise InvalidArgumentError("The dimension needs to be positive.")
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def pos(self, i: Union[int, str], j: int = None) -> BoardPos:
        """
        位置を作成
        pos(0, 0) と pos("a1") のどちらでも呼べる
        """
        if isinstance(i, str):
            i, j = parse_label(i)
        return BoardPos(i, j, self._dimension)

    def pos_from(self, column: str, row: int) -> BoardPos:
        """列の文字と1始まりの行番号から位置を作成"""
        return BoardPos(ord(column) - ord('a'), row - 1, self._dimension)

    def contains(self, pos: BoardPos) -> bool:
        """位置が盤内か確認"""
        return 0 <= pos.i < self._dimension and 0 <= pos.j < self._dimension

    def all_positions(self):
        """盤上の全位置（行ごと、各行は列順）"""
        return [
            BoardPos(i, j, self._dimension)
            for j in range(self._dimension)
            for i in range(self._dimension)
        ]
