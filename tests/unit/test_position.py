"""
単体テスト: 座標とオフセットのテスト
"""

import pytest
from src.engine import (
    BoardPos, Offset2D, OFF_BOARD, PlayingSide, PositionFactory,
    UnsupportedOperationError, InvalidArgumentError, position_label, parse_label,
)


class TestBoardPos:
    """BoardPos のテストクラス"""

    def test_label(self, factory):
        """表記が列の文字と1始まりの行番号になることを確認"""
        assert str(factory.pos(0, 0)) == "a1"
        assert str(factory.pos(1, 3)) == "b4"
        assert factory.pos(2, 1).column == "c"
        assert factory.pos(2, 1).row == 2

    def test_equality_ignores_dimension(self):
        """同値判定に盤サイズは含まれないことを確認"""
        assert BoardPos(1, 2, 4) == BoardPos(1, 2, 8)
        assert hash(BoardPos(1, 2, 4)) == hash(BoardPos(1, 2, 8))
        assert BoardPos(1, 2, 4) != BoardPos(2, 1, 4)

    def test_step_inside_board(self, factory):
        """盤内への移動"""
        assert factory.pos("a1").step(Offset2D(1, 1)) == factory.pos("b2")
        assert factory.pos("b2").step(-1, 0) == factory.pos("a2")

    def test_step_needs_both_offsets(self, factory):
        """整数で呼ぶ場合は行方向の移動量も必要"""
        with pytest.raises(InvalidArgumentError):
            factory.pos("b2").step(1)

    @pytest.mark.parametrize("label,dx,dy", [
        ("a1", -1, 0),
        ("a1", 0, -1),
        ("d4", 1, 0),
        ("d4", 0, 1),
        ("b2", 3, 0),
    ])
    def test_step_outside_board(self, factory, label, dx, dy):
        """盤外への移動は OFF_BOARD になることを確認"""
        assert factory.pos(label).step(dx, dy) is OFF_BOARD

    @pytest.mark.parametrize("label,expected", [
        ("a1", 2),
        ("d4", 2),
        ("a4", 2),
        ("b1", 3),
        ("d2", 3),
        ("b2", 4),
        ("c3", 4),
    ])
    def test_neighbours_count(self, factory, label, expected):
        """角は2つ、辺は3つ、内側は4つの隣接位置を持つことを確認"""
        assert len(factory.pos(label).neighbours()) == expected

    def test_neighbours_are_orthogonal(self, factory):
        neighbours = factory.pos("b2").neighbours()
        assert neighbours == {factory.pos(label) for label in ["a2", "c2", "b1", "b3"]}

    def test_is_next_to(self, factory):
        """同じ行か列で隣り合うときだけ True"""
        b2 = factory.pos("b2")
        assert b2.is_next_to(factory.pos("b3"))
        assert b2.is_next_to(factory.pos("a2"))
        assert not b2.is_next_to(factory.pos("c3")), "斜めは隣ではありません"
        assert not b2.is_next_to(factory.pos("b4"))
        assert not b2.is_next_to(b2)
        assert not b2.is_next_to(OFF_BOARD)

    def test_step_by_playing_side(self, factory):
        """青はそのまま、オレンジは上下反転して進むことを確認"""
        b2 = factory.pos("b2")
        forward = Offset2D(0, 1)
        assert b2.step_by_playing_side(forward, PlayingSide.BLUE) == factory.pos("b3")
        assert b2.step_by_playing_side(forward, PlayingSide.ORANGE) == factory.pos("b1")
        assert b2.step_by_playing_side(Offset2D(1, 0), PlayingSide.ORANGE) == factory.pos("c2")


class TestOffBoard:
    """盤外の番兵のテストクラス"""

    def test_off_board_is_unequal_to_positions(self, factory):
        assert OFF_BOARD != factory.pos("a1")
        assert factory.pos("a1") != OFF_BOARD
        assert not OFF_BOARD.equals_to(0, 0)
        assert str(OFF_BOARD) == "off-board"

    @pytest.mark.parametrize("call", [
        lambda p: p.step(Offset2D(1, 0)),
        lambda p: p.step(1, 0),
        lambda p: p.neighbours(),
        lambda p: p.is_next_to(BoardPos(0, 0, 4)),
        lambda p: p.step_by_playing_side(Offset2D(0, 1), PlayingSide.BLUE),
        lambda p: p.i,
        lambda p: p.row,
    ])
    def test_geometric_operations_raise(self, call):
        """盤外の位置の幾何演算は UnsupportedOperationError"""
        with pytest.raises(UnsupportedOperationError):
            call(OFF_BOARD)


class TestPositionFactory:
    """位置の表記の変換のテストクラス"""

    def test_round_trip_all_positions(self):
        """全ての位置で表記の変換が往復することを確認"""
        factory = PositionFactory(8)
        for pos in factory.all_positions():
            assert factory.pos(str(pos)) == pos
        assert len(factory.all_positions()) == 64

    def test_pos_from_column_and_row(self, factory):
        assert factory.pos_from("c", 2) == factory.pos(2, 1)

    def test_label_helpers(self):
        assert position_label(0, 0) == "a1"
        assert position_label(25, 9) == "z10"
        assert parse_label("z10") == (25, 9)
        assert parse_label("B3") == (1, 2)

    @pytest.mark.parametrize("label", ["", "a", "1a", "a-1", "ab"])
    def test_invalid_labels(self, label):
        with pytest.raises(InvalidArgumentError):
            parse_label(label)

    def test_negative_dimension_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PositionFactory(-1)
