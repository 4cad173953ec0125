"""
単体テスト: 駒の動き（スライド・シフト・ストライク）のテスト
"""

import pytest
from src.engine import (
    Army, Board, BoardTile, GameState, Move, MoveType, PlayingSide, TileAt,
    SlideAction, ShiftAction, StrikeAction, Troop, TroopFace,
)


def make_state(factory, blue, orange, mountains=(), side=PlayingSide.BLUE):
    """
    指定された配置の状態を作る（護衛なし）
    blue / orange: [(表記, 駒), ...] 先頭がリーダー
    """
    board = Board(4).with_tiles(*[TileAt(factory.pos(m), BoardTile.MOUNTAIN) for m in mountains])
    blue_army = Army.new(PlayingSide.BLUE, [troop for _, troop in blue], guards_required=0)
    for label, _ in blue:
        blue_army = blue_army.place_from_stack(factory.pos(label))
    orange_army = Army.new(PlayingSide.ORANGE, [troop for _, troop in orange], guards_required=0)
    for label, _ in orange:
        orange_army = orange_army.place_from_stack(factory.pos(label))
    return GameState(board, blue_army, orange_army, side)


LEADER = Troop("Leader")


class TestSlideAction:
    """スライドのテストクラス"""

    def test_slides_until_edge(self, factory):
        state = make_state(factory, [("a1", LEADER)], [("d4", LEADER)])
        moves = SlideAction(0, 1).moves_from(factory.pos("a1"), PlayingSide.BLUE, state)

        assert moves == [
            Move.create_step_only(factory.pos("a1"), factory.pos("a2")),
            Move.create_step_only(factory.pos("a1"), factory.pos("a3")),
            Move.create_step_only(factory.pos("a1"), factory.pos("a4")),
        ]

    def test_slide_stops_with_capture(self, factory):
        """敵の駒で取る手を出して止まることを確認"""
        state = make_state(factory, [("a1", LEADER)], [("d4", LEADER), ("a3", LEADER)])
        moves = SlideAction(0, 1).moves_from(factory.pos("a1"), PlayingSide.BLUE, state)

        assert moves == [
            Move.create_step_only(factory.pos("a1"), factory.pos("a2")),
            Move.create_step_and_capture(factory.pos("a1"), factory.pos("a3")),
        ]

    def test_slide_blocked_by_own_troop_and_mountain(self, factory):
        state = make_state(factory, [("a1", LEADER), ("a3", LEADER)], [("d4", LEADER)],
                           mountains=["b2"])

        up = SlideAction(0, 1).moves_from(factory.pos("a1"), PlayingSide.BLUE, state)
        diagonal = SlideAction(1, 1).moves_from(factory.pos("a1"), PlayingSide.BLUE, state)

        assert [str(m.target) for m in up] == ["a2"]
        assert diagonal == []

    def test_slide_mirrored_for_orange(self, factory):
        state = make_state(factory, [("a1", LEADER)], [("d4", LEADER)], side=PlayingSide.ORANGE)
        moves = SlideAction(0, 1).moves_from(factory.pos("d4"), PlayingSide.ORANGE, state)
        assert [str(m.target) for m in moves] == ["d3", "d2", "d1"]


class TestShiftAction:
    """シフトのテストクラス"""

    def test_shift_to_empty(self, factory):
        state = make_state(factory, [("b2", LEADER)], [("d4", LEADER)])
        moves = ShiftAction(0, 1).moves_from(factory.pos("b2"), PlayingSide.BLUE, state)
        assert moves == [Move.create_step_only(factory.pos("b2"), factory.pos("b3"))]

    def test_shift_captures(self, factory):
        state = make_state(factory, [("b2", LEADER)], [("d4", LEADER), ("b3", LEADER)])
        moves = ShiftAction(0, 1).moves_from(factory.pos("b2"), PlayingSide.BLUE, state)
        assert moves == [Move.create_step_and_capture(factory.pos("b2"), factory.pos("b3"))]

    def test_shift_off_board(self, factory):
        state = make_state(factory, [("a1", LEADER)], [("d4", LEADER)])
        assert ShiftAction(-1, 0).moves_from(factory.pos("a1"), PlayingSide.BLUE, state) == []


class TestStrikeAction:
    """ストライクのテストクラス"""

    def test_strike_only_captures(self, factory):
        state = make_state(factory, [("b2", LEADER)], [("d4", LEADER), ("c3", LEADER)])

        hit = StrikeAction(1, 1).moves_from(factory.pos("b2"), PlayingSide.BLUE, state)
        miss = StrikeAction(-1, 1).moves_from(factory.pos("b2"), PlayingSide.BLUE, state)

        assert hit == [Move.create_capture_only(factory.pos("b2"), factory.pos("c3"))]
        assert miss == [], "空のマスにはストライクできません"

    def test_strike_does_not_jump_check(self, factory):
        """ストライクは途中のマスを見ない"""
        state = make_state(factory, [("a1", LEADER), ("a2", LEADER)],
                           [("d4", LEADER), ("a3", LEADER)])
        moves = StrikeAction(0, 2).moves_from(factory.pos("a1"), PlayingSide.BLUE, state)
        assert [m.move_type for m in moves] == [MoveType.CAPTURE_ONLY]


class TestTroopTileMoves:
    """面ごとの動きの連結のテストクラス"""

    def test_moves_follow_face_and_action_order(self, factory):
        troop = Troop(
            "Test",
            [ShiftAction(1, 0), SlideAction(0, 1)],
            [StrikeAction(1, 1)],
        )
        state = make_state(factory, [("a1", troop)], [("d4", LEADER), ("b2", LEADER)])
        tile = state.army(PlayingSide.BLUE).board_troops.at(factory.pos("a1"))

        assert [str(m.target) for m in tile.moves_from(factory.pos("a1"), state)] == [
            "b1", "a2", "a3", "a4",
        ]

        flipped = tile.flipped()
        assert flipped.face == TroopFace.REVERS
        assert flipped.moves_from(factory.pos("a1"), state) == [
            Move.create_capture_only(factory.pos("a1"), factory.pos("b2")),
        ]
