"""
ドレイクのゲーム状態（遷移の状態機械）

GameState は不変。手を適用すると新しい GameState を返し、
前提条件を満たさない手は InvalidArgumentError で拒否する（元の状態はそのまま）。
"""

import json
import logging
from enum import Enum
from typing import Optional, Union

from .army import Army
from .board import Board, BoardTile
from .errors import InvalidArgumentError
from .position import BoardPos, OFF_BOARD, TilePos
from .side import PlayingSide
from .troops import TroopTile

logger = logging.getLogger(__name__)


class GameResult(Enum):
    """ゲームの結果"""
    IN_PLAY = "IN_PLAY"
    VICTORY = "VICTORY"
    DRAW = "DRAW"

    def to_dict(self) -> str:
        return self.value


class GameState:
    """ドレイクのゲーム状態を表すクラス"""

    def __init__(
        self,
        board: Board,
        blue_army: Army,
        orange_army: Army,
        side_on_turn: PlayingSide = PlayingSide.BLUE,
        result: GameResult = GameResult.IN_PLAY,
    ):
        self._board = board
        self._blue_army = blue_army
        self._orange_army = orange_army
        self._side_on_turn = side_on_turn
        self._result = result

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_on_turn(self) -> PlayingSide:
        return self._side_on_turn

    @property
    def result(self) -> GameResult:
        return self._result

    def army(self, side: PlayingSide) -> Army:
        return self._blue_army if side == PlayingSide.BLUE else self._orange_army

    @property
    def army_on_turn(self) -> Army:
        return self.army(self._side_on_turn)

    @property
    def army_not_on_turn(self) -> Army:
        return self.army(self._side_on_turn.opponent)

    @property
    def winner(self) -> Optional[PlayingSide]:
        """
        勝者を返す（VICTORY 以外は None）
        リーダーが盤上に残っている側が勝者。両方残っている（投了）場合は手番の側。
        """
        if self._result != GameResult.VICTORY:
            return None

        blue_alive = self._blue_army.board_troops.is_leader_placed()
        orange_alive = self._orange_army.board_troops.is_leader_placed()
        if blue_alive and not orange_alive:
            return PlayingSide.BLUE
        if orange_alive and not blue_alive:
            return PlayingSide.ORANGE
        return self._side_on_turn

    def tile_at(self, pos: BoardPos) -> Union[TroopTile, BoardTile, None]:
        """指定位置のマス（駒がいれば TroopTile、いなければ地形）"""
        orange_tile = self._orange_army.board_troops.at(pos)
        if orange_tile is not None:
            return orange_tile

        blue_tile = self._blue_army.board_troops.at(pos)
        if blue_tile is not None:
            return blue_tile

        return self._board.at(pos)

    # ------------------------------------------------------------------
    # 合法性の判定
    # ------------------------------------------------------------------

    def _can_step_from(self, origin: TilePos) -> bool:
        # どちらかの陣営が護衛の配置中なら誰も動けない
        if (self._result != GameResult.IN_PLAY
                or origin is OFF_BOARD
                or self._orange_army.board_troops.is_placing_guards()
                or self._blue_army.board_troops.is_placing_guards()):
            return False

        return self.army_on_turn.board_troops.at(origin) is not None

    def _can_step_to(self, target: TilePos) -> bool:
        if target is OFF_BOARD or self._result != GameResult.IN_PLAY:
            return False

        tile = self.tile_at(target)
        return tile is not None and tile.can_step_on()

    def _can_capture_on(self, target: TilePos) -> bool:
        if target is OFF_BOARD or self._result != GameResult.IN_PLAY:
            return False

        return self.army_not_on_turn.board_troops.at(target) is not None

    def can_step(self, origin: TilePos, target: TilePos) -> bool:
        """origin の駒が target へ移動できるか"""
        return self._can_step_from(origin) and self._can_step_to(target)

    def can_capture(self, origin: TilePos, target: TilePos) -> bool:
        """origin の駒が target の敵の駒を取れるか"""
        return self._can_step_from(origin) and self._can_capture_on(target)

    def can_place_from_stack(self, target: TilePos) -> bool:
        """
        スタックの先頭の駒を target に配置できるか

        - リーダー: 自陣の初期行（青は1行目、オレンジは最終行）
        - 護衛: リーダーの隣
        - それ以降: 自分の駒のいずれかの隣
        """
        if (target is OFF_BOARD
                or self._result != GameResult.IN_PLAY
                or not self.army_on_turn.stack
                or not self._can_step_to(target)):
            return False

        troops = self.army_on_turn.board_troops

        if not troops.is_leader_placed():
            home_row = 1 if self._side_on_turn == PlayingSide.BLUE else self._board.dimension
            return target.row == home_row

        if troops.is_placing_guards():
            return troops.leader_position in target.neighbours()

        return any(troops.at(pos) is not None for pos in target.neighbours())

    # ------------------------------------------------------------------
    # 遷移
    # ------------------------------------------------------------------

    def step_only(self, origin: BoardPos, target: BoardPos) -> 'GameState':
        """移動のみ"""
        if not self.can_step(origin, target):
            self._reject("step_only", origin=origin, target=target)

        logger.debug("%s steps %s -> %s", self._side_on_turn.name, origin, target)
        return self._create_new_game_state(
            self.army_not_on_turn,
            self.army_on_turn.troop_step(origin, target),
            GameResult.IN_PLAY,
        )

    def step_and_capture(self, origin: BoardPos, target: BoardPos) -> 'GameState':
        """移動して敵の駒を取る（リーダーを取れば勝利）"""
        if not self.can_capture(origin, target):
            self._reject("step_and_capture", origin=origin, target=target)

        captured, result = self._capture_target(target)
        logger.debug("%s steps %s -> %s capturing %s", self._side_on_turn.name, origin, target, captured)
        return self._create_new_game_state(
            self.army_not_on_turn.remove_troop(target),
            self.army_on_turn.troop_step(origin, target).capture(captured),
            result,
        )

    def capture_only(self, origin: BoardPos, target: BoardPos) -> 'GameState':
        """その場で裏返って敵の駒を取る"""
        if not self.can_capture(origin, target):
            self._reject("capture_only", origin=origin, target=target)

        captured, result = self._capture_target(target)
        logger.debug("%s at %s strikes %s capturing %s", self._side_on_turn.name, origin, target, captured)
        return self._create_new_game_state(
            self.army_not_on_turn.remove_troop(target),
            self.army_on_turn.troop_flip(origin).capture(captured),
            result,
        )

    def place_from_stack(self, target: BoardPos) -> 'GameState':
        """スタックの先頭の駒を配置"""
        if not self.can_place_from_stack(target):
            self._reject("place_from_stack", target=target)

        logger.debug("%s places %s at %s", self._side_on_turn.name, self.army_on_turn.stack[0], target)
        return self._create_new_game_state(
            self.army_not_on_turn,
            self.army_on_turn.place_from_stack(target),
            GameResult.IN_PLAY,
        )

    def resign(self) -> 'GameState':
        """投了（手番は相手に移る）"""
        logger.debug("%s resigns", self._side_on_turn.name)
        return self._create_new_game_state(
            self.army_not_on_turn, self.army_on_turn, GameResult.VICTORY
        )

    def draw(self) -> 'GameState':
        """引き分け（手番はそのまま）"""
        logger.debug("Game drawn on %s's turn", self._side_on_turn.name)
        return self._create_new_game_state(
            self.army_on_turn, self.army_not_on_turn, GameResult.DRAW
        )

    def _capture_target(self, target: BoardPos):
        troops = self.army_not_on_turn.board_troops
        captured = troops.at(target).troop
        result = GameResult.VICTORY if troops.leader_position == target else GameResult.IN_PLAY
        return captured, result

    def _reject(self, action: str, **positions):
        logger.debug("Rejected %s for %s: %s", action, self._side_on_turn.name, positions)
        raise InvalidArgumentError(f"Illegal {action}", positions)

    def _create_new_game_state(
        self, army_on_turn: Army, army_not_on_turn: Army, result: GameResult
    ) -> 'GameState':
        """新しい状態を作る（手番は army_on_turn の陣営になる）"""
        if army_on_turn.side == PlayingSide.BLUE:
            return GameState(self._board, army_on_turn, army_not_on_turn, PlayingSide.BLUE, result)
        return GameState(self._board, army_not_on_turn, army_on_turn, PlayingSide.ORANGE, result)

    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self._board == other._board
            and self._blue_army == other._blue_army
            and self._orange_army == other._orange_army
            and self._side_on_turn == other._side_on_turn
            and self._result == other._result
        )

    def __hash__(self):
        return hash((self._board, self._blue_army, self._orange_army,
                     self._side_on_turn, self._result))

    def __repr__(self):
        return f"GameState(on_turn={self._side_on_turn.name}, result={self._result.name})"

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換"""
        return {
            "result": self._result.to_dict(),
            "board": self._board.to_dict(),
            "blueArmy": self._blue_army.to_dict(),
            "orangeArmy": self._orange_army.to_dict(),
        }

    def to_json(self) -> str:
        """空白なしの JSON 文字列"""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
