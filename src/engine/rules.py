"""
ドレイクの合法手の列挙を行うモジュール
合法性の判断は GameState に任せ、ここでは候補を集めるだけ
"""

import logging
from typing import List

from .game_state import GameResult, GameState
from .move import Move
from .position import BoardPos

logger = logging.getLogger(__name__)


class Rules:
    """合法手の列挙を管理するクラス"""

    @staticmethod
    def get_legal_moves(state: GameState) -> List[Move]:
        """
        手番の陣営の合法手をすべて取得
        盤上の駒の手（起点の表記順）のあとにスタックからの配置の手が続く
        """
        legal_moves = []

        troops = state.army_on_turn.board_troops
        for pos in sorted(troops.troop_positions(), key=str):
            legal_moves.extend(Rules.board_moves(state, pos))

        legal_moves.extend(Rules.moves_from_stack(state))

        logger.debug("%d legal moves for %s", len(legal_moves), state.side_on_turn.name)
        return legal_moves

    @staticmethod
    def board_moves(state: GameState, pos: BoardPos) -> List[Move]:
        """指定位置にある手番の陣営の駒の合法手"""
        if state.result != GameResult.IN_PLAY:
            return []

        tile = state.army_on_turn.board_troops.at(pos)
        if tile is None:
            return []

        return tile.moves_from(pos, state)

    @staticmethod
    def moves_from_stack(state: GameState) -> List[Move]:
        """スタックの先頭の駒を配置できる全ての位置への手"""
        if state.result != GameResult.IN_PLAY or not state.army_on_turn.stack:
            return []

        factory = state.board.position_factory()
        return [
            Move.create_place_from_stack(pos)
            for pos in sorted(factory.all_positions(), key=str)
            if state.can_place_from_stack(pos)
        ]

    @staticmethod
    def is_game_over(state: GameState) -> bool:
        """ゲームが終了したか確認"""
        return state.result != GameResult.IN_PLAY
