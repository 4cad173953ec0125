"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def factory():
    """4x4 の盤の位置ファクトリ"""
    from src.engine import PositionFactory
    return PositionFactory(4)


@pytest.fixture
def empty_board():
    """地形のない 4x4 の盤面"""
    from src.engine import Board
    return Board(4)


@pytest.fixture
def new_state():
    """標準のスタックで始まる新しいゲーム（青の手番）"""
    from src.engine.initial_setup import new_game
    return new_game()


@pytest.fixture
def opened_state(new_state, factory):
    """
    両陣営がリーダーと護衛2つを配置し終えた状態（青の手番）
    青: b1 ドレイク, a1/c1 クラブマン
    オレンジ: c4 ドレイク, d4/b4 クラブマン
    """
    state = new_state
    for label in ["b1", "c4", "a1", "d4", "c1", "b4"]:
        state = state.place_from_stack(factory.pos(label))
    return state


@pytest.fixture
def duel_drake():
    """表はスライド(0,1)、裏はストライク(1,1)だけのドレイク"""
    from src.engine import Troop, SlideAction, StrikeAction
    return Troop("Drake", [SlideAction(0, 1)], [StrikeAction(1, 1)])


@pytest.fixture
def duel_state(duel_drake):
    """駒がドレイク1つずつ、護衛なしの 4x4 のゲーム"""
    from src.engine.initial_setup import new_game
    return new_game(dimension=4, blue_stack=[duel_drake], orange_stack=[duel_drake], guards=0)
