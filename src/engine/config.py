"""
ゲームのシナリオ設定（pydantic モデル）

    config = load_config("scenario.json")
    state = config.to_game_state()
"""

from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .board import DEFAULT_DIMENSION
from .game_state import GameState
from .initial_setup import STANDARD_STACK_NAMES, STANDARD_TROOPS, new_game, troop_by_name
from .position import parse_label
from .troops import GUARDS_REQUIRED

# 列を a-z で表記するため
MAX_DIMENSION = 26


class GameConfig(BaseModel):
    """ゲームの初期条件"""
    dimension: int = Field(default=DEFAULT_DIMENSION, ge=2, le=MAX_DIMENSION)
    mountains: List[str] = Field(default_factory=list)
    blue_stack: List[str] = Field(default_factory=lambda: list(STANDARD_STACK_NAMES))
    orange_stack: List[str] = Field(default_factory=lambda: list(STANDARD_STACK_NAMES))
    guards: int = Field(default=GUARDS_REQUIRED, ge=0, le=GUARDS_REQUIRED)

    @field_validator("blue_stack", "orange_stack")
    @classmethod
    def check_troop_names(cls, names: List[str]) -> List[str]:
        unknown = [name for name in names if name not in STANDARD_TROOPS]
        if unknown:
            raise ValueError(f"Unknown troops: {', '.join(unknown)}")
        return names

    @model_validator(mode="after")
    def check_mountains(self) -> 'GameConfig':
        for label in self.mountains:
            i, j = parse_label(label)
            if not (0 <= i < self.dimension and 0 <= j < self.dimension):
                raise ValueError(f"Mountain outside the board: {label}")
        return self

    @classmethod
    def from_json(cls, text: str) -> 'GameConfig':
        return cls.model_validate_json(text)

    def to_game_state(self) -> GameState:
        """設定から初期状態を作成"""
        return new_game(
            dimension=self.dimension,
            mountains=self.mountains,
            blue_stack=[troop_by_name(name) for name in self.blue_stack],
            orange_stack=[troop_by_name(name) for name in self.orange_stack],
            guards=self.guards,
        )


def load_config(path: Union[str, Path]) -> GameConfig:
    """JSON ファイルから設定を読み込む"""
    return GameConfig.from_json(Path(path).read_text(encoding="utf-8"))
