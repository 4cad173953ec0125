"""
ドレイクのエンジンで使う例外の定義

    from src.engine.errors import InvalidArgumentError

    try:
        state = state.step_only(origin, target)
    except InvalidArgumentError as e:
        print(e.to_dict())
"""

from typing import Any, Dict, Optional

__all__ = [
    "DrakeError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UnsupportedOperationError",
    "ConfigurationError",
]


class DrakeError(Exception):
    """エンジンの例外の基底クラス"""
    code: str = "DRAKE_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """例外を辞書形式に変換（表示層用）"""
        return {
            "code": self.code,
            "message": self.message,
            "context": {k: str(v) for k, v in self.context.items()},
        }


class InvalidArgumentError(DrakeError, ValueError):
    """
    引数が前提条件を満たさない
    例: 盤外の位置、埋まっているマスへの移動、空のスタックからの配置
    """
    code = "INVALID_ARGUMENT"


class InvalidStateError(DrakeError, RuntimeError):
    """
    現在のフェーズではその操作自体が許されない
    例: 護衛の配置中に駒を動かす
    """
    code = "INVALID_STATE"


class UnsupportedOperationError(DrakeError, TypeError):
    """盤外の位置に対する幾何演算（呼び出し側のチェック漏れ）"""
    code = "UNSUPPORTED_OPERATION"


class ConfigurationError(DrakeError, ValueError):
    """シナリオの組み立てに失敗（不明な駒名など）"""
    code = "CONFIGURATION_ERROR"
