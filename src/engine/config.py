"""
ゲーム設定（盤面サイズ）の定義と検証
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .board import MAX_BOARD_SIZE, MIN_BOARD_SIZE

BoardDimension = Annotated[int, Field(ge=MIN_BOARD_SIZE, le=MAX_BOARD_SIZE)]

_dimension_adapter = TypeAdapter(BoardDimension)


class GameConfig(BaseModel):
    """1局分の設定"""
    model_config = ConfigDict(frozen=True)

    width: BoardDimension
    height: BoardDimension


def parse_dimension(text: str) -> int:
    """
    入力された盤面サイズ（縦または横）を検証して返す
    範囲外や数値でない場合は pydantic.ValidationError
    """
    return _dimension_adapter.validate_python(text.strip())
