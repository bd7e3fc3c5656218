"""
移動候補（MoveDetail）を表現するモジュール
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .coords import format_square


@dataclass(frozen=True)
class MoveDetail:
    """
    ある駒のある位置からの移動候補

    to_row, to_col: 移動先
    is_capture: 駒を取る手かどうか
    jumped_piece_coord: 走者が飛び越えて取る駒の位置（走者の捕獲時のみ）
    """
    to_row: int
    to_col: int
    is_capture: bool = False
    jumped_piece_coord: Optional[Tuple[int, int]] = None

    @property
    def to_pos(self) -> Tuple[int, int]:
        return (self.to_row, self.to_col)

    def __str__(self):
        return format_square(self.to_row, self.to_col)

    def __repr__(self):
        jumped = f", jumped={self.jumped_piece_coord}" if self.jumped_piece_coord else ""
        return f"MoveDetail(to={self.to_pos}, capture={self.is_capture}{jumped})"
