"""
駒の種類・手番・駒そのものを定義するモジュール
"""

from dataclasses import dataclass
from enum import Enum, auto


class Player(Enum):
    """プレイヤーの定義"""
    WHITE = 0  # 先手（白）- 盤面の下側（0行目）から開始
    BLACK = 1  # 後手（黒）- 盤面の上側（最上段）から開始

    @property
    def opponent(self):
        """相手プレイヤーを返す"""
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class PieceType(Enum):
    """駒の種類"""
    RUNNER = auto()  # 走者 - 1～3マス跳躍、飛び越えた敵駒を取る
    LEAPER = auto()  # 跳馬 - L字移動、着地で取る
    ROYAL = auto()   # 王 - 周囲1マス、取られたら負け


# 駒の表示記号
PIECE_SYMBOLS = {
    (PieceType.ROYAL, Player.WHITE): "♔",
    (PieceType.RUNNER, Player.WHITE): "♖",
    (PieceType.LEAPER, Player.WHITE): "♘",
    (PieceType.ROYAL, Player.BLACK): "♚",
    (PieceType.RUNNER, Player.BLACK): "♜",
    (PieceType.LEAPER, Player.BLACK): "♞",
}


@dataclass(frozen=True)
class Piece:
    """
    駒を表す不変の値

    同じ駒オブジェクトを複数のマスで共有してもよい（書き換えられないため）。
    """
    piece_type: PieceType
    owner: Player

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[(self.piece_type, self.owner)]

    @property
    def is_royal(self) -> bool:
        return self.piece_type == PieceType.ROYAL

    def __str__(self):
        """駒の文字列表現（例: '♖'）"""
        return self.symbol

    def __repr__(self):
        return f"Piece({self.piece_type.name}, {self.owner.name})"
