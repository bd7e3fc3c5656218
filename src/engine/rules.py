"""
盤面全体にかかわるルール判定を行うモジュール
"""

from typing import Dict, List, Optional, Tuple

from .board import Board
from .move import MoveDetail
from .piece import Piece, Player, PieceType


class Rules:
    """ルールを管理するクラス"""

    @staticmethod
    def get_legal_moves(board: Board, player: Player) -> Dict[Tuple[int, int], List[MoveDetail]]:
        """
        指定プレイヤーの全ての駒の移動候補を取得
        返り値: {駒の位置: 移動候補のリスト}（移動候補のない駒は含まない）
        """
        legal_moves = {}

        for position, piece in board.pieces():
            if piece.owner != player:
                continue
            piece_moves = board.get_legal_moves(position, piece)
            if piece_moves:
                legal_moves[position] = piece_moves

        return legal_moves

    @staticmethod
    def is_royal_capture(captured: Optional[Piece]) -> bool:
        """取った駒が王か（王を取ればその時点で勝ち）"""
        return captured is not None and captured.piece_type == PieceType.ROYAL
