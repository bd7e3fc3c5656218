"""
初期配置の定義
"""

from typing import List, Tuple

from .piece import Piece, Player, PieceType

# 自陣の段の端から並べる駒の順番
# 白は0行目の左端（A列）から、黒は最上段の右端から鏡像に並べる
INITIAL_LAYOUT = [
    PieceType.ROYAL,
    PieceType.RUNNER,
    PieceType.LEAPER,
]


def initial_placements(width: int, height: int) -> List[Tuple[Tuple[int, int], Piece]]:
    """
    初期配置の (位置, 駒) のリストを返す

    盤の幅が足りない駒は置かない（幅1で王、2で走者、3で跳馬まで）。
    """
    placements = []
    top_row = height - 1

    for index, piece_type in enumerate(INITIAL_LAYOUT):
        if width < index + 1:
            break
        placements.append(((0, index), Piece(piece_type, Player.WHITE)))
        placements.append(((top_row, width - 1 - index), Piece(piece_type, Player.BLACK)))

    return placements
