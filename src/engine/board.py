"""
盤面を管理するモジュール

盤面は height x width のマス目で、各マスには最大1つの駒が置かれる。
駒ごとの合法手の生成と、手の実行もここで扱う。
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .coords import format_square
from .errors import (
    IllegalDestinationError,
    NoPieceError,
    SameSquareError,
    WrongColorError,
)
from .initial_setup import initial_placements
from .move import MoveDetail
from .piece import Piece, Player, PieceType

logger = logging.getLogger(__name__)

# 盤面サイズの範囲（縦横それぞれ）
MIN_BOARD_SIZE = 6
MAX_BOARD_SIZE = 12

# 8方向（縦横斜め）
DIRECTIONS = [
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dr == 0 and dc == 0)
]

# 跳馬のL字移動
LEAPER_OFFSETS = [
    (1, 2), (1, -2), (-1, 2), (-1, -2),
    (2, 1), (2, -1), (-2, 1), (-2, -1),
]

# 走者の最大跳躍距離
RUNNER_MAX_DISTANCE = 3


class Board:
    """ゲームボードを表すクラス"""

    def __init__(self, width: int, height: int, setup: bool = True):
        for name, value in (("width", width), ("height", height)):
            if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
                raise ValueError(
                    f"Invalid board {name}: {value} ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})"
                )

        self.width = width
        self.height = height
        self.grid: List[List[Optional[Piece]]] = [
            [None for _ in range(width)]
            for _ in range(height)
        ]
        # 王の位置を記録
        self.royal_positions: Dict[Player, Optional[Tuple[int, int]]] = {
            Player.WHITE: None,
            Player.BLACK: None,
        }

        if setup:
            self.setup_pieces()

    def setup_pieces(self):
        """盤面を空にしてから初期配置を並べる"""
        for row in range(self.height):
            for col in range(self.width):
                self.grid[row][col] = None
        for player in self.royal_positions:
            self.royal_positions[player] = None

        for position, piece in initial_placements(self.width, self.height):
            self.add_piece(position, piece)

    def is_valid_position(self, position: Tuple[int, int]) -> bool:
        """位置が盤面内か確認"""
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def is_occupied(self, position: Tuple[int, int]) -> bool:
        """指定位置に駒があるか確認（盤外はFalse）"""
        return self.get_piece(position) is not None

    def get_piece(self, position: Tuple[int, int]) -> Optional[Piece]:
        """指定位置の駒を取得（盤外や空マスはNone）"""
        if not self.is_valid_position(position):
            return None
        row, col = position
        return self.grid[row][col]

    def add_piece(self, position: Tuple[int, int], piece: Piece) -> bool:
        """
        指定位置に駒を置く
        返り値: 盤外か既に駒がある場合はFalse
        """
        if not self.is_valid_position(position) or self.is_occupied(position):
            return False

        row, col = position
        self.grid[row][col] = piece

        if piece.is_royal:
            self.royal_positions[piece.owner] = position

        return True

    def remove_piece(self, position: Tuple[int, int]) -> Optional[Piece]:
        """指定位置の駒を取り除いて返す"""
        piece = self.get_piece(position)
        if piece is None:
            return None

        row, col = position
        self.grid[row][col] = None

        if piece.is_royal and self.royal_positions[piece.owner] == position:
            self.royal_positions[piece.owner] = None

        return piece

    def get_royal_position(self, player: Player) -> Optional[Tuple[int, int]]:
        """指定プレイヤーの王の位置を取得（取られていればNone）"""
        return self.royal_positions[player]

    def pieces(self) -> Iterator[Tuple[Tuple[int, int], Piece]]:
        """盤上の (位置, 駒) を行優先で列挙"""
        for row in range(self.height):
            for col in range(self.width):
                piece = self.grid[row][col]
                if piece is not None:
                    yield (row, col), piece

    # ------------------------------------------------------------------
    # 合法手の生成
    # ------------------------------------------------------------------

    def get_legal_moves(
        self,
        position: Tuple[int, int],
        piece: Optional[Piece] = None
    ) -> List[MoveDetail]:
        """
        指定位置の駒の移動候補を返す（盤面は変更しない）

        piece を省略した場合は盤上の駒を使う。駒がなければ空リスト。
        """
        if piece is None:
            piece = self.get_piece(position)
            if piece is None:
                return []

        if piece.piece_type == PieceType.ROYAL:
            offsets = DIRECTIONS
        elif piece.piece_type == PieceType.LEAPER:
            offsets = LEAPER_OFFSETS
        elif piece.piece_type == PieceType.RUNNER:
            return self._get_runner_moves(position, piece)
        else:
            raise ValueError(f"Unknown piece type: {piece.piece_type}")

        return self._get_landing_moves(position, piece, offsets)

    def _get_landing_moves(
        self,
        position: Tuple[int, int],
        piece: Piece,
        offsets: Sequence[Tuple[int, int]]
    ) -> List[MoveDetail]:
        """
        固定オフセットへの移動（王・跳馬）

        空マスへは通常移動、敵駒のマスへは着地して取る。味方の駒のマスには行けない。
        """
        row, col = position
        moves = []

        for dr, dc in offsets:
            target = (row + dr, col + dc)
            if not self.is_valid_position(target):
                continue

            target_piece = self.get_piece(target)
            if target_piece is None:
                moves.append(MoveDetail(target[0], target[1]))
            elif target_piece.owner != piece.owner:
                moves.append(MoveDetail(target[0], target[1], is_capture=True))

        return moves

    def _get_runner_moves(self, position: Tuple[int, int], piece: Piece) -> List[MoveDetail]:
        """
        走者の移動（8方向に1～3マス）

        着地点は空マスのみ。途中のマス（経路）に敵駒がちょうど1つあれば
        それを飛び越えて取る。経路に味方の駒か2つ目の敵駒があればその距離は不可。
        距離ごとに個別に判定するので、隣の敵駒を越えた2マス先・3マス先にも着地できる。
        """
        row, col = position
        moves = []

        for dr, dc in DIRECTIONS:
            for distance in range(1, RUNNER_MAX_DISTANCE + 1):
                target = (row + dr * distance, col + dc * distance)

                # 盤外に出たらこの方向を打ち切る
                if not self.is_valid_position(target):
                    break
                # 駒のあるマスには着地できない（より遠い距離は引き続き判定）
                if self.is_occupied(target):
                    continue

                jumped = None
                blocked = False
                for step in range(1, distance):
                    path_pos = (row + dr * step, col + dc * step)
                    path_piece = self.get_piece(path_pos)
                    if path_piece is None:
                        continue
                    if path_piece.owner == piece.owner or jumped is not None:
                        blocked = True
                        break
                    jumped = path_pos

                if blocked:
                    continue

                moves.append(MoveDetail(
                    target[0], target[1],
                    is_capture=jumped is not None,
                    jumped_piece_coord=jumped
                ))

        return moves

    # ------------------------------------------------------------------
    # 手の実行
    # ------------------------------------------------------------------

    def move_piece(
        self,
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        player: Player,
        legal_moves: Sequence[MoveDetail]
    ) -> Optional[Piece]:
        """
        駒を移動する

        legal_moves: 移動元の駒について計算済みの移動候補
        返り値: 取った駒（なければNone）

        検証に失敗した場合は例外を送出し、盤面は変更しない。
        """
        moving_piece = self.get_piece(from_pos)
        if moving_piece is None:
            raise NoPieceError(f"Invalid move: There is no piece at {format_square(*from_pos)}.")

        if moving_piece.owner != player:
            raise WrongColorError("Invalid move: You can't move your opponent's piece.")

        if from_pos == to_pos:
            raise SameSquareError("Invalid move: Destination must be different from origin.")

        move_detail = next((m for m in legal_moves if m.to_pos == to_pos), None)
        if move_detail is None:
            raise IllegalDestinationError(
                f"Invalid move: {moving_piece} can't move to {format_square(*to_pos)}."
            )

        capture_pos = None
        if move_detail.is_capture:
            if moving_piece.piece_type == PieceType.RUNNER:
                # 走者は飛び越えた駒を取る（着地点は空マス）
                capture_pos = move_detail.jumped_piece_coord
                if capture_pos is None:
                    raise ValueError(f"Runner capture without jumped piece: {move_detail!r}")
            else:
                capture_pos = to_pos

        # 渡された候補が現在の盤面と食い違う場合も盤面を壊さない
        # （着地点は空か取る駒のマス、取る駒は相手の駒）
        stale = not self.is_valid_position(to_pos) or (
            self.is_occupied(to_pos) and capture_pos != to_pos
        )
        if capture_pos is not None:
            target_piece = self.get_piece(capture_pos)
            stale = stale or target_piece is None or target_piece.owner == player
        if stale:
            raise IllegalDestinationError(
                f"Invalid move: {moving_piece} can't move to {format_square(*to_pos)}."
            )

        self.remove_piece(from_pos)
        captured = self.remove_piece(capture_pos) if capture_pos is not None else None
        self.add_piece(to_pos, moving_piece)

        logger.debug(
            "%s %s: %s -> %s%s",
            player.name, moving_piece.piece_type.name,
            format_square(*from_pos), format_square(*to_pos),
            f" (captured {captured!r})" if captured else "",
        )
        return captured
