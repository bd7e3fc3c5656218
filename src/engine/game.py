"""
1局分のゲーム状態を管理するモジュール

状態は「進行中（手番プレイヤー）」と「終了（勝者）」の2つ。
終了後は restart 以外の操作を受け付けない。
"""

import logging
from typing import List, Optional, Tuple

from .board import Board
from .config import GameConfig
from .coords import format_square
from .errors import GameOverError, NoPieceError, WrongColorError
from .move import MoveDetail
from .piece import Piece, Player
from .rules import Rules

logger = logging.getLogger(__name__)


class GameState:
    """ゲームの状態を管理するクラス"""

    def __init__(self, width: int, height: int):
        self.config = GameConfig(width=width, height=height)
        self.board = Board(self.config.width, self.config.height)
        self.current_player = Player.WHITE
        self.selected_square: Optional[Tuple[int, int]] = None
        self.available_moves: Optional[List[MoveDetail]] = None
        self.game_over = False
        self.winner: Optional[Player] = None

    def restart(self, width: Optional[int] = None, height: Optional[int] = None):
        """
        盤面を作り直して初期状態に戻す
        サイズを省略した場合は現在のサイズを使う
        """
        config = GameConfig(
            width=self.config.width if width is None else width,
            height=self.config.height if height is None else height,
        )
        self.config = config
        self.board = Board(config.width, config.height)
        self.current_player = Player.WHITE
        self.clear_selection()
        self.game_over = False
        self.winner = None
        logger.info("Game restarted on %dx%d board", config.width, config.height)

    def clear_selection(self):
        self.selected_square = None
        self.available_moves = None

    def switch_turn(self):
        """手番を交代（選択状態も解除する）"""
        self.current_player = self.current_player.opponent
        self.clear_selection()

    def _own_piece_at(self, position: Tuple[int, int], selecting: bool) -> Piece:
        piece = self.board.get_piece(position)
        prefix = "Invalid input" if selecting else "Invalid move"
        if piece is None:
            raise NoPieceError(f"{prefix}: There is no piece at {format_square(*position)}.")
        if piece.owner != self.current_player:
            if selecting:
                raise WrongColorError(
                    f"{prefix}: You cannot select a {piece.owner.name.lower()} piece "
                    f"on {self.current_player.name.capitalize()}'s turn."
                )
            raise WrongColorError(f"{prefix}: You can't move your opponent's piece.")
        return piece

    def select_piece(self, position: Tuple[int, int]) -> List[MoveDetail]:
        """
        手番プレイヤーの駒を選択し、その移動候補を記録して返す

        選択は表示用であり、move で受け付ける手を制限するものではない。
        """
        if self.game_over:
            raise GameOverError("The game is over.")

        piece = self._own_piece_at(position, selecting=True)
        moves = self.board.get_legal_moves(position, piece)

        self.selected_square = position
        self.available_moves = moves
        return moves

    def _moves_for(self, from_pos: Tuple[int, int]) -> List[MoveDetail]:
        """移動の検証に使う移動候補（選択中の駒ならキャッシュを使う）"""
        if self.selected_square == from_pos and self.available_moves is not None:
            return self.available_moves

        piece = self._own_piece_at(from_pos, selecting=False)
        return self.board.get_legal_moves(from_pos, piece)

    def attempt_move(self, from_pos: Tuple[int, int], to_pos: Tuple[int, int]) -> Optional[Piece]:
        """
        手番プレイヤーの駒を移動する
        返り値: 取った駒（なければNone）

        王を取った場合はゲーム終了（勝者は手番プレイヤー）、
        それ以外は手番を交代する。
        """
        if self.game_over:
            raise GameOverError("The game is over. Type 'restart' or 'exit'.")

        legal_moves = self._moves_for(from_pos)
        captured = self.board.move_piece(from_pos, to_pos, self.current_player, legal_moves)

        if Rules.is_royal_capture(captured):
            self.game_over = True
            self.winner = self.current_player
            self.clear_selection()
            logger.info("%s captured the royal and wins", self.current_player.name)
        else:
            self.switch_turn()

        return captured
