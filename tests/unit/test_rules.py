"""
単体テスト: 盤面全体のルール判定
"""

from src.engine import Player, PieceType, Piece, Rules


class TestRules:
    """ルール判定のテストクラス"""

    def test_get_legal_moves_returns_own_pieces_only(self, initial_board):
        """指定プレイヤーの駒の移動候補だけが返ることを確認"""
        legal_moves = Rules.get_legal_moves(initial_board, Player.WHITE)

        assert isinstance(legal_moves, dict)
        assert set(legal_moves) == {(0, 0), (0, 1), (0, 2)}
        for position in legal_moves:
            assert initial_board.get_piece(position).owner == Player.WHITE

    def test_get_legal_moves_matches_board(self, initial_board):
        legal_moves = Rules.get_legal_moves(initial_board, Player.BLACK)

        for position, moves in legal_moves.items():
            assert moves == initial_board.get_legal_moves(position)

    def test_pieces_without_moves_are_omitted(self, empty_board):
        """動けない駒は結果に含まれない"""
        empty_board.add_piece((0, 0), Piece(PieceType.ROYAL, Player.WHITE))
        for pos in [(0, 1), (1, 0), (1, 1)]:
            empty_board.add_piece(pos, Piece(PieceType.LEAPER, Player.WHITE))

        legal_moves = Rules.get_legal_moves(empty_board, Player.WHITE)

        assert (0, 0) not in legal_moves

    def test_is_royal_capture(self):
        assert Rules.is_royal_capture(Piece(PieceType.ROYAL, Player.BLACK))
        assert not Rules.is_royal_capture(Piece(PieceType.RUNNER, Player.BLACK))
        assert not Rules.is_royal_capture(None)
