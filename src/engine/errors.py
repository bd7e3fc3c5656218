"""
ゲームエンジンの例外定義

エンジンの操作はすべて成功値を返すか、以下のいずれかの例外を送出する。
例外が送出された場合、盤面とゲーム状態は一切変更されていない。
"""


class GameError(Exception):
    """ゲームエンジンの例外の基底クラス"""
    pass


class CoordinateError(GameError, ValueError):
    """座標表記（例: 'C3'）が解釈できない"""
    pass


class FormatError(CoordinateError):
    """座標表記の形式が正しくない"""
    pass


class RangeError(CoordinateError):
    """座標が盤面の範囲外"""
    pass


class MoveError(GameError):
    """駒の選択・移動に関する例外の基底クラス"""
    pass


class NoPieceError(MoveError):
    """指定したマスに駒がない"""
    pass


class WrongColorError(MoveError):
    """相手の駒を選択・移動しようとした"""
    pass


class IllegalDestinationError(MoveError):
    """移動先が合法手に含まれていない"""
    pass


class SameSquareError(MoveError):
    """移動元と移動先が同じマス"""
    pass


class GameOverError(GameError):
    """ゲーム終了後に選択・移動しようとした"""
    pass
