"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """空の 8x8 盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board(8, 8, setup=False)


@pytest.fixture
def initial_board():
    """初期配置の 8x6（幅8・高さ6）盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board(8, 6)


@pytest.fixture
def game():
    """初期状態のゲーム（幅8・高さ6）を提供するフィクスチャ"""
    from src.engine import GameState
    return GameState(8, 6)


@pytest.fixture
def white_player():
    """白プレイヤー（先手）を提供するフィクスチャ"""
    from src.engine import Player
    return Player.WHITE


@pytest.fixture
def black_player():
    """黒プレイヤー（後手）を提供するフィクスチャ"""
    from src.engine import Player
    return Player.BLACK
