"""
単体テスト: ゲーム設定（盤面サイズ）の検証
"""

import pytest
from pydantic import ValidationError

from src.engine import GameConfig, parse_dimension


class TestGameConfig:
    """設定のテストクラス"""

    def test_valid_config(self):
        config = GameConfig(width=6, height=12)
        assert config.width == 6
        assert config.height == 12

    @pytest.mark.parametrize("width,height", [(5, 8), (8, 13), (-1, 8)])
    def test_out_of_range(self, width, height):
        with pytest.raises(ValidationError):
            GameConfig(width=width, height=height)

    def test_config_is_frozen(self):
        config = GameConfig(width=8, height=8)
        with pytest.raises(ValidationError):
            config.width = 9


class TestParseDimension:
    """入力されたサイズの検証"""

    @pytest.mark.parametrize("text,expected", [("6", 6), (" 12 ", 12), ("8\n", 8)])
    def test_valid(self, text, expected):
        assert parse_dimension(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "5", "13", "0", "-7"])
    def test_invalid(self, text):
        with pytest.raises(ValidationError):
            parse_dimension(text)
