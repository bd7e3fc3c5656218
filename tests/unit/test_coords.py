"""
単体テスト: 座標表記の変換
"""

import pytest
from src.engine import parse_square, format_square, last_square, FormatError, RangeError, CoordinateError


class TestParseSquare:
    """座標表記 -> (row, col) のテストクラス"""

    @pytest.mark.parametrize("label,expected", [
        ("A1", (0, 0)),
        ("B1", (0, 1)),
        ("C3", (2, 2)),
        ("H6", (5, 7)),
        ("c3", (2, 2)),
        ("h6", (5, 7)),
    ])
    def test_valid_labels(self, label, expected):
        """正しい座標表記が変換されることを確認"""
        assert parse_square(label, 6, 8) == expected

    def test_two_digit_row(self):
        """2桁の行番号を扱えることを確認"""
        assert parse_square("L12", 12, 12) == (11, 11)

    @pytest.mark.parametrize("label", ["", "A", "7"])
    def test_too_short_is_format_error(self, label):
        """2文字未満は形式エラー"""
        with pytest.raises(FormatError):
            parse_square(label, 6, 8)

    @pytest.mark.parametrize("label", ["AB", "A-1", "A1x", "A 1", "A１"])
    def test_bad_row_is_format_error(self, label):
        """行番号が正の整数として読めない場合は形式エラー"""
        with pytest.raises(FormatError):
            parse_square(label, 6, 8)

    @pytest.mark.parametrize("label", ["A0", "A7", "A99"])
    def test_row_out_of_range(self, label):
        """行番号が0または高さを超える場合は範囲エラー"""
        with pytest.raises(RangeError):
            parse_square(label, 6, 8)

    @pytest.mark.parametrize("label", ["I1", "Z1", "11", "@1", "ß1", "ﬁ1"])
    def test_column_out_of_range(self, label):
        """列が幅を超える（またはA未満の）場合は範囲エラー"""
        with pytest.raises(RangeError):
            parse_square(label, 6, 8)

    def test_errors_are_value_errors(self):
        """座標エラーは ValueError としても捕捉できる"""
        with pytest.raises(ValueError):
            parse_square("Q9", 6, 8)
        assert issubclass(FormatError, CoordinateError)
        assert issubclass(RangeError, CoordinateError)


class TestFormatSquare:
    """(row, col) -> 座標表記 のテストクラス"""

    def test_format(self):
        assert format_square(0, 0) == "A1"
        assert format_square(2, 2) == "C3"
        assert format_square(11, 11) == "L12"

    def test_last_square(self):
        """盤面の右上隅"""
        assert last_square(6, 8) == "H6"
        assert last_square(12, 6) == "F12"
