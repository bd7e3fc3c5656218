"""
座標表記（'C3' など）と盤面インデックス (row, col) の相互変換
"""

from typing import Tuple

from .errors import FormatError, RangeError


def parse_square(label: str, height: int, width: int) -> Tuple[int, int]:
    """
    座標表記を (row, col) に変換する

    1文字目が列（大文字小文字を区別しない、'A' = 0列目）、
    残りが1始まりの行番号。
    """
    if len(label) < 2:
        raise FormatError(f"Invalid coordinate format: {label}")

    col_char = label[0].upper()
    row_text = label[1:]
    if not (row_text.isascii() and row_text.isdigit()):
        raise FormatError(f"Invalid row number in coordinate: {label}")

    row_num = int(row_text)
    if row_num == 0 or row_num > height:
        raise RangeError(f"Row number {row_num} out of bounds (1-{height}).")

    # 大文字化で2文字以上になる文字（"ß" など）も列として扱わない
    col_idx = ord(col_char) - ord("A") if len(col_char) == 1 else -1
    if col_idx < 0 or col_idx >= width:
        raise RangeError(f"Column {col_char} out of bounds (A-{chr(ord('A') + width - 1)}).")

    return row_num - 1, col_idx


def format_square(row: int, col: int) -> str:
    """(row, col) を座標表記に変換する（例: (2, 2) -> 'C3'）"""
    return f"{chr(ord('A') + col)}{row + 1}"


def last_square(height: int, width: int) -> str:
    """盤面の右上隅の座標表記"""
    return format_square(height - 1, width - 1)
