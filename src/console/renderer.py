"""
盤面とゲーム状態の文字列表現
"""

from typing import Dict, Optional, Sequence, Tuple

from ..engine import Board, GameState, MoveDetail, Piece, format_square

# 移動候補の表示記号
MOVE_MARK = "."
CAPTURE_MARK = "•"


def _move_marks(moves: Optional[Sequence[MoveDetail]]) -> Dict[Tuple[int, int], str]:
    marks = {}
    for move in moves or []:
        marks.setdefault(move.to_pos, CAPTURE_MARK if move.is_capture else MOVE_MARK)
    return marks


def render_board(
    board: Board,
    selected: Optional[Tuple[int, int]] = None,
    moves: Optional[Sequence[MoveDetail]] = None
) -> str:
    """
    盤面を文字列にする

    最上段を上に表示する。選択中のマスは [ ] で囲み、
    空の移動先には '.'、捕獲できる空の移動先（走者の着地点）には '•' を表示する。
    """
    marks = _move_marks(moves)
    border = "  +-" + "--" * board.width + "+"

    lines = ["", "   " + "".join(f" {chr(ord('A') + col)} " for col in range(board.width)), border]

    for row in reversed(range(board.height)):
        cells = []
        for col in range(board.width):
            piece = board.get_piece((row, col))
            content = str(piece) if piece is not None else marks.get((row, col), " ")
            if selected == (row, col):
                cells.append(f"[{content}]")
            else:
                cells.append(f" {content} ")
        lines.append(f"{row + 1:2}|" + "".join(cells) + "|")

    lines.append(border)
    lines.append("")
    return "\n".join(lines)


def render_turn_info(state: GameState) -> str:
    """手番、または勝敗の表示"""
    if state.game_over:
        if state.winner is not None:
            return "\n".join([
                f"{state.winner.name.capitalize()} wins! 🎉",
                'Type "restart" to play again or "exit" to leave.',
            ])
        return "Game over!"
    return f"Turn: {state.current_player.name.capitalize()}"


def format_move_list(moves: Sequence[MoveDetail]) -> str:
    return ", ".join(str(move) for move in moves)


def describe_selection(piece: Piece, position: Tuple[int, int], moves: Sequence[MoveDetail]) -> str:
    square = format_square(*position)
    if not moves:
        return f"Selected: {piece} at {square}. No available moves."
    return f"Selected: {piece} at {square}. Available moves: {format_move_list(moves)}"


def describe_move(
    piece: Optional[Piece],
    from_pos: Tuple[int, int],
    to_pos: Tuple[int, int],
    captured: Optional[Piece]
) -> str:
    text = f"Moved {piece if piece is not None else '?'} from {format_square(*from_pos)} to {format_square(*to_pos)}."
    if captured is not None:
        text += f" Captured {captured}."
    return text
