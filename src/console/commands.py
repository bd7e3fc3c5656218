"""
コンソール入力のコマンド解析
"""

from dataclasses import dataclass, field
from typing import List, Optional

HELP_TEXT = "\n".join([
    "Available commands:",
    "  move <from> <to>    Move a piece (e.g. move B1 C3)",
    "  select <square>     Highlight piece (e.g. select B1)",
    "  restart             Restart the match",
    "  exit                Exit the game",
    "  help                Show this list",
])

# ゲーム終了後も受け付けるコマンド
GAME_OVER_COMMANDS = ("restart", "exit")


@dataclass
class Command:
    """1行分の入力（コマンド名は小文字化済み）"""
    name: str
    args: List[str] = field(default_factory=list)


def parse_command(line: str) -> Optional[Command]:
    """入力行をコマンドに分解する（空行ならNone）"""
    parts = line.split()
    if not parts:
        return None
    return Command(name=parts[0].lower(), args=parts[1:])
