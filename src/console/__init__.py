"""
コンソール版ドライバ - パッケージ初期化
"""

from .cli import GameConsole, main, prompt_dimension
from .commands import Command, parse_command

__all__ = [
    'GameConsole',
    'main',
    'prompt_dimension',
    'Command',
    'parse_command',
]
