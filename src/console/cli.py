"""
コンソール版のゲームドライバ

標準入力からコマンドを読み、エンジンを呼び出して結果を表示する。
入出力関数を差し替えられるので、テストではスクリプト化した入力で動かせる。
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from ..engine import (
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    CoordinateError,
    GameConfig,
    GameError,
    GameState,
    last_square,
    parse_dimension,
    parse_square,
)
from .commands import GAME_OVER_COMMANDS, HELP_TEXT, Command, parse_command
from .renderer import describe_move, describe_selection, render_board, render_turn_info

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

GAME_TITLE = "Unvoid Chess"


def prompt_dimension(prompt: str, input_func: InputFunc = input, output_func: OutputFunc = print) -> int:
    """範囲内の数値が入力されるまで盤面サイズを尋ねる"""
    while True:
        text = input_func(prompt)
        try:
            return parse_dimension(text)
        except ValidationError:
            output_func(
                f"Invalid input. Please enter a number between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}."
            )


class GameConsole:
    """コマンドを読み取ってゲームを進めるループ"""

    def __init__(
        self,
        state: GameState,
        input_func: InputFunc = input,
        output_func: OutputFunc = print
    ):
        self.state = state
        self.input = input_func
        self.output = output_func
        self.running = False
        self.handlers = {
            "help": self.cmd_help,
            "exit": self.cmd_exit,
            "restart": self.cmd_restart,
            "select": self.cmd_select,
            "move": self.cmd_move,
        }

    def run(self):
        """exit が入力されるか入力が尽きるまでループする"""
        self.running = True
        while self.running:
            self.output(render_board(
                self.state.board,
                self.state.selected_square,
                self.state.available_moves,
            ))
            self.output(render_turn_info(self.state))

            prompt = "" if self.state.game_over else 'Type a command (type "help" for options):\n> '
            try:
                line = self.input(prompt)
            except EOFError:
                self.cmd_exit(Command("exit"))
                break

            self.handle_line(line)
            self.output("")

    def handle_line(self, line: str):
        command = parse_command(line)
        if command is None:
            return

        if self.state.game_over and command.name not in GAME_OVER_COMMANDS:
            self.output('Game is over. Type "restart" to play again or "exit" to leave.')
            return

        handler = self.handlers.get(command.name)
        if handler is None:
            self.output(f"Unknown command: {command.name}")
            self.output('Type "help" to see a list of valid commands.')
            return

        handler(command)

    def _parse(self, label: str):
        return parse_square(label, self.state.board.height, self.state.board.width)

    def cmd_help(self, command: Command):
        self.output(HELP_TEXT)

    def cmd_exit(self, command: Command):
        self.output(f"Exiting {GAME_TITLE}. Goodbye!")
        self.running = False

    def cmd_restart(self, command: Command):
        self.output("Restarting match...")
        self.state.restart()

    def cmd_select(self, command: Command):
        if len(command.args) != 1:
            self.output("Invalid input: The 'select' command takes only one coordinate.")
            self.output("Usage: select <square>")
            self.output("Example: select C1")
            return

        label = command.args[0]
        try:
            position = self._parse(label)
        except CoordinateError as e:
            logger.debug("Rejected square %r: %s", label, e)
            board = self.state.board
            self.output(f"Invalid input: {label.upper()} is not a valid square on the board.")
            self.output(f"Please enter coordinates from A1 to {last_square(board.height, board.width)}.")
            return

        try:
            moves = self.state.select_piece(position)
        except GameError as e:
            self.output(str(e))
            return

        self.output(describe_selection(self.state.board.get_piece(position), position, moves))

    def cmd_move(self, command: Command):
        if len(command.args) != 2:
            self.output("Invalid input: The 'move' command requires <from> and <to> coordinates.")
            self.output("Usage: move <from_square> <to_square>")
            self.output("Example: move B1 C3")
            return

        from_label, to_label = command.args
        try:
            from_pos = self._parse(from_label)
        except CoordinateError:
            self.output(f"Invalid input: {from_label.upper()} is not a valid 'from' square.")
            return
        try:
            to_pos = self._parse(to_label)
        except CoordinateError:
            self.output(f"Invalid input: {to_label.upper()} is not a valid 'to' square.")
            return

        try:
            captured = self.state.attempt_move(from_pos, to_pos)
        except GameError as e:
            self.output(str(e))
            return

        self.output(describe_move(self.state.board.get_piece(to_pos), from_pos, to_pos, captured))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{GAME_TITLE} - console board game")
    parser.add_argument("--width", type=int, default=None,
                        help=f"Board width ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}); prompted if omitted")
    parser.add_argument("--height", type=int, default=None,
                        help=f"Board height ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}); prompted if omitted")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def main(
    argv: Optional[List[str]] = None,
    input_func: InputFunc = input,
    output_func: OutputFunc = print
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    output_func(f"Welcome to {GAME_TITLE}!")
    try:
        width = args.width
        if width is None:
            width = prompt_dimension(
                f"Enter board width ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}): ", input_func, output_func
            )
        height = args.height
        if height is None:
            height = prompt_dimension(
                f"Enter board height ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}): ", input_func, output_func
            )
    except EOFError:
        return 0

    try:
        config = GameConfig(width=width, height=height)
    except ValidationError as e:
        parser.error(f"invalid board size: {e.errors()[0]['msg']}")

    output_func(f"Starting match on the ({config.width} x {config.height}) board...")
    logger.info("Starting match on %dx%d board", config.width, config.height)

    console = GameConsole(GameState(config.width, config.height), input_func, output_func)
    console.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
