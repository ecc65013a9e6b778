"""
Terminal front end for playing Reversi on one machine.
"""
import os
import sys
import argparse
import logging
from typing import Optional, TextIO, Tuple

from .config import Config, get_default_config
from .game import Board, Player, apply_move, is_finished, new_game, render, score
from .logger import GameLogger, setup_logger

logger = logging.getLogger(__name__)


class InteractionLoop:
    """Reads moves from a text stream and drives a game until it ends."""

    def __init__(self, board: Optional[Board] = None, config: Optional[Config] = None,
                 stdin: TextIO = None, stdout: TextIO = None,
                 game_logger: Optional[GameLogger] = None):
        self.board = board if board is not None else new_game()
        self.config = config or get_default_config()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.game_logger = game_logger

    def _print(self, text: str = "", end: str = "\n"):
        self.stdout.write(text + end)
        self.stdout.flush()

    def player_name(self, player: Player) -> str:
        return self.config.display.player_names[int(player) - 1]

    def parse_move(self, text: str) -> Optional[Tuple[int, int]]:
        """
        Turn user input such as "4,3" into zero-based (x, y).

        Returns None if the text is not two integers split by the separator.
        """
        parts = text.strip().split(self.config.input.separator)
        if len(parts) != 2:
            return None
        try:
            x, y = (int(part.strip()) for part in parts)
        except ValueError:
            return None
        if self.config.input.one_based:
            x, y = x - 1, y - 1
        return (x, y)

    def run(self) -> int:
        """
        Play until the game is finished or the quit command is entered.

        Returns:
            Process exit code
        """
        display = self.config.display
        while not is_finished(self.board):
            self._print(render(self.board, display.glyphs, display.show_hints))
            self._print(f"{self.player_name(self.board.current_player)}> ", end="")
            line = self.stdin.readline()
            self._print()

            if line == "":
                self._print("Exiting...")
                return 0
            text = line.strip()
            if text == self.config.input.quit_command:
                break

            move = self.parse_move(text)
            if move is None:
                sep = self.config.input.separator
                self._print(f"Could not read '{text}', expected x{sep}y")
                continue

            mover = self.board.current_player
            result = apply_move(self.board, *move)
            if result:
                if self.game_logger is not None:
                    self.game_logger.log_move(mover, move, len(result.flips))
                self._print(f"Flipped {len(result.flips)}, {self.player_name(result.player)} to move")
            else:
                self._print(f"Illegal move: {result.error.value}")

        if is_finished(self.board):
            logger.info("Game finished with score %s", score(self.board))
        self.report()
        return 0

    def report(self):
        """Print the final board, score and winner."""
        first, second = score(self.board)
        winner = self.board.winner()
        display = self.config.display

        self._print(render(self.board, display.glyphs, display.show_hints))
        self._print("Game over!")
        self._print(f"Score was:\n\t{self.player_name(Player.FIRST)} - {first}"
                    f"\n\t{self.player_name(Player.SECOND)} - {second}")
        if winner is None:
            self._print("It's a draw!")
        else:
            self._print(f"{self.player_name(winner)} wins!")

        if self.game_logger is not None:
            self.game_logger.log_result((first, second), winner)


def main(argv=None) -> int:
    """Run an interactive game in the terminal."""
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to JSON config file')
    parser.add_argument('--no-hints', action='store_true',
                        help='Leave empty cells blank instead of showing coordinates')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='Write a game log under this directory')
    args = parser.parse_args(argv)

    if args.config is not None:
        if not os.path.exists(args.config):
            parser.error(f"Config file {args.config} not found")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.no_hints:
        config.display.show_hints = False
    if args.log_level:
        config.logging.log_level = args.log_level
    if args.log_dir:
        config.logging.log_dir = args.log_dir
        config.logging.log_to_file = True

    game_logger = setup_logger(config)
    try:
        logger.debug("Starting game with config %s", config.to_dict())
        return InteractionLoop(config=config, game_logger=game_logger).run()
    finally:
        game_logger.close()


if __name__ == "__main__":
    sys.exit(main())
