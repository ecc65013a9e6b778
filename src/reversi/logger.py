"""
Logging utilities for Reversi.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional, Tuple

from .config import Config
from .game import Player


class GameLogger:
    """Sets up logging for a session and records moves and results."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir, or "logs")
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir or "logs"
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = None
        self.handlers = []
        self.logger = logging.getLogger('reversi')

        level = getattr(logging, config.logging.log_level.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.logging.log_level}")

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        # Set up file logging
        if config.logging.log_to_file:
            self.run_dir = os.path.join(self.log_dir, self.run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'game.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        # Engine modules log beneath the package logger
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_move(self, player: Player, move: Tuple[int, int], flipped: int):
        self.logger.info("%s -> %s (flipped %d)", player.name, move, flipped)

    def log_result(self, score: Tuple[int, int], winner: Optional[Player]):
        """Log the final score and winner."""
        outcome = winner.name if winner is not None else "draw"
        self.logger.info("Game finished: score=%s winner=%s", score, outcome)

    def close(self):
        """Detach and close the handlers this logger installed."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config) -> GameLogger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        GameLogger instance
    """
    return GameLogger(config)
