"""
Configuration parameters for the Reversi front end.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional, List, Tuple
import json


@dataclass
class DisplayConfig:
    """Configuration for drawing the board."""
    first_glyph: str = "X"
    second_glyph: str = "O"
    show_hints: bool = True  # Show 1-based coordinates in empty cells
    player_names: List[str] = field(default_factory=lambda: ["Player 1", "Player 2"])

    def __post_init__(self):
        if len(self.player_names) != 2:
            raise ValueError(f"Expected two player names, got {self.player_names!r}")

    @property
    def glyphs(self) -> Tuple[str, str]:
        return (self.first_glyph, self.second_glyph)


@dataclass
class InputConfig:
    """Configuration for reading moves."""
    quit_command: str = "sext"
    separator: str = ","
    one_based: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None
    log_level: str = "WARNING"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    input: InputConfig = field(default_factory=InputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            display=DisplayConfig(**config_dict.get('display', {})),
            input=InputConfig(**config_dict.get('input', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
