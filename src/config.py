"""
Configuration parameters for the Othello engine and its hosts.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

from .game.board import Player


@dataclass
class PlayConfig:
    """Configuration for the interactive console game."""
    human_color: str = "black"
    ai_delay: float = 0.5  # Seconds to wait before the computer moves
    show_hints: bool = True

    @property
    def human_player(self) -> Player:
        try:
            return Player[self.human_color.upper()]
        except KeyError:
            raise ValueError(f"Unknown colour: {self.human_color!r}") from None


@dataclass
class ArenaConfig:
    """Configuration for benchmark matches between computer players."""
    games: int = 20
    seed: int = 42
    elo_k: float = 32.0
    initial_rating: float = 1500.0
    show_progress: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    play: PlayConfig = field(default_factory=PlayConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
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
        """Create config from dictionary. Unknown keys raise TypeError."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            play=PlayConfig(**config_dict.get('play', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
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
