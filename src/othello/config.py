"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class GameConfig:
    """Configuration for an interactive game."""
    human_color: Optional[str] = "black"  # None for AI vs AI
    ai_player: str = "greedy"
    opponent_player: str = "greedy"  # Takes the human seat when human_color is None


@dataclass
class ArenaConfig:
    """Configuration for matches between automated players."""
    num_games: int = 20
    player_a: str = "greedy"
    player_b: str = "random"
    swap_colors: bool = True  # Alternate who plays black each game
    output_file: Optional[str] = None


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: int = 42
    game: GameConfig = field(default_factory=GameConfig)
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
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed', 42),
            game=GameConfig(**config_dict.get('game', {})),
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
