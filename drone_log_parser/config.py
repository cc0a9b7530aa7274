"""
Configuration management for flight log parsing.

Provides centralized configuration handling with validation and defaults.
"""

from dataclasses import dataclass, asdict
import json
from pathlib import Path


@dataclass
class ParserConfig:
    """Configuration class for the flight log parsing pipeline."""

    # Flight path sampling
    max_path_points: int = 500  # Upper bound on stored flight path points

    # Binary detection
    binary_sample_size: int = 1000  # Characters inspected for control bytes
    binary_control_ratio: float = 0.1  # Fraction of control bytes that marks content as binary

    # Unit heuristics
    altitude_meters_threshold: float = 200.0  # Unlabelled altitudes below this are assumed meters

    # Validation thresholds
    max_altitude_warning_feet: float = 50000.0
    max_speed_warning_mph: float = 500.0
    max_duration_warning_minutes: float = 480.0

    # Behaviour
    emit_warnings: bool = False  # Also issue validation warnings via warnings.warn
    verbose: bool = False  # Enable verbose logging

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config()

    def _validate_config(self):
        """Validate configuration parameters."""
        if self.max_path_points <= 0:
            raise ValueError("max_path_points must be positive")

        if self.binary_sample_size <= 0:
            raise ValueError("binary_sample_size must be positive")

        if not 0 < self.binary_control_ratio < 1:
            raise ValueError("binary_control_ratio must be between 0 and 1")

        if self.altitude_meters_threshold < 0:
            raise ValueError("altitude_meters_threshold must be non-negative")

        if self.max_altitude_warning_feet <= 0:
            raise ValueError("max_altitude_warning_feet must be positive")

        if self.max_speed_warning_mph <= 0:
            raise ValueError("max_speed_warning_mph must be positive")

        if self.max_duration_warning_minutes <= 0:
            raise ValueError("max_duration_warning_minutes must be positive")

    @classmethod
    def from_file(cls, config_path: str) -> 'ParserConfig':
        """
        Load configuration from JSON file.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            ParserConfig instance
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def to_file(self, config_path: str):
        """
        Save configuration to JSON file.

        Args:
            config_path: Path where to save the configuration
        """
        path = Path(config_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(asdict(self), f, indent=2)

    def copy(self) -> 'ParserConfig':
        """Create a copy of the configuration."""
        return ParserConfig(**asdict(self))
