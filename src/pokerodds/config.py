"""Application configuration for pokerodds."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self


@dataclass(frozen=True)
class SimulationConfig:
    """How odds are computed.

    Draws of up to `exact_max_needed` cards are enumerated exactly; anything
    larger is estimated from `trials` random runouts.
    """

    trials: int = 5000
    exact_max_needed: int = 2

    def __post_init__(self) -> None:
        if self.trials < 1:
            raise ValueError(f"trials must be at least 1, got {self.trials}")
        if self.exact_max_needed < 0:
            raise ValueError(f"exact_max_needed must be >= 0, got {self.exact_max_needed}")


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for interactive hand sessions."""

    settle_delay: float = 0.05  # seconds

    def __post_init__(self) -> None:
        if self.settle_delay < 0:
            raise ValueError(f"settle_delay must be >= 0, got {self.settle_delay}")


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "pokerodds.toml",
            Path.cwd() / ".pokerodds.toml",
            Path.home() / ".config" / "pokerodds" / "config.toml",
            Path.home() / ".pokerodds.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        sim_data = data.get("simulation", {})
        simulation = SimulationConfig(
            trials=sim_data.get("trials", 5000),
            exact_max_needed=sim_data.get("exact_max_needed", 2),
        )

        session_data = data.get("session", {})
        session = SessionConfig(
            settle_delay=session_data.get("settle_delay", 0.05),
        )

        return cls(simulation=simulation, session=session)


DEFAULT_SIMULATION = SimulationConfig()

# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
