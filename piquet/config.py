"""Configuration management."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from piquet.logging.deal_logger import DealLogConfig


class ElderPolicy(str, Enum):
    """How the elder is chosen after the first deal."""

    FIXED = "fixed"  # Same elder for the whole game
    ALTERNATE = "alternate"  # Roles swap every deal
    RANDOM = "random"  # Drawn again every deal


class GameConfig(BaseModel):
    """Game configuration."""

    seed: str | None = None  # 16 bytes as hex; random if not set
    player_names: tuple[str, str] = ("Roméo", "Juliette")
    num_deals: int = 6

    @field_validator("seed")
    @classmethod
    def _check_seed(cls, seed: str | None) -> str | None:
        if seed is not None and len(bytes.fromhex(seed)) != 16:
            raise ValueError("seed must be 16 bytes written as 32 hex digits")
        return seed


class RulesConfig(BaseModel):
    """Rules configuration."""

    elder_policy: ElderPolicy = ElderPolicy.FIXED
    max_deals: int = Field(default=6, ge=1)
    elder_max_exchange: int = Field(default=5, ge=1, le=8)
    repique_threshold: int = 30


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    deal_log: DealLogConfig = DealLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
