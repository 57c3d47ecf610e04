"""
Configuration dataclass for lifegrid simulation parameters.
"""

from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class Config:
    """
    Configuration for a Game of Life run.

    The board covers the inclusive rectangle [0, width] x [0, height], so a
    board of width W and height H has (W + 1) x (H + 1) cells.

    Attributes:
        width: Largest row coordinate (x) on the board
        height: Largest column coordinate (y) on the board
        delay_ms: Pause between rendered generations, in milliseconds
    """

    width: int = 60
    height: int = 250
    delay_ms: int = 30

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all parameters are in valid ranges."""
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")

        if self.height < 1:
            raise ValueError(f"height must be >= 1, got {self.height}")

        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")

    @property
    def delay(self) -> float:
        """Frame delay in seconds."""
        return self.delay_ms / 1000.0

    @property
    def shape(self) -> tuple[int, int]:
        """Board dimensions in cells (rows, cols)."""
        return (self.width + 1, self.height + 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)
