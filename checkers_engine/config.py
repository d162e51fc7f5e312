import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board ---
    BOARD_SIZE: int = 8
    SETUP_ROWS: int = 3  # rows of men per side at game start

    # --- Enhanced mode ---
    POWER_UP_COUNT: int = int(os.getenv("POWER_UP_COUNT", 3))
    POWER_UP_MIN_ROW: int = 2  # keep power-ups off the setup rows
    POWER_UP_MAX_ROW: int = 5
    POWER_UP_DURATION: int = 1  # player moves an active effect lasts
    PERSONALITY_COUNT: int = int(os.getenv("PERSONALITY_COUNT", 4))
    FOG_RADIUS: int = int(os.getenv("FOG_RADIUS", 2))
    ROTATION_INTERVAL: int = int(os.getenv("ROTATION_INTERVAL", 5))
    ROTATION_STEP: int = 90
    RAIN_SLIP_PROBABILITY: float = float(os.getenv("RAIN_SLIP_PROBABILITY", 0.3))

    # --- Session ---
    HISTORY_LENGTH: int = int(os.getenv("HISTORY_LENGTH", 10))
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 500))
    OPPONENT_DELAY_MS: dict[str, int] = field(
        default_factory=lambda: {"easy": 800, "medium": 1200}
    )

    # Derived (populated in __post_init__ due to slots)
    LAST_ROW: int = 0
    PLAYABLE_SQUARES: int = 0

    def __post_init__(self):
        self.LAST_ROW = self.BOARD_SIZE - 1
        self.PLAYABLE_SQUARES = self.BOARD_SIZE * self.BOARD_SIZE // 2

        if 2 * self.SETUP_ROWS >= self.BOARD_SIZE:
            raise ValueError("SETUP_ROWS must leave a gap between the two sides")
        if not 0 <= self.POWER_UP_MIN_ROW <= self.POWER_UP_MAX_ROW <= self.LAST_ROW:
            raise ValueError("POWER_UP_MIN_ROW/POWER_UP_MAX_ROW out of range")
        # rejection sampling in generate_power_ups needs enough free squares
        band = (self.POWER_UP_MAX_ROW - self.POWER_UP_MIN_ROW + 1) * self.BOARD_SIZE // 2
        if self.POWER_UP_COUNT > band:
            raise ValueError(
                f"POWER_UP_COUNT must be at most {band} for the configured rows"
            )
        if not 0.0 <= self.RAIN_SLIP_PROBABILITY <= 1.0:
            raise ValueError("RAIN_SLIP_PROBABILITY must be between 0 and 1")
        if self.ROTATION_INTERVAL < 1:
            raise ValueError("ROTATION_INTERVAL must be positive")


config = Config()
