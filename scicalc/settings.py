"""Runtime settings, with environment variable overrides."""

import os
from dataclasses import dataclass

from .environment import AngleMode

DEFAULT_HISTORY_CAPACITY = 20


@dataclass
class Settings:
    angle_mode: AngleMode = AngleMode.DEGREES
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    dark_mode: bool = True

    def validate(self) -> None:
        self.angle_mode = AngleMode.parse(self.angle_mode)
        if not (1 <= int(self.history_capacity) <= 100):
            raise ValueError("history_capacity must be 1..100")

    @classmethod
    def from_env(cls) -> "Settings":
        theme = os.getenv("SCICALC_THEME", "dark").strip().lower()
        if theme not in {"dark", "light"}:
            raise ValueError("SCICALC_THEME must be 'dark' or 'light'")
        try:
            capacity = int(os.getenv("SCICALC_HISTORY_SIZE", str(DEFAULT_HISTORY_CAPACITY)))
        except ValueError:
            raise ValueError("SCICALC_HISTORY_SIZE must be an integer") from None
        settings = cls(
            angle_mode=os.getenv("SCICALC_ANGLE_MODE", "deg"),
            history_capacity=capacity,
            dark_mode=(theme == "dark"),
        )
        settings.validate()
        return settings
