from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_HAND_SIZE = 4
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class AppConfig:
    hand_size: int = DEFAULT_HAND_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "AppConfig":
        log_level = os.getenv("CARDDECK_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        return cls(log_level=log_level or DEFAULT_LOG_LEVEL)
