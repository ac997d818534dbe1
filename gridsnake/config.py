"""Server settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from .constants import FRAME_RATE
from .errors import ConfigurationError


@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8765
    highscore_path: Optional[str] = None
    frame_rate: int = FRAME_RATE

    @classmethod
    def from_env(cls, environ=None) -> "ServerSettings":
        env = os.environ if environ is None else environ
        try:
            port = int(env.get("GRIDSNAKE_PORT", cls.port))
            frame_rate = int(env.get("GRIDSNAKE_FRAME_RATE", cls.frame_rate))
        except ValueError as exc:
            raise ConfigurationError(f"bad server setting: {exc}") from exc
        if not 0 < port < 65536:
            raise ConfigurationError(f"port out of range: {port}")
        if frame_rate <= 0:
            raise ConfigurationError(f"frame rate must be positive: {frame_rate}")
        return cls(
            host=env.get("GRIDSNAKE_HOST", cls.host),
            port=port,
            highscore_path=env.get("GRIDSNAKE_HIGHSCORE_PATH") or None,
            frame_rate=frame_rate,
        )
