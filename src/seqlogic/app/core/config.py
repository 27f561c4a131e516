import json
import os
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field

from seqlogic.core.types import IntSequence

DEFAULT_SEQUENCE = [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    SEQUENCE: IntSequence = Field(default_factory=lambda: list(DEFAULT_SEQUENCE))
    LOG_LEVEL: LogLevel = "INFO"
    SETTINGS_PATH: Path = Field(
        default_factory=lambda: Path().home() / ".seqlogic.json"
    )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from a JSON file, falling back to defaults.

        The file may define ``sequence`` and ``log_level``. The ``LOG_LEVEL``
        environment variable takes precedence over the file.
        """
        settings_path = (
            Path(path) if path is not None else Path().home() / ".seqlogic.json"
        )

        values = {}
        if settings_path.exists():
            with open(settings_path, "r") as f:
                data = json.load(f)
            if "sequence" in data:
                values["SEQUENCE"] = data["sequence"]
            if "log_level" in data:
                values["LOG_LEVEL"] = str(data["log_level"]).upper()

        env_level = os.getenv("LOG_LEVEL")
        if env_level:
            values["LOG_LEVEL"] = env_level.upper()

        return cls(SETTINGS_PATH=settings_path, **values)
