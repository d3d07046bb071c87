"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel


class ReportConfig(BaseModel):
    lost_marker: str = "LOST"


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: str | None = None


class Config(BaseModel):
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/marsturtle.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/marsturtle.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
