"""Runtime configuration for lineslice."""

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

ERROR_POLICIES = ["strict", "replace", "ignore", "surrogateescape", "backslashreplace"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class SliceConfig:
    """Text handling and logging settings."""

    encoding: str = "utf-8"
    errors: str = "strict"  # decode/encode error policy
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}") from None

        if self.errors not in ERROR_POLICIES:
            raise ValueError(
                f"Unknown errors policy: {self.errors}. Available: {ERROR_POLICIES}"
            )

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}. Available: {LOG_LEVELS}")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "encoding": self.encoding,
            "errors": self.errors,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SliceConfig":
        """Create from dictionary, rejecting unknown keys."""
        unknown = sorted(set(data) - {"encoding", "errors", "log_level"})
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")

        return cls(
            encoding=data.get("encoding", "utf-8"),
            errors=data.get("errors", "strict"),
            log_level=data.get("log_level", "WARNING"),
        )

    @classmethod
    def load(cls, path: str | Path) -> "SliceConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        return cls.from_dict(data)
