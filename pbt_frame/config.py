from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    log_file: Path | None = None    # None -> stderr


@dataclass
class InputConfig:
    lines: list[str] = field(default_factory=list)
    file: Path | None = None        # Path("-") -> stdin


@dataclass
class AppConfig:
    input: InputConfig = field(default_factory=InputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
