"""Editor settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kibi.core.row import DEFAULT_TAB_STOP

QUIT_TIMES = 3
MESSAGE_TIMEOUT = 5.0


@dataclass(frozen=True)
class EditorConfig:
    """
    Runtime settings, filled in from command-line options and environment
    variables. Nothing here is written back to disk.
    """
    tab_stop: int = DEFAULT_TAB_STOP
    quit_times: int = QUIT_TIMES
    message_timeout: float = MESSAGE_TIMEOUT
    log_file: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError(f"tab_stop must be at least 1, got {self.tab_stop}")
        if self.quit_times < 0:
            raise ValueError(f"quit_times must not be negative, got {self.quit_times}")
