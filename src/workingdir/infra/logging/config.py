from __future__ import annotations

"""
Logging Settings.

The CLI chooses only the severity, the stderr switch and an optional log
file. Rotation limits and record formats are fixed module settings.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

MAX_LOG_BYTES: int = 512 * 1024
BACKUP_COUNT: int = 2

CONSOLE_FORMAT: str = "%(levelname)s: %(message)s"
FILE_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT: str = "%Y-%m-%dT%H:%M:%S"

_LEVELS: Dict[str, int] = {
    name: logging.getLevelName(name)
    for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
_LEVELS["WARN"] = logging.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """
    What a single CLI run asks of the logging subsystem.

    Attributes:
        level: Severity name, case-insensitive. Unknown names mean INFO.
        console: Write records to stderr.
        log_file: Also write records to this rotating file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    @property
    def level_int(self) -> int:
        return _LEVELS.get(str(self.level or "").strip().upper(), logging.INFO)
