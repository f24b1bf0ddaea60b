# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pywlan.lib.types import FileNameStr, PathLike

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROTATE_MAX_BYTES = 10 * 1024 * 1024
ROTATE_BACKUPS = 5
REDACTED = "***"

# key=value, key: value and "key": "value" forms of passphrase fields
_SECRET_PATTERN = re.compile(
    r"""(?P<key>["']?(?:presharedKey|passphrase|password|psk)["']?\s*[:=]\s*)"""
    r"""(?P<value>"[^"]*"|'[^']*'|[^\s,;}\]]+)""",
    re.IGNORECASE,
)


class SecretRedactingFilter(logging.Filter):
    """
    Mask passphrase values in rendered log messages.

    Service records and payloads sometimes end up in debug output; their
    ``presharedKey``/``passphrase``/``password``/``psk`` values are replaced
    with ``***`` before any handler formats the record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            return True
        redacted = _SECRET_PATTERN.sub(self._mask, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True

    @staticmethod
    def _mask(match: re.Match[str]) -> str:
        value = match.group("value")
        quote = value[0] if value[:1] in ("'", '"') else ""
        return f"{match.group('key')}{quote}{REDACTED}{quote}"


class LoggerConfigurator:
    """
    Attach the PyWLAN file handler (and optionally a console handler) to the
    root logger, with secret redaction and per-logger level overrides.

    The handlers installed by an instance are tracked and can be detached
    again with :meth:`close`.
    """

    def __init__(self,
                 log_dir: PathLike,
                 log_filename: FileNameStr | str,
                 level: str = 'INFO', to_console: bool = False, rotate: bool = False,
                 logger_levels: Mapping[str, str] | None = None,
    ) -> None:
        """
        Args:
            log_dir (str): Directory for the log file. Created if missing.
            log_filename (str): Name of the log file (e.g. 'pywlan.log').
            level (str): Root level name; unknown names fall back to INFO.
            to_console (bool): Also write to stderr.
            rotate (bool): Use a RotatingFileHandler (10MB, 5 backups).
            logger_levels (dict): Level overrides by logger name,
                e.g. ``{"uvicorn.access": "WARNING"}``.
        """
        self.log_dir = Path(log_dir)
        self.log_filename = log_filename
        self.level = self.level_of(level)
        self.to_console = to_console
        self.rotate = rotate
        self.logger_levels = dict(logger_levels or {})
        self.handlers: list[logging.Handler] = []

        self.__setup()

    @staticmethod
    def level_of(name: str) -> int:
        level = logging.getLevelName(str(name).upper())
        return level if isinstance(level, int) else logging.INFO

    @property
    def log_file(self) -> Path:
        return self.log_dir / self.log_filename

    def _file_handler(self) -> logging.Handler:
        if self.rotate:
            return RotatingFileHandler(self.log_file, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS)
        return logging.FileHandler(self.log_file)

    def __setup(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.handlers.append(self._file_handler())
        if self.to_console:
            self.handlers.append(logging.StreamHandler(sys.stderr))

        fmt = logging.Formatter(LOG_FORMAT)
        redact = SecretRedactingFilter()
        root = logging.getLogger()
        root.setLevel(self.level)
        for handler in self.handlers:
            handler.setFormatter(fmt)
            handler.addFilter(redact)
            root.addHandler(handler)

        for name, level in self.logger_levels.items():
            logging.getLogger(name).setLevel(self.level_of(level))

        root.info("==== PyWLAN Normalization API Starting ====")

    def close(self) -> None:
        """
        Detach and close the handlers installed by this configurator.
        """
        root = logging.getLogger()
        for handler in self.handlers:
            root.removeHandler(handler)
            handler.close()
        self.handlers.clear()
