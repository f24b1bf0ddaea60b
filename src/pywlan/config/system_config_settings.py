# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from pathlib import Path

from pywlan.config.config_manager import ConfigManager
from pywlan.lib.types import FileNameStr
from pywlan.security.validator import (
    DEFAULT_PASSPHRASE_MAX_LENGTH,
    DEFAULT_PASSPHRASE_MIN_LENGTH,
    DEFAULT_SSID_MAX_LENGTH,
    SecurityProfileValidator,
)
from pywlan.telemetry.link_rate import (
    DEFAULT_SESSION_SECONDS,
    DEFAULT_UNIT_THRESHOLD,
    LinkRateDisambiguator,
)


class SystemConfigSettings:
    """Provides dynamically reloaded system configuration via class properties."""
    _cfg        = ConfigManager()
    _logger     = logging.getLogger("SystemConfigSettings")

    _DEFAULT_LOG_LEVEL: str                 = "INFO"
    _DEFAULT_LOG_DIR: str                   = "logs"
    _DEFAULT_LOG_FILENAME: str              = "pywlan.log"
    _DEFAULT_API_HOST: str                  = "127.0.0.1"
    _DEFAULT_API_PORT: int                  = 8000

    @classmethod
    def _config_path(cls, *path: str) -> str:
        """Return dotted path for logging."""
        return ".".join(path)

    @classmethod
    def _get_str(cls, default: str, *path: str) -> str:
        value = cls._cfg.get(*path)
        if value is None:
            cls._logger.error(
                "Missing configuration value for '%s'; using default '%s'",
                cls._config_path(*path),
                default,
            )
            return default
        if not isinstance(value, str):
            coerced = str(value)
            cls._logger.error(
                "Non-string configuration value for '%s': %r; using coerced '%s'",
                cls._config_path(*path),
                value,
                coerced,
            )
            return coerced
        if value == "":
            cls._logger.error(
                "Empty configuration value for '%s'; using default '%s'",
                cls._config_path(*path),
                default,
            )
            return default
        return value

    @classmethod
    def _get_int(cls, default: int, *path: str) -> int:
        value = cls._cfg.get(*path)
        if value is None:
            cls._logger.error(
                "Missing configuration value for '%s'; using default %d",
                cls._config_path(*path),
                default,
            )
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            cls._logger.error(
                "Invalid integer configuration value for '%s': %r; using default %d",
                cls._config_path(*path),
                value,
                default,
            )
            return default

    @classmethod
    def _get_float(cls, default: float, *path: str) -> float:
        value = cls._cfg.get(*path)
        if value is None:
            cls._logger.error(
                "Missing configuration value for '%s'; using default %s",
                cls._config_path(*path),
                default,
            )
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            cls._logger.error(
                "Invalid numeric configuration value for '%s': %r; using default %s",
                cls._config_path(*path),
                value,
                default,
            )
            return default

    @classmethod
    def _get_bool(cls, default: bool, *path: str) -> bool:
        value = cls._cfg.get(*path)
        if isinstance(value, bool):
            return value
        if value is None:
            cls._logger.error(
                "Missing configuration value for '%s'; using default %s",
                cls._config_path(*path),
                default,
            )
            return default

        text = str(value).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False

        cls._logger.error(
            "Invalid boolean configuration value for '%s': %r; using default %s",
            cls._config_path(*path),
            value,
            default,
        )
        return default

    # ----------------- logging -----------------
    @classmethod
    def log_level(cls) -> str:
        return cls._get_str(cls._DEFAULT_LOG_LEVEL, "logging", "log_level")

    @classmethod
    def log_dir(cls) -> str:
        return cls._get_str(cls._DEFAULT_LOG_DIR, "logging", "log_dir")

    @classmethod
    def log_filename(cls) -> FileNameStr:
        return FileNameStr(cls._get_str(cls._DEFAULT_LOG_FILENAME, "logging", "log_filename"))

    @classmethod
    def log_rotate(cls) -> bool:
        return cls._get_bool(False, "logging", "rotate")

    @classmethod
    def logger_levels(cls) -> dict[str, str]:
        """Per-logger level overrides; non-mapping values are ignored."""
        value = cls._cfg.get("logging", "logger_levels")
        if value is None:
            return {}
        if not isinstance(value, dict):
            cls._logger.error(
                "Invalid configuration value for 'logging.logger_levels': %r; ignoring",
                value,
            )
            return {}
        return {str(name): str(level) for name, level in value.items()}

    # ----------------- link rate heuristics -----------------
    @classmethod
    def unit_threshold(cls) -> float:
        return cls._get_float(DEFAULT_UNIT_THRESHOLD, "LinkRate", "unit_threshold")

    @classmethod
    def default_session_seconds(cls) -> float:
        seconds = cls._get_float(DEFAULT_SESSION_SECONDS, "LinkRate", "default_session_seconds")
        if seconds <= 0:
            cls._logger.error(
                "Non-positive configuration value for 'LinkRate.default_session_seconds': %s; using default %s",
                seconds,
                DEFAULT_SESSION_SECONDS,
            )
            return DEFAULT_SESSION_SECONDS
        return seconds

    # ----------------- validation -----------------
    @classmethod
    def ssid_max_length(cls) -> int:
        return cls._get_int(DEFAULT_SSID_MAX_LENGTH, "Validation", "ssid_max_length")

    @classmethod
    def passphrase_min_length(cls) -> int:
        return cls._get_int(DEFAULT_PASSPHRASE_MIN_LENGTH, "Validation", "passphrase_min_length")

    @classmethod
    def passphrase_max_length(cls) -> int:
        return cls._get_int(DEFAULT_PASSPHRASE_MAX_LENGTH, "Validation", "passphrase_max_length")

    # ----------------- api -----------------
    @classmethod
    def api_host(cls) -> str:
        return cls._get_str(cls._DEFAULT_API_HOST, "Api", "host")

    @classmethod
    def api_port(cls) -> int:
        return cls._get_int(cls._DEFAULT_API_PORT, "Api", "port")

    # ----------------- factories -----------------
    @classmethod
    def link_rate_disambiguator(cls) -> LinkRateDisambiguator:
        return LinkRateDisambiguator(
            unit_threshold=cls.unit_threshold(),
            default_session_seconds=cls.default_session_seconds(),
        )

    @classmethod
    def profile_validator(cls) -> SecurityProfileValidator:
        return SecurityProfileValidator(
            ssid_max_length=cls.ssid_max_length(),
            passphrase_min_length=cls.passphrase_min_length(),
            passphrase_max_length=cls.passphrase_max_length(),
        )

    @classmethod
    def initialize_directories(cls) -> None:
        """
        Create necessary directories if they do not exist.
        """
        Path(cls.log_dir()).mkdir(parents=True, exist_ok=True)

    @classmethod
    def reload(cls) -> None:
        """
        Reload the configuration settings.
        """
        cls._cfg.reload()
        cls.initialize_directories()

    @classmethod
    def use_config(cls, config: ConfigManager) -> None:
        """
        Swap the backing configuration (tests, alternate deployments).
        """
        cls._cfg = config
