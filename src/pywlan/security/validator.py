# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pywlan.lib.casts import as_number
from pywlan.lib.record_accessor import RawRecordAccessor

DEFAULT_SSID_MAX_LENGTH: int = 32
DEFAULT_PASSPHRASE_MIN_LENGTH: int = 8
DEFAULT_PASSPHRASE_MAX_LENGTH: int = 63

PASSPHRASE_ELEMENTS: tuple[str, ...] = ("WpaPskElement", "WpaSaeElement")

TIMEOUT_FIELDS: tuple[tuple[str, str], ...] = (
    ("preAuthenticatedIdleTimeout", "Pre-authenticated idle timeout must be non-negative"),
    ("postAuthenticatedIdleTimeout", "Post-authenticated idle timeout must be non-negative"),
    ("sessionTimeout", "Session timeout must be non-negative"),
)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool         = Field(..., description="True when no check failed")
    errors: list[str]   = Field(default_factory=list, description="Every failed check, in evaluation order")


class SecurityProfileValidator:
    """
    Check an assembled service payload before it is submitted.

    Every check runs; all failures are reported together. Never raises.
    """

    def __init__(self,
                 ssid_max_length: int = DEFAULT_SSID_MAX_LENGTH,
                 passphrase_min_length: int = DEFAULT_PASSPHRASE_MIN_LENGTH,
                 passphrase_max_length: int = DEFAULT_PASSPHRASE_MAX_LENGTH) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self.ssid_max_length = ssid_max_length
        self.passphrase_min_length = passphrase_min_length
        self.passphrase_max_length = passphrase_max_length

    def validate(self, payload: Mapping[str, Any] | Any) -> ValidationResult:
        if not isinstance(payload, Mapping):
            return ValidationResult(valid=False, errors=["Service payload must be an object"])

        record = RawRecordAccessor(payload)
        errors: list[str] = []
        errors.extend(self._check_required_text(record))
        errors.extend(self._check_ssid_length(record))
        errors.extend(self._check_passphrase(record))
        errors.extend(self._check_timeouts(record))

        if errors:
            self.logger.debug("Service payload rejected: %s", "; ".join(errors))
        return ValidationResult(valid=not errors, errors=errors)

    @staticmethod
    def _text(value: Any) -> str:
        return value if isinstance(value, str) else ""

    def _check_required_text(self, record: RawRecordAccessor) -> list[str]:
        errors: list[str] = []
        name = self._text(record.first("serviceName", "name"))
        if name.strip() == "":
            errors.append("Service name is required")
        if self._text(record.get("ssid")).strip() == "":
            errors.append("SSID is required")
        return errors

    def _check_ssid_length(self, record: RawRecordAccessor) -> list[str]:
        ssid = self._text(record.get("ssid"))
        if len(ssid) > self.ssid_max_length:
            return [f"SSID must be {self.ssid_max_length} characters or less"]
        return []

    def _check_passphrase(self, record: RawRecordAccessor) -> list[str]:
        privacy = record.child("privacy")
        elements = [privacy.get(name) for name in PASSPHRASE_ELEMENTS if privacy.has(name)]
        if not elements:
            return []
        passphrase = ""
        for element in elements:
            value = RawRecordAccessor(element).get("presharedKey")
            if isinstance(value, str) and value != "":
                passphrase = value
                break
        if not (self.passphrase_min_length <= len(passphrase) <= self.passphrase_max_length):
            return [f"Passphrase must be between {self.passphrase_min_length} and {self.passphrase_max_length} characters"]
        return []

    def _check_timeouts(self, record: RawRecordAccessor) -> list[str]:
        errors: list[str] = []
        for field, message in TIMEOUT_FIELDS:
            value = record.get(field)
            if value is None:
                continue
            if isinstance(value, int) and not isinstance(value, bool):
                if value < 0:
                    errors.append(message)
                continue
            seconds = as_number(value)
            if seconds is None or seconds < 0:
                errors.append(message)
        return errors


_DEFAULT_VALIDATOR = SecurityProfileValidator()


def validate(payload: Mapping[str, Any] | Any) -> ValidationResult:
    return _DEFAULT_VALIDATOR.validate(payload)
