# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

"""
Request and response models for the security profile endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pywlan.lib.types import VendorPrivacyPayload
from pywlan.security.profile import SecurityProfile, SecurityProfileEdits


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClassifyRequest(_CamelModel):
    service: dict[str, Any]         = Field(..., description="Raw service record as returned by the controller")
    include_secrets: bool           = Field(default=False, description="Copy the preshared key into the profile")


class ClassifyResponse(_CamelModel):
    rule: str                       = Field(..., description="Name of the classification rule that matched")
    profile: SecurityProfile


class EncodeRequest(_CamelModel):
    profile: SecurityProfile
    edits: SecurityProfileEdits | None  = Field(default=None, description="Optional user edits applied before encoding")
    service: dict[str, Any] | None      = Field(default=None, description="Service payload to overlay the privacy fragment onto")


class EncodeResponse(_CamelModel):
    privacy: VendorPrivacyPayload
    service: dict[str, Any] | None  = None


class ValidateRequest(_CamelModel):
    service: Any                    = Field(..., description="Service payload about to be submitted")
