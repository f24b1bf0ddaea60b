# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from enum import Enum
from http import HTTPStatus

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from pywlan.api.routes.security.schemas import (
    ClassifyRequest,
    ClassifyResponse,
    EncodeRequest,
    EncodeResponse,
    ValidateRequest,
)
from pywlan.config.system_config_settings import SystemConfigSettings
from pywlan.security.classifier import SecurityProfileClassifier
from pywlan.security.encoder import SecurityProfileEncoder
from pywlan.security.exceptions import UnencodableProfileError
from pywlan.security.validator import ValidationResult


class SecurityRouter:
    """
    FastAPI router for service security profiles:
      - POST /security/classify : Raw service record -> canonical profile
      - POST /security/encode   : Canonical profile (+ edits) -> privacy payload
      - POST /security/validate : Pre-submit checks on a service payload
    """
    def __init__(
        self,
        prefix: str = "/security",
        tags: list[str | Enum] | None = None) -> None:
        if tags is None:
            tags = ["Security Profile"]
        self.router = APIRouter(prefix=prefix, tags=tags)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.classifier = SecurityProfileClassifier()
        self.encoder = SecurityProfileEncoder()
        self._register_routes()

    def _register_routes(self) -> None:
        @self.router.post("/classify",
                          response_model=ClassifyResponse,
                          summary="Classify a raw service record")
        async def classify(request: ClassifyRequest) -> ClassifyResponse:
            """
            **Classify Service Security**

            Runs the ordered rule chain over the raw record and returns the first
            matching profile together with the rule that produced it. Never fails
            for a well-formed JSON object; unrecognized records are `SecuredUnknown`.
            """
            rule, profile = self.classifier.explain(request.service, include_secrets=request.include_secrets)
            return ClassifyResponse(rule=rule, profile=profile)

        @self.router.post("/encode",
                          response_model=EncodeResponse,
                          summary="Encode a profile as a controller privacy payload")
        async def encode(request: EncodeRequest) -> EncodeResponse:
            """
            **Encode Security Profile**

            Applies the optional edits, then builds the vendor privacy payload.
            `SecuredUnknown` profiles cannot be encoded and return 409.
            """
            service = None
            try:
                if request.service is not None:
                    service = self.encoder.encode_service(request.service, request.profile, request.edits)
                    privacy = service["privacy"]
                else:
                    privacy = self.encoder.encode(request.profile, request.edits)
            except UnencodableProfileError as exc:
                self.logger.warning(f"Refused to encode profile: {exc}")
                raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(exc)) from exc
            except ValidationError as exc:
                raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
                                    detail=exc.errors(include_url=False, include_context=False, include_input=False)) from exc
            return EncodeResponse(privacy=privacy, service=service)

        @self.router.post("/validate",
                          response_model=ValidationResult,
                          summary="Validate a service payload before submission")
        async def validate(request: ValidateRequest) -> ValidationResult:
            """
            **Validate Service Payload**

            Collects every problem in one pass (name, SSID, passphrase length,
            timeouts). Limits come from the `Validation` settings section.
            """
            return SystemConfigSettings.profile_validator().validate(request.service)

router = SecurityRouter().router
