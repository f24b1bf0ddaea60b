# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    station: dict[str, Any] = Field(..., description="Raw station record as returned by the controller")


class SummaryRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    stations: list[Any]                     = Field(default_factory=list, description="Raw station records")
    service_names: dict[str, str] | None    = Field(default=None, description="Service id to friendly name")
