# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from enum import Enum

from fastapi import APIRouter

from pywlan.api.routes.telemetry.schemas import RateRequest, SummaryRequest
from pywlan.config.system_config_settings import SystemConfigSettings
from pywlan.telemetry.rate_sample import RateSample
from pywlan.telemetry.throughput import ThroughputSummary, aggregate_station_rates


class TelemetryRouter:
    """
    FastAPI router for station telemetry:
      - POST /telemetry/rate    : Resolve one station's link rate to bps
      - POST /telemetry/summary : Aggregate throughput over many stations
    """
    def __init__(
        self,
        prefix: str = "/telemetry",
        tags: list[str | Enum] | None = None) -> None:
        if tags is None:
            tags = ["Station Telemetry"]
        self.router = APIRouter(prefix=prefix, tags=tags)
        self.logger = logging.getLogger(self.__class__.__name__)
        self._register_routes()

    def _register_routes(self) -> None:
        @self.router.post("/rate",
                          response_model=RateSample,
                          summary="Resolve a station link rate")
        async def rate(request: RateRequest) -> RateSample:
            """
            **Resolve Station Link Rate**

            Reported rates are normalized to bps with the magnitude heuristic;
            otherwise the rate is estimated from byte counters over the session.
            """
            return SystemConfigSettings.link_rate_disambiguator().resolve_rate(request.station)

        @self.router.post("/summary",
                          response_model=ThroughputSummary,
                          summary="Aggregate station throughput")
        async def summary(request: SummaryRequest) -> ThroughputSummary:
            """
            **Aggregate Station Throughput**

            Totals upload/download over all stations and per network (SSID,
            service name or service id).
            """
            result = aggregate_station_rates(request.stations,
                                             service_names=request.service_names,
                                             disambiguator=SystemConfigSettings.link_rate_disambiguator())
            self.logger.info(f"Aggregated {result.station_count} stations ({result.estimated_count} estimated)")
            return result

router = TelemetryRouter().router
