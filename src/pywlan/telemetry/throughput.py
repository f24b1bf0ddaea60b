# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pywlan.lib.casts import as_number
from pywlan.lib.record_accessor import RawRecordAccessor
from pywlan.telemetry.link_rate import BITS_PER_BYTE, LinkRateDisambiguator

UNKNOWN_NETWORK: str = "Unknown"

logger = logging.getLogger(__name__)


class NetworkThroughput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    upload_bps: float   = 0.0
    download_bps: float = 0.0
    clients: int        = 0


class ThroughputSummary(BaseModel):
    """Throughput totals over a set of stations, overall and per network."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_upload_bps: float                     = 0.0
    total_download_bps: float                   = 0.0
    station_count: int                          = 0
    estimated_count: int                        = Field(default=0, description="Stations with at least one estimated direction")
    by_network: dict[str, NetworkThroughput]    = Field(default_factory=dict)


def station_network_name(raw: Mapping[str, Any], service_names: Mapping[str, str] | None = None) -> str:
    """
    Resolve the network a station belongs to.

    SSID first, then service name, then the service id (mapped to a friendly
    name when ``service_names`` knows it), then ``"Unknown"``.
    """
    record = RawRecordAccessor(raw)
    name = record.text("ssid", "serviceName")
    if name is not None:
        return name
    service_id = record.text("serviceId")
    if service_id is not None:
        return (service_names or {}).get(service_id, service_id)
    return UNKNOWN_NETWORK


def aggregate_station_rates(stations: Iterable[Any],
                            service_names: Mapping[str, str] | None = None,
                            disambiguator: LinkRateDisambiguator | None = None) -> ThroughputSummary:
    """
    Sum resolved link rates of ``stations``; non-mapping entries are skipped.
    """
    resolver = disambiguator or LinkRateDisambiguator()
    summary = ThroughputSummary()
    for raw in stations:
        if not isinstance(raw, Mapping):
            logger.debug("Skipping non-mapping station entry of type %s", type(raw).__name__)
            continue
        sample = resolver.resolve_rate(raw)
        network = summary.by_network.setdefault(station_network_name(raw, service_names), NetworkThroughput())
        network.upload_bps += sample.uplink_bps
        network.download_bps += sample.downlink_bps
        network.clients += 1
        summary.total_upload_bps += sample.uplink_bps
        summary.total_download_bps += sample.downlink_bps
        summary.station_count += 1
        if sample.is_estimated:
            summary.estimated_count += 1
    return summary


def throughput_from_counters(prev_tx_bytes: Any, prev_rx_bytes: Any,
                             curr_tx_bytes: Any, curr_rx_bytes: Any,
                             interval_seconds: float) -> float:
    """
    Combined throughput in bps between two cumulative byte-counter snapshots.

    ((tx2 + rx2) - (tx1 + rx1)) * 8 / interval. A non-positive interval, a
    non-numeric counter or a negative delta (counter reset) gives 0.
    """
    if interval_seconds <= 0:
        return 0.0
    values = [as_number(v) for v in (prev_tx_bytes, prev_rx_bytes, curr_tx_bytes, curr_rx_bytes)]
    if any(v is None for v in values):
        return 0.0
    prev_tx, prev_rx, curr_tx, curr_rx = values
    delta = (curr_tx + curr_rx) - (prev_tx + prev_rx)  # type: ignore[operator]
    if delta < 0:
        return 0.0
    return delta * BITS_PER_BYTE / interval_seconds
