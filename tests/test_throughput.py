# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from typing import Any

import pytest

from pywlan.telemetry.link_rate import LinkRateDisambiguator
from pywlan.telemetry.throughput import (
    aggregate_station_rates,
    station_network_name,
    throughput_from_counters,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"ssid": "corp", "serviceName": "Corporate"}, "corp"),
        ({"serviceName": "Corporate", "serviceId": "svc-1"}, "Corporate"),
        ({"serviceId": "svc-1"}, "Guest"),
        ({"serviceId": "svc-9"}, "svc-9"),
        ({}, "Unknown"),
    ],
)
def test_station_network_name(raw: dict[str, Any], expected: str) -> None:
    assert station_network_name(raw, {"svc-1": "Guest"}) == expected


def test_aggregate_station_rates() -> None:
    stations: list[Any] = [
        {"ssid": "corp", "transmittedRate": 10, "receivedRate": 20},
        {"ssid": "corp", "transmittedRate": 5, "receivedRate": 5},
        {"serviceId": "svc-1", "outBytes": 450000, "uptime": 3600},
        "not-a-station",
        None,
    ]
    summary = aggregate_station_rates(stations, {"svc-1": "Guest"})

    assert summary.station_count == 3
    assert summary.estimated_count == 1
    assert summary.total_upload_bps == pytest.approx(15_000_000 + 1000)
    assert summary.total_download_bps == pytest.approx(25_000_000)

    corp = summary.by_network["corp"]
    assert corp.clients == 2
    assert corp.upload_bps == pytest.approx(15_000_000)
    assert summary.by_network["Guest"].upload_bps == pytest.approx(1000)


def test_aggregate_uses_given_disambiguator() -> None:
    summary = aggregate_station_rates([{"transmittedRate": 500}], disambiguator=LinkRateDisambiguator(unit_threshold=100))
    assert summary.total_upload_bps == 500
    assert set(summary.by_network) == {"Unknown"}


def test_aggregate_empty() -> None:
    summary = aggregate_station_rates([])
    assert summary.station_count == 0
    assert summary.by_network == {}
    assert summary.model_dump(by_alias=True)["totalUploadBps"] == 0.0


@pytest.mark.parametrize(
    "prev_tx, prev_rx, curr_tx, curr_rx, interval, expected",
    [
        (0, 0, 500, 500, 8, 1000.0),
        (1000, 1000, 1000, 1000, 10, 0.0),
        (5000, 5000, 10, 10, 10, 0.0),     # counter reset
        (0, 0, 500, 500, 0, 0.0),
        (0, 0, 500, 500, -5, 0.0),
        (None, 0, 500, 500, 8, 0.0),
        ("0", "0", "250", "250", 4, 1000.0),
    ],
)
def test_throughput_from_counters(prev_tx: Any, prev_rx: Any, curr_tx: Any, curr_rx: Any,
                                  interval: float, expected: float) -> None:
    assert throughput_from_counters(prev_tx, prev_rx, curr_tx, curr_rx, interval) == pytest.approx(expected)
