# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

"""
Link-rate disambiguation for station telemetry.

Controllers report per-station rates without declaring a unit: depending on
firmware the same field holds megabits per second or bits per second. This
module resolves both directions to bits per second and estimates a rate from
the cumulative byte counters when no rate is reported.

Known limitation: the unit is inferred from magnitude alone. Values up to
and including ``unit_threshold`` are read as Mbps, so a genuine 500 bps link
is reported as 500 Mbps. The rule matches observed controller behavior and
is kept as is for compatibility.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pywlan.lib.record_accessor import RawRecordAccessor
from pywlan.lib.types import KeyPath, RawStationRecord
from pywlan.telemetry.rate_sample import RateSample, RateSource

BITS_PER_BYTE: int = 8
BPS_PER_MBPS: int = 1_000_000

DEFAULT_UNIT_THRESHOLD: float = 1000.0
DEFAULT_SESSION_SECONDS: float = 3600.0

UPLINK_RATE_PATHS: tuple[KeyPath, ...] = ("transmittedRate", "txRate")
DOWNLINK_RATE_PATHS: tuple[KeyPath, ...] = ("receivedRate", "rxRate")
UPLINK_BYTE_PATHS: tuple[KeyPath, ...] = ("outBytes", "txBytes")
DOWNLINK_BYTE_PATHS: tuple[KeyPath, ...] = ("inBytes", "rxBytes")
SESSION_SECONDS_PATHS: tuple[KeyPath, ...] = ("uptime", "sessionDuration")


@dataclass(frozen=True)
class _Direction:
    rate_paths: tuple[KeyPath, ...]
    byte_paths: tuple[KeyPath, ...]


UPLINK = _Direction(UPLINK_RATE_PATHS, UPLINK_BYTE_PATHS)
DOWNLINK = _Direction(DOWNLINK_RATE_PATHS, DOWNLINK_BYTE_PATHS)


class LinkRateDisambiguator:
    """
    Resolve a raw station record to a :class:`RateSample`.

    Per direction:
      1. a reported rate > 0: above ``unit_threshold`` it is already bps,
         otherwise it is Mbps and scaled by 1e6;
      2. else cumulative bytes * 8 / session seconds, where the session is
         the record's uptime or ``default_session_seconds`` (an explicit
         approximation, not a measurement);
      3. else 0.

    Never raises; malformed numbers degrade to 0.
    """

    def __init__(self,
                 unit_threshold: float = DEFAULT_UNIT_THRESHOLD,
                 default_session_seconds: float = DEFAULT_SESSION_SECONDS) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        if default_session_seconds <= 0:
            raise ValueError(f"default_session_seconds must be positive, got {default_session_seconds}")
        self.unit_threshold = unit_threshold
        self.default_session_seconds = default_session_seconds

    def to_bps(self, reported: float) -> float:
        """Apply the magnitude heuristic to a reported rate."""
        if reported > self.unit_threshold:
            return reported
        return reported * BPS_PER_MBPS

    def session_seconds(self, record: RawRecordAccessor) -> float:
        uptime = record.positive(*SESSION_SECONDS_PATHS)
        return uptime if uptime is not None else self.default_session_seconds

    def _resolve(self, record: RawRecordAccessor, direction: _Direction) -> tuple[float, RateSource]:
        reported = record.positive(*direction.rate_paths)
        if reported is not None:
            return self.to_bps(reported), RateSource.REPORTED

        transferred = record.positive(*direction.byte_paths)
        if transferred is not None:
            return transferred * BITS_PER_BYTE / self.session_seconds(record), RateSource.COUNTERS

        return 0.0, RateSource.NONE

    def resolve_rate(self, raw: RawStationRecord | Any) -> RateSample:
        record = RawRecordAccessor(raw)
        up, up_source = self._resolve(record, UPLINK)
        down, down_source = self._resolve(record, DOWNLINK)
        estimated = up_source is not RateSource.REPORTED or down_source is not RateSource.REPORTED
        if estimated:
            self.logger.debug("Estimated link rate (uplink=%s, downlink=%s)", up_source.value, down_source.value)
        return RateSample(
            uplink_bps=up,
            downlink_bps=down,
            is_estimated=estimated,
            uplink_source=up_source,
            downlink_source=down_source,
        )


_DEFAULT_DISAMBIGUATOR = LinkRateDisambiguator()


def resolve_rate(raw: RawStationRecord | Any) -> RateSample:
    return _DEFAULT_DISAMBIGUATOR.resolve_rate(raw)
