# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pywlan.lib.types import StringEnum


class RateSource(StringEnum):
    """Where a resolved rate came from."""
    REPORTED = "Reported"   # instantaneous rate field on the record
    COUNTERS = "Counters"   # cumulative byte counters over the session
    NONE     = "None"       # nothing usable, rate is 0


class RateSample(BaseModel):
    """
    Uplink/downlink link rate of one station, in bits per second.

    ``is_estimated`` is set whenever either direction did not come from a
    reported instantaneous rate.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    uplink_bps: float           = Field(default=0.0, ge=0)
    downlink_bps: float         = Field(default=0.0, ge=0)
    is_estimated: bool          = Field(default=False)
    uplink_source: RateSource   = Field(default=RateSource.NONE)
    downlink_source: RateSource = Field(default=RateSource.NONE)

    @property
    def total_bps(self) -> float:
        return self.uplink_bps + self.downlink_bps
