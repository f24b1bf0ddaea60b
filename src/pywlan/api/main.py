# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from pywlan.api.utils.auto_load import RouterRegistrar
from pywlan.startup.startup import StartUp
from pywlan.version import __version__

StartUp.initialize()

fast_api_description = """
**Wireless Controller Normalization API**

PyWLAN turns the loosely shaped service and station records of enterprise
wireless controllers into canonical models, and back.

**Core capabilities include:**
- Security profile classification of raw service records
- Encoding of (edited) profiles into controller privacy payloads
- Pre-submit validation of service payloads
- Station link-rate normalization and throughput aggregation
"""

app = FastAPI(
    title="PyWLAN REST API",
    version=__version__,
    description=fast_api_description,
    openapi_url="/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    """Lightweight health endpoint for probes."""
    return {"status": "ok", "version": __version__}

app.add_middleware(GZipMiddleware, minimum_size=100_000)

RouterRegistrar().register(app)
