# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the EcoIndex test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from ecoindex_audit.audit.models import Artifacts, DOMStats, NetworkRecord
from ecoindex_audit.data.models import EcoIndexResult, Measurement
from ecoindex_audit.scoring.engine import EcoIndexCalculator

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def sample_artifacts() -> Artifacts:
    """Five requests (2,000,000 bytes in total) and 240 DOM elements."""
    return Artifacts(
        devtools_logs={
            "defaultPass": [
                NetworkRecord(url="https://example.org/", transfer_size=500_000),
                NetworkRecord(url="https://example.org/app.js", transfer_size=1_200_000),
                NetworkRecord(url="data:image/png;base64,AAAA"),
                NetworkRecord(url="https://example.org/cached.css", transfer_size=0),
                NetworkRecord(url="https://example.org/hero.webp", transfer_size=300_000),
            ]
        },
        dom_stats=DOMStats(total_body_elements=240),
    )


@pytest.fixture()
def empty_page_result() -> EcoIndexResult:
    """Result for a page with no DOM, no requests and no bytes."""
    measurement = Measurement(dom_size=0, request_count=0, transferred_size_bytes=0)
    return EcoIndexCalculator().score(measurement)
