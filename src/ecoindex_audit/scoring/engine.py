# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""EcoIndex computation.

Combines the three per-dimension quantile positions into the composite
index, then derives the grade and the environmental estimates. Everything
here is pure: inputs are not validated and the functions hold no state.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ecoindex_audit.data.models import EcoIndexResult, Grade, Measurement
from ecoindex_audit.scoring.quantiles import (
    QUANTILES_DOM,
    QUANTILES_REQUESTS,
    QUANTILES_SIZE,
    compute_quantile,
)
from ecoindex_audit.scoring.thresholds import score_to_grade
from ecoindex_audit.scoring.weights import (
    DOM_WEIGHT,
    GHG_BASE_GCO2E,
    INDEX_MAX,
    INDEX_PIVOT,
    QUANTILE_STEP,
    REQUESTS_WEIGHT,
    SIZE_WEIGHT,
    TOTAL_WEIGHT,
    WATER_BASE_CL,
)

_CENTS = Decimal("0.01")


def round2(value: float) -> float:
    """Round to 2 decimals, ties away from zero on the exact float value."""
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_ecoindex(dom_size: float, request_count: float, size_mb: float) -> float:
    """Return the unrounded EcoIndex for the given measurements.

    Args:
        dom_size: Number of DOM elements.
        request_count: Number of network requests.
        size_mb: Transferred size in megabytes.
    """
    q_dom = compute_quantile(QUANTILES_DOM, dom_size)
    q_req = compute_quantile(QUANTILES_REQUESTS, request_count)
    q_size = compute_quantile(QUANTILES_SIZE, size_mb)

    return INDEX_MAX - QUANTILE_STEP * (
        DOM_WEIGHT * q_dom + REQUESTS_WEIGHT * q_req + SIZE_WEIGHT * q_size
    ) / TOTAL_WEIGHT


def compute_greenhouse_gas_emission(index: float) -> float:
    """Estimated greenhouse gas emission (gCO2e) for an EcoIndex."""
    return round2(GHG_BASE_GCO2E + GHG_BASE_GCO2E * (INDEX_PIVOT - index) / 100)


def compute_water_consumption(index: float) -> float:
    """Estimated water consumption (cl) for an EcoIndex."""
    return round2(WATER_BASE_CL + WATER_BASE_CL * (INDEX_PIVOT - index) / 100)


class EcoIndexCalculator:
    """Scores a page measurement end to end.

    Usage::

        calculator = EcoIndexCalculator()
        result = calculator.score(Measurement(dom_size=..., request_count=...,
                                              transferred_size_bytes=...))
    """

    def score(self, measurement: Measurement) -> EcoIndexResult:
        """Run the full scoring pipeline.

        Args:
            measurement: The page's DOM size, request count and
                transferred bytes.

        Returns:
            An ``EcoIndexResult`` holding the index, grade, both estimates
            and the echoed raw inputs.
        """
        index = compute_ecoindex(
            measurement.dom_size,
            measurement.request_count,
            measurement.transferred_size_mb,
        )
        return EcoIndexResult(
            index=index,
            grade=Grade(score_to_grade(index)),
            greenhouse_gas_emission=compute_greenhouse_gas_emission(index),
            water_consumption=compute_water_consumption(index),
            dom_size=measurement.dom_size,
            request_count=measurement.request_count,
            transferred_size_bytes=measurement.transferred_size_bytes,
        )


def compute_result(
    dom_size: int, request_count: int, transferred_size_bytes: int
) -> EcoIndexResult:
    """Build a ``Measurement`` from raw values and score it."""
    measurement = Measurement(
        dom_size=dom_size,
        request_count=request_count,
        transferred_size_bytes=transferred_size_bytes,
    )
    return EcoIndexCalculator().score(measurement)
