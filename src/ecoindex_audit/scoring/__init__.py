# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""EcoIndex scoring: quantile interpolation, composite index and grades."""

from ecoindex_audit.scoring.engine import (
    EcoIndexCalculator,
    compute_ecoindex,
    compute_greenhouse_gas_emission,
    compute_result,
    compute_water_consumption,
)
from ecoindex_audit.scoring.quantiles import compute_quantile
from ecoindex_audit.scoring.thresholds import score_to_grade

__all__ = [
    "EcoIndexCalculator",
    "compute_ecoindex",
    "compute_greenhouse_gas_emission",
    "compute_quantile",
    "compute_result",
    "compute_water_consumption",
    "score_to_grade",
]
