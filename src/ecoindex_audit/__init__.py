# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""EcoIndex Audit - environmental impact score for web pages."""

__version__ = "0.1.0"

from ecoindex_audit.data.models import EcoIndexResult, Grade, Measurement
from ecoindex_audit.scoring.engine import (
    EcoIndexCalculator,
    compute_ecoindex,
    compute_greenhouse_gas_emission,
    compute_result,
    compute_water_consumption,
)
from ecoindex_audit.scoring.quantiles import compute_quantile
from ecoindex_audit.scoring.thresholds import score_to_grade
from ecoindex_audit.audit.ecoindex import EcoindexAudit, MissingArtifactError
from ecoindex_audit.audit.models import Artifacts, AuditProduct
from ecoindex_audit.config import PluginConfig, default_plugin_config, load_config

__all__ = [
    "Artifacts",
    "AuditProduct",
    "EcoIndexCalculator",
    "EcoIndexResult",
    "EcoindexAudit",
    "Grade",
    "Measurement",
    "MissingArtifactError",
    "PluginConfig",
    "compute_ecoindex",
    "compute_greenhouse_gas_emission",
    "compute_quantile",
    "compute_result",
    "compute_water_consumption",
    "default_plugin_config",
    "load_config",
    "score_to_grade",
]
