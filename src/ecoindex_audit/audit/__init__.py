# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Host audit adapter for the EcoIndex calculator."""

from ecoindex_audit.audit.ecoindex import (
    HEADINGS,
    EcoindexAudit,
    MissingArtifactError,
    make_table_details,
    measurement_from_artifacts,
)
from ecoindex_audit.audit.models import (
    Artifacts,
    AuditMeta,
    AuditProduct,
    DOMStats,
    NetworkRecord,
    TableDetails,
)

__all__ = [
    "Artifacts",
    "AuditMeta",
    "AuditProduct",
    "DOMStats",
    "EcoindexAudit",
    "HEADINGS",
    "MissingArtifactError",
    "NetworkRecord",
    "TableDetails",
    "make_table_details",
    "measurement_from_artifacts",
]
