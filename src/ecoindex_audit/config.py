# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Plugin registration model and YAML loader."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from ecoindex_audit.audit.models import DEFAULT_PASS

AUDIT_ID = "ecoindex"
AUDIT_PATH = "ecoindex_audit.audit.ecoindex:EcoindexAudit"


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------

class AuditRef(BaseModel):
    """Reference from a category to an audit, with its weight in the category."""

    id: str
    weight: float = Field(default=1, ge=0)


class CategoryConfig(BaseModel):
    """Report category the audit contributes to."""

    model_config = {"populate_by_name": True}

    title: str = Field(default="EcoIndex")
    description: str = Field(
        default="The environment impact of the web page according to ecoindex.fr"
    )
    audit_refs: list[AuditRef] = Field(
        default_factory=lambda: [AuditRef(id=AUDIT_ID, weight=1)],
        alias="auditRefs",
        min_length=1,
    )


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

class AuditPath(BaseModel):
    """Location of an audit implementation, as ``module:Class``."""

    path: str


class PluginConfig(BaseModel):
    """Plugin registration handed to the host."""

    model_config = {"populate_by_name": True}

    audits: list[AuditPath] = Field(
        default_factory=lambda: [AuditPath(path=AUDIT_PATH)]
    )
    category: CategoryConfig = Field(default_factory=CategoryConfig)
    default_pass: str = Field(
        default=DEFAULT_PASS, alias="defaultPass",
        description="Devtools log pass the audit reads network records from",
    )

    def weight_of(self, audit_id: str) -> float:
        """Weight of *audit_id* in the category; 0 if it is not referenced."""
        for ref in self.category.audit_refs:
            if ref.id == audit_id:
                return ref.weight
        return 0


def default_plugin_config() -> PluginConfig:
    """Return the built-in plugin registration."""
    return PluginConfig()


def load_config(path: str | Path) -> PluginConfig:
    """Load a PluginConfig from a YAML file. Omitted keys keep their defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    return PluginConfig.model_validate(raw)
