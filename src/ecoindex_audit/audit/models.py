# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Host-side artifact and audit output models.

Artifacts arrive already collected by the auditing host. Field aliases
follow the host's camelCase JSON so exports can be validated directly;
``populate_by_name`` keeps the snake_case names usable from Python.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

DEFAULT_PASS = "defaultPass"


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------

class NetworkRecord(BaseModel):
    """A single network request from the page-load log."""

    model_config = {"frozen": True, "populate_by_name": True}

    url: str = Field(default="", description="Requested URL")
    resource_type: str | None = Field(default=None, alias="resourceType")
    transfer_size: int | None = Field(
        default=None, alias="transferSize",
        description="Bytes transferred over the network, headers included",
    )


class DOMStats(BaseModel):
    """DOM statistics snapshot of the loaded page."""

    model_config = {"frozen": True, "populate_by_name": True}

    total_body_elements: int = Field(..., ge=0, alias="totalBodyElements")
    depth: dict[str, Any] | None = None
    width: dict[str, Any] | None = None


class Artifacts(BaseModel):
    """Artifacts the host supplies to the audit."""

    model_config = {"frozen": True, "populate_by_name": True}

    devtools_logs: dict[str, list[NetworkRecord]] = Field(
        default_factory=dict, alias="devtoolsLogs",
        description="Network records keyed by pass name",
    )
    dom_stats: DOMStats | None = Field(default=None, alias="DOMStats")


# ---------------------------------------------------------------------------
# Audit metadata
# ---------------------------------------------------------------------------

class ScoreDisplayMode(str, Enum):
    """How the host presents an audit score."""

    numeric = "numeric"
    binary = "binary"
    informative = "informative"


class AuditMeta(BaseModel):
    """Static description of an audit, as registered with the host."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    title: str
    failure_title: str = Field(..., alias="failureTitle")
    description: str
    score_display_mode: ScoreDisplayMode = Field(
        default=ScoreDisplayMode.numeric, alias="scoreDisplayMode"
    )
    required_artifacts: list[str] = Field(
        default_factory=list, alias="requiredArtifacts"
    )


# ---------------------------------------------------------------------------
# Audit output
# ---------------------------------------------------------------------------

class TableHeading(BaseModel):
    """One column of a details table."""

    model_config = {"frozen": True, "populate_by_name": True}

    key: str
    item_type: Literal["text", "bytes", "numeric", "url"] = Field(
        default="text", alias="itemType"
    )
    text: str


class TableDetails(BaseModel):
    """Tabular details attached to an audit product."""

    model_config = {"frozen": True, "populate_by_name": True}

    type: Literal["table"] = "table"
    headings: list[TableHeading]
    items: list[dict[str, Any]] = Field(default_factory=list)


class AuditProduct(BaseModel):
    """What an audit hands back to the host."""

    model_config = {"frozen": True, "populate_by_name": True}

    score: float = Field(..., description="Normalized score; may leave [0, 1] at extremes")
    display_value: str = Field(default="", alias="displayValue")
    details: TableDetails
