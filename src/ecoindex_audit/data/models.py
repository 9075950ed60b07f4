# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the EcoIndex calculator.

This module defines the value objects exchanged between the scoring,
audit, reporting, and CLI layers. Every model is frozen: a result is
produced once per measurement and never updated afterwards.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Grade(str, Enum):
    """EcoIndex letter grade, from A (lowest impact) to G (highest impact)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @property
    def color(self) -> str:
        """Terminal / report color associated with this grade."""
        if self in (Grade.A, Grade.B):
            return "green"
        if self in (Grade.C, Grade.D):
            return "yellow"
        return "red"


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------

class Measurement(BaseModel):
    """The three raw page measurements an EcoIndex is computed from."""

    model_config = {"frozen": True, "populate_by_name": True}

    dom_size: int = Field(..., ge=0, description="Number of DOM elements in the page body")
    request_count: int = Field(..., ge=0, description="Number of network requests")
    transferred_size_bytes: int = Field(
        ..., ge=0, description="Total bytes transferred over the network"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def transferred_size_mb(self) -> int:
        """Transferred size in megabytes, rounded to the nearest integer.

        Halves round up rather than to even.
        """
        return math.floor(self.transferred_size_bytes / 1000 / 1000 + 0.5)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class EcoIndexResult(BaseModel):
    """Output of a single EcoIndex computation."""

    model_config = {"frozen": True, "populate_by_name": True}

    index: float = Field(..., description="Unrounded EcoIndex, nominally 0-100")
    grade: Grade
    greenhouse_gas_emission: float = Field(
        ..., description="Estimated emission in gCO2e, rounded to 2 decimals"
    )
    water_consumption: float = Field(
        ..., description="Estimated water consumption in cl, rounded to 2 decimals"
    )

    # Echoed inputs
    dom_size: int
    request_count: int
    transferred_size_bytes: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> float:
        """Normalized score for the host (index / 100, not clamped)."""
        return self.index / 100
