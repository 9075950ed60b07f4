# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Measurement and result value objects."""

from ecoindex_audit.data.models import EcoIndexResult, Grade, Measurement

__all__ = [
    "EcoIndexResult",
    "Grade",
    "Measurement",
]
