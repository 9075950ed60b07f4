# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""EcoIndex audit: adapts host artifacts to the calculator.

The formula comes from https://github.com/cnumr/GreenIT-Analysis and
www.ecoindex.fr.
"""

from __future__ import annotations

import logging

from ecoindex_audit.audit.models import (
    DEFAULT_PASS,
    Artifacts,
    AuditMeta,
    AuditProduct,
    ScoreDisplayMode,
    TableDetails,
    TableHeading,
)
from ecoindex_audit.data.models import EcoIndexResult, Measurement
from ecoindex_audit.scoring.engine import EcoIndexCalculator

logger = logging.getLogger(__name__)

REQUIRED_ARTIFACTS = ["devtoolsLogs", "DOMStats"]

# Column order is part of the host contract.
HEADINGS: list[TableHeading] = [
    TableHeading(key="grade", item_type="text", text="Grade"),
    TableHeading(key="greenhouseGasesEmission", item_type="text", text="GHG (gCO2e)"),
    TableHeading(key="waterConsumption", item_type="text", text="Water (cl)"),
    TableHeading(key="domSize", item_type="text", text="DOM size"),
    TableHeading(key="numberOfRequests", item_type="text", text="Requests number"),
    TableHeading(key="sizeOfRequests", item_type="bytes", text="Requests size"),
]


class MissingArtifactError(KeyError):
    """A required artifact was not supplied by the host."""


def measurement_from_artifacts(
    artifacts: Artifacts, pass_name: str = DEFAULT_PASS
) -> Measurement:
    """Translate host artifacts into a ``Measurement``.

    Every network record counts as a request. Records without a transfer
    size (or with a zero size) add nothing to the transferred total.
    """
    if pass_name not in artifacts.devtools_logs:
        raise MissingArtifactError(f"No devtools log for pass '{pass_name}'")
    if artifacts.dom_stats is None:
        raise MissingArtifactError("DOMStats artifact is missing")

    records = artifacts.devtools_logs[pass_name]
    size_of_requests = 0
    for record in records:
        if not record.transfer_size:
            continue
        size_of_requests += record.transfer_size

    return Measurement(
        dom_size=artifacts.dom_stats.total_body_elements,
        request_count=len(records),
        transferred_size_bytes=size_of_requests,
    )


def result_row(result: EcoIndexResult) -> dict[str, object]:
    """Flatten a result into a table item keyed by heading keys."""
    return {
        "ecoIndex": result.index,
        "grade": result.grade.value,
        "greenhouseGasesEmission": result.greenhouse_gas_emission,
        "waterConsumption": result.water_consumption,
        "domSize": result.dom_size,
        "numberOfRequests": result.request_count,
        "sizeOfRequests": result.transferred_size_bytes,
    }


def make_table_details(results: list[EcoIndexResult]) -> TableDetails:
    """Build the details table for one or more results."""
    return TableDetails(headings=HEADINGS, items=[result_row(r) for r in results])


class EcoindexAudit:
    """Environmental impact audit based on the EcoIndex.

    Usage::

        product = EcoindexAudit().audit(artifacts)
        product.score  # index / 100
    """

    def __init__(self, calculator: EcoIndexCalculator | None = None) -> None:
        self.calculator = calculator or EcoIndexCalculator()

    @staticmethod
    def meta() -> AuditMeta:
        return AuditMeta(
            id="ecoindex",
            title="Environmental impact is low",
            failure_title="Environmental impact is too high",
            description=(
                "The ecoindex evaluates the environmental performance achieved by a "
                "website / online service with regard to objective technical "
                "parameters: number of DOM elements, number of HTTP requests, "
                "URL weight (KB transferred)."
            ),
            score_display_mode=ScoreDisplayMode.numeric,
            required_artifacts=list(REQUIRED_ARTIFACTS),
        )

    def evaluate(
        self, artifacts: Artifacts, pass_name: str = DEFAULT_PASS
    ) -> EcoIndexResult:
        """Score the page described by *artifacts*."""
        measurement = measurement_from_artifacts(artifacts, pass_name)
        logger.debug(
            "Measured dom_size=%d requests=%d transferred=%d bytes",
            measurement.dom_size,
            measurement.request_count,
            measurement.transferred_size_bytes,
        )
        result = self.calculator.score(measurement)
        logger.debug("EcoIndex %.4f, grade %s", result.index, result.grade.value)
        return result

    def audit(
        self, artifacts: Artifacts, pass_name: str = DEFAULT_PASS
    ) -> AuditProduct:
        """Run the audit and package the product for the host."""
        return self.package(self.evaluate(artifacts, pass_name))

    @staticmethod
    def package(result: EcoIndexResult) -> AuditProduct:
        """Wrap a result in the product shape the host expects."""
        return AuditProduct(
            score=result.score,
            display_value="",
            details=make_table_details([result]),
        )
