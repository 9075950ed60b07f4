"""Tests for core Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ecoindex_audit.audit.models import Artifacts, AuditMeta, NetworkRecord
from ecoindex_audit.data.models import EcoIndexResult, Grade, Measurement


class TestMeasurement:
    """Tests for Measurement validation and computed fields."""

    def test_megabytes_exact(self):
        m = Measurement(dom_size=0, request_count=0, transferred_size_bytes=3_000_000)
        assert m.transferred_size_mb == 3

    def test_megabytes_round_half_up(self):
        assert Measurement(
            dom_size=0, request_count=0, transferred_size_bytes=1_500_000
        ).transferred_size_mb == 2
        assert Measurement(
            dom_size=0, request_count=0, transferred_size_bytes=2_500_000
        ).transferred_size_mb == 3

    def test_megabytes_round_down(self):
        m = Measurement(dom_size=0, request_count=0, transferred_size_bytes=2_499_999)
        assert m.transferred_size_mb == 2

    def test_rejects_negative_counts(self):
        with pytest.raises(ValidationError):
            Measurement(dom_size=-1, request_count=0, transferred_size_bytes=0)
        with pytest.raises(ValidationError):
            Measurement(dom_size=0, request_count=-3, transferred_size_bytes=0)
        with pytest.raises(ValidationError):
            Measurement(dom_size=0, request_count=0, transferred_size_bytes=-10)

    def test_frozen(self):
        m = Measurement(dom_size=1, request_count=1, transferred_size_bytes=1)
        with pytest.raises(ValidationError):
            m.dom_size = 2

    def test_dump_includes_megabytes(self):
        m = Measurement(dom_size=1, request_count=1, transferred_size_bytes=4_000_000)
        assert m.model_dump()["transferred_size_mb"] == 4


class TestGrade:
    """Tests for the Grade enum."""

    def test_seven_grades(self):
        assert [g.value for g in Grade] == ["A", "B", "C", "D", "E", "F", "G"]

    def test_colors(self):
        assert Grade.A.color == "green"
        assert Grade.B.color == "green"
        assert Grade.C.color == "yellow"
        assert Grade.D.color == "yellow"
        assert Grade.E.color == "red"
        assert Grade.G.color == "red"


class TestEcoIndexResult:
    """Tests for EcoIndexResult serialization."""

    def test_json_round_trip_keeps_grade(self, empty_page_result: EcoIndexResult):
        restored = EcoIndexResult.model_validate_json(empty_page_result.model_dump_json())
        assert restored.grade is Grade.A
        assert restored.index == empty_page_result.index

    def test_score_is_serialized(self, empty_page_result: EcoIndexResult):
        assert empty_page_result.model_dump()["score"] == 1.0


class TestHostModels:
    """Tests for artifact and metadata models."""

    def test_network_record_aliases(self):
        record = NetworkRecord.model_validate({"url": "https://a", "transferSize": 12})
        assert record.transfer_size == 12

    def test_network_record_field_names(self):
        record = NetworkRecord(url="https://a", transfer_size=12)
        assert record.model_dump(by_alias=True)["transferSize"] == 12

    def test_artifacts_from_host_json(self):
        artifacts = Artifacts.model_validate({
            "devtoolsLogs": {"defaultPass": [{"url": "https://a"}]},
            "DOMStats": {"totalBodyElements": 7},
        })
        assert artifacts.dom_stats.total_body_elements == 7
        assert len(artifacts.devtools_logs["defaultPass"]) == 1

    def test_artifacts_default_empty(self):
        artifacts = Artifacts()
        assert artifacts.devtools_logs == {}
        assert artifacts.dom_stats is None

    def test_audit_meta_dump_uses_host_names(self):
        meta = AuditMeta(
            id="x", title="t", failure_title="f", description="d",
            required_artifacts=["DOMStats"],
        )
        dumped = meta.model_dump(mode="json", by_alias=True)
        assert dumped["failureTitle"] == "f"
        assert dumped["scoreDisplayMode"] == "numeric"
        assert dumped["requiredArtifacts"] == ["DOMStats"]
