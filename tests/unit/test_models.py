"""Tests for model serialization."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from quantum_audit.models.finding import Category, Finding, Severity
from quantum_audit.models.result import FileResult, ProjectResult, ProjectSummary


def _finding(line=None) -> Finding:
    return Finding(
        category=Category.DIFFIE_HELLMAN,
        severity=Severity.HIGH,
        message="msg",
        fix="fix",
        line=line,
    )


class TestFinding:
    def test_serialized_field_names(self):
        data = _finding(line=3).model_dump(mode="json", by_alias=True)
        assert data == {
            "type": "Diffie-Hellman",
            "severity": "HIGH",
            "message": "msg",
            "fix": "fix",
            "line": 3,
        }

    def test_missing_line_serialized_as_na(self):
        data = _finding().model_dump(mode="json", by_alias=True)
        assert data["line"] == "N/A"

    def test_frozen(self):
        with pytest.raises(ValidationError):
            _finding().line = 4


class TestFileResult:
    def test_to_dict(self):
        result = FileResult(file="a.js", findings=[_finding(1)], risk_score=70)
        data = result.to_dict()
        assert set(data) == {"file", "vulnerabilities", "riskScore"}
        assert data["vulnerabilities"][0]["type"] == "Diffie-Hellman"

    def test_error_included_when_set(self):
        data = FileResult(file="a.js", risk_score=0, error="boom").to_dict()
        assert data["error"] == "boom"
        assert data["vulnerabilities"] == []

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            FileResult(file="a.js", risk_score=-5)


class TestProjectResult:
    def test_to_dict(self):
        result = ProjectResult(
            scanned=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            files=[FileResult(file="a.js", risk_score=0, error="boom")],
            summary=ProjectSummary(total_files=1, by_type={"RSA": 1}),
            risk_score=0,
        )
        data = result.to_dict()
        assert "error" not in data
        assert data["files"][0]["error"] == "boom"
        assert data["summary"] == {
            "totalFiles": 1,
            "vulnerableFiles": 0,
            "totalVulnerabilities": 0,
            "byType": {"RSA": 1},
        }
        assert data["riskScore"] == 0
        assert data["scanned"].startswith("2026-01-02T03:04:05")
        json.dumps(data)
