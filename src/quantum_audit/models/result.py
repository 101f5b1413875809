"""Scan result data models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .finding import Finding


class FileResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file: str
    findings: list[Finding] = Field(default=[], alias="vulnerabilities")
    risk_score: int = Field(default=100, ge=0, le=100, alias="riskScore")
    error: Optional[str] = None

    @property
    def is_vulnerable(self) -> bool:
        return bool(self.findings)

    def to_dict(self) -> dict:
        """Serialize to the camelCase record used by JSON reports."""
        data = self.model_dump(mode="json", by_alias=True)
        if self.error is None:
            data.pop("error")
        return data


class ProjectSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_files: int = Field(default=0, alias="totalFiles")
    vulnerable_files: int = Field(default=0, alias="vulnerableFiles")
    total_findings: int = Field(default=0, alias="totalVulnerabilities")
    by_type: dict[str, int] = Field(default={}, alias="byType")


class ProjectResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scanned: datetime
    files: list[FileResult] = []
    summary: ProjectSummary = ProjectSummary()
    risk_score: int = Field(default=100, ge=0, le=100, alias="riskScore")
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", by_alias=True)
        data["files"] = [f.to_dict() for f in self.files]
        if self.error is None:
            data.pop("error")
        return data
