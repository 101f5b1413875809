"""Report rendering for scan results.

Both renderers are pure functions of a result object.
"""

from __future__ import annotations

import json
from typing import Union

from ..models.finding import LINE_NOT_FOUND, Category, Severity
from ..models.result import FileResult, ProjectResult
from .patterns import RULES_BY_CATEGORY
from .scoring import risk_level

RULE = "-" * 50

RECOMMENDATIONS = (
    "1. Replace RSA with NTRU/Kyber",
    "2. Replace ECDSA with FALCON/Dilithium",
    "3. Upgrade AES-128 to AES-256-GCM",
    "4. Implement hybrid approach for transition",
    "5. Stay updated with NIST PQC standards",
)

THREAT_TIMELINE = (
    "2024-2026: Quantum computers capable of breaking RSA-2048",
    "2026-2030: Widespread quantum threat emergence",
    "2030+: Current encryption completely broken",
)


def to_json(result: Union[FileResult, ProjectResult]) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def _severity_for_type(type_name: str) -> Severity:
    return RULES_BY_CATEGORY[Category(type_name)].severity


def _section(lines: list[str], title: str) -> None:
    lines.append("")
    lines.append(title)
    lines.append(RULE)


def render_project_report(result: ProjectResult) -> str:
    """Render the full text audit report for a project scan."""
    summary = result.summary
    lines: list[str] = []
    lines.append("=" * 56)
    lines.append("  QUANTUM-SAFE AUDIT REPORT")
    lines.append("=" * 56)

    _section(lines, "SUMMARY")
    lines.append(f"Scanned: {summary.total_files} files")
    lines.append(f"Vulnerable files: {summary.vulnerable_files}")
    lines.append(f"Total vulnerabilities: {summary.total_findings}")
    lines.append(
        f"Risk Score: {result.risk_score}/100 ({risk_level(result.risk_score)} RISK)"
    )
    if result.error:
        lines.append(f"Scan error: {result.error}")

    if summary.by_type:
        _section(lines, "VULNERABILITY BREAKDOWN")
        for type_name, count in summary.by_type.items():
            severity = _severity_for_type(type_name)
            plural = "s" if count > 1 else ""
            lines.append(f"{type_name} [{severity.value}]: {count} instance{plural}")

    unreadable = [f for f in result.files if f.error]
    if summary.vulnerable_files > 0 or unreadable:
        _section(lines, "DETAILED FINDINGS")
        for file_result in result.files:
            if file_result.error:
                lines.append("")
                lines.append(f"{file_result.file}:")
                lines.append(f"  Error: {file_result.error}")
            elif file_result.findings:
                lines.append("")
                lines.append(f"{file_result.file}:")
                lines.extend(_finding_lines(file_result, indent="  "))

    _section(lines, "RECOMMENDATIONS")
    if result.risk_score >= 80:
        lines.append("Your code is relatively quantum-safe. Continue monitoring.")
    elif result.risk_score >= 60:
        lines.append("Medium risk detected. Plan migration within 6-12 months.")
        lines.append("   Consider implementing hybrid cryptography.")
    else:
        lines.append("High risk detected! Immediate action required.")
        lines.append("   Prioritize migration of critical systems.")
    lines.append("")
    lines.extend(RECOMMENDATIONS)

    _section(lines, "QUANTUM THREAT TIMELINE")
    lines.extend(THREAT_TIMELINE)
    lines.append("")
    lines.append("The best time to migrate was yesterday. The second best is now.")

    return "\n".join(lines)


def _finding_lines(file_result: FileResult, indent: str = "") -> list[str]:
    lines: list[str] = []
    for index, finding in enumerate(file_result.findings, start=1):
        line = finding.line if finding.line is not None else LINE_NOT_FOUND
        lines.append(f"{indent}{index}. [{finding.category.value}] {finding.message}")
        lines.append(f"{indent}   Line {line} | Fix: {finding.fix}")
    return lines


def render_file_report(result: FileResult) -> str:
    """Render the text report for a single-file scan."""
    lines = [f"Scanning: {result.file}", "-" * 60]
    if result.error:
        lines.append(f"Error: {result.error}")
    elif not result.findings:
        lines.append("No quantum vulnerabilities found!")
    else:
        lines.append(f"Found {len(result.findings)} quantum vulnerabilities:")
        lines.append(f"Risk Score: {result.risk_score}/100")
        lines.append("")
        lines.extend(_finding_lines(result))
    return "\n".join(lines)


def generate_report(result: Union[FileResult, ProjectResult], format: str = "text") -> str:
    """Render a scan result as "text" or "json"."""
    if format == "json":
        return to_json(result)
    if isinstance(result, FileResult):
        return render_file_report(result)
    return render_project_report(result)
