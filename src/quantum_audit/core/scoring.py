"""Risk scoring and exit-code logic."""

from __future__ import annotations

from typing import Iterable

from ..models.finding import Finding, Severity

MAX_SCORE = 100
SEVERITY_PENALTY = {
    Severity.HIGH: 30,
    Severity.MEDIUM: 15,
}
DEFAULT_FAIL_UNDER = 60


def calculate_risk_score(findings: Iterable[Finding]) -> int:
    """Score a file from its findings.

    Starts at 100 and deducts a fixed amount per finding by severity,
    clamped to [0, 100]. Only the number of findings matters, not how many
    lines they touch.
    """
    score = MAX_SCORE
    for finding in findings:
        score -= SEVERITY_PENALTY.get(finding.severity, 0)
    return max(0, min(MAX_SCORE, score))


def risk_level(score: int) -> str:
    """Map a score to a coarse risk label."""
    if score >= 80:
        return "LOW"
    if score >= 60:
        return "MODERATE"
    if score >= 40:
        return "ELEVATED"
    return "CRITICAL"


def get_exit_code(score: int, fail_under: int = DEFAULT_FAIL_UNDER) -> int:
    """Map a project score to a process exit code."""
    return 1 if score < fail_under else 0
