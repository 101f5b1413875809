"""Data models for scan results and algorithm verdicts."""

from .algorithm import AlgorithmVerdict
from .finding import Category, Finding, Severity
from .result import FileResult, ProjectResult, ProjectSummary

__all__ = [
    "AlgorithmVerdict",
    "Category",
    "FileResult",
    "Finding",
    "ProjectResult",
    "ProjectSummary",
    "Severity",
]
