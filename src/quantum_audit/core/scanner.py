"""File and project scanning.

Drives the pattern classifier over one file or a directory tree and folds
the results into scored FileResult / ProjectResult objects. Read and
traversal errors are returned as data, never raised.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Union

from ..models.finding import Finding
from ..models.result import FileResult, ProjectResult, ProjectSummary
from .patterns import classify
from .scoring import MAX_SCORE, calculate_risk_score

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EXCLUDE_DIRS = frozenset({"node_modules", ".git", "dist", "build", "coverage"})

INCLUDE_EXTENSIONS = frozenset({".js", ".ts", ".jsx", ".tsx"})

PathLike = Union[str, os.PathLike]


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------

def _should_include_file(name: str) -> bool:
    """Check if a file name has a JavaScript/TypeScript extension."""
    return os.path.splitext(name)[1] in INCLUDE_EXTENSIONS


def iter_source_files(root: PathLike) -> Iterator[Path]:
    """Yield source files under ``root`` in directory-listing order.

    Subdirectories are entered depth-first as they are encountered, except
    those named in EXCLUDE_DIRS. OSErrors from listing propagate.
    """
    with os.scandir(root) as it:
        entries = list(it)
    for entry in entries:
        if entry.is_dir():
            if entry.name not in EXCLUDE_DIRS:
                yield from iter_source_files(entry.path)
        elif _should_include_file(entry.name):
            yield Path(entry.path)


# ---------------------------------------------------------------------------
# Single file
# ---------------------------------------------------------------------------

def scan_content(content: str) -> list[Finding]:
    """Classify text and turn each detected category into a Finding."""
    return [
        Finding(
            category=d.rule.category,
            severity=d.rule.severity,
            message=d.rule.message,
            fix=d.rule.fix,
            line=d.line,
        )
        for d in classify(content)
    ]


def scan_file(file_path: PathLike) -> FileResult:
    """Scan one file of any extension."""
    path = Path(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return FileResult(file=str(path), findings=[], risk_score=0, error=str(e))

    findings = scan_content(content)
    return FileResult(
        file=str(path),
        findings=findings,
        risk_score=calculate_risk_score(findings),
    )


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------

def scan_project(project_path: PathLike = ".") -> ProjectResult:
    """Scan every source file under ``project_path``.

    The project score is the lowest file score, 100 for an empty project.
    If traversal fails part way, the result carries the error and the
    summary of the files scanned before the failure.
    """
    scanned = datetime.now(timezone.utc)
    files: list[FileResult] = []
    by_type: dict[str, int] = {}
    vulnerable_files = 0
    total_findings = 0
    risk_score = MAX_SCORE
    error = None

    try:
        for path in iter_source_files(project_path):
            result = scan_file(path)
            files.append(result)

            if result.findings:
                vulnerable_files += 1
                total_findings += len(result.findings)
                for finding in result.findings:
                    key = finding.category.value
                    by_type[key] = by_type.get(key, 0) + 1

            risk_score = min(risk_score, result.risk_score)
    except OSError as e:
        error = str(e)

    return ProjectResult(
        scanned=scanned,
        files=files,
        summary=ProjectSummary(
            total_files=len(files),
            vulnerable_files=vulnerable_files,
            total_findings=total_findings,
            by_type=by_type,
        ),
        risk_score=risk_score,
        error=error,
    )
