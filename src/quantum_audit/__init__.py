"""quantum-audit: find quantum-vulnerable cryptography in JavaScript/TypeScript code."""

__version__ = "1.0.0"

from .core.algorithms import check_algorithm
from .core.report import generate_report
from .core.scanner import scan_file, scan_project

audit = scan_project

__all__ = [
    "__version__",
    "audit",
    "check_algorithm",
    "generate_report",
    "scan_file",
    "scan_project",
]
