"""Shared fixtures for quantum-audit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

RSA_SOURCE = "const rsa = crypto.generateKeyPairSync('rsa', { modulusLength: 2048 });\n"
ECDSA_SOURCE = "// uses ECDSA with secp256k1\nconst sign = crypto.createSign('SHA256');\n"
AES128_SOURCE = "const c = crypto.createCipheriv('aes-128-cbc', key, iv);\n"
CLEAN_SOURCE = "export function add(a, b) {\n  return a + b;\n}\n"


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a small JS project with one vulnerable and one clean file."""
    project = tmp_path / "test-project"
    project.mkdir()
    (project / "src").mkdir()
    (project / "src" / "keys.js").write_text(RSA_SOURCE, encoding="utf-8")
    (project / "src" / "math.ts").write_text(CLEAN_SOURCE, encoding="utf-8")
    (project / "README.md").write_text("# Uses RSA 2048\n", encoding="utf-8")
    return project


@pytest.fixture
def clean_project(tmp_path: Path) -> Path:
    project = tmp_path / "clean-project"
    project.mkdir()
    (project / "index.js").write_text(CLEAN_SOURCE, encoding="utf-8")
    return project


@pytest.fixture
def vulnerable_project(tmp_path: Path) -> Path:
    """Project whose worst file scores below the default fail threshold."""
    project = tmp_path / "vulnerable-project"
    project.mkdir()
    (project / "crypto.js").write_text(
        RSA_SOURCE + ECDSA_SOURCE + AES128_SOURCE, encoding="utf-8"
    )
    return project


@pytest.fixture
def initialized_project(tmp_project: Path) -> Path:
    """Project with a .quantum-audit/config.yaml."""
    qa_dir = tmp_project / ".quantum-audit"
    qa_dir.mkdir()
    (qa_dir / "config.yaml").write_text(
        "output:\n  format: json\n\nci:\n  fail_under: 90\n",
        encoding="utf-8",
    )
    return tmp_project
