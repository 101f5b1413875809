"""Tests for core/algorithms.py."""

from __future__ import annotations

import pytest

from quantum_audit.core.algorithms import ALGORITHMS, check_algorithm


class TestCheckAlgorithm:
    def test_table_size(self):
        assert len(ALGORITHMS) == 9

    def test_aes256_safe(self):
        verdict = check_algorithm("AES-256")
        assert verdict.safe is True
        assert verdict.note == "128-bit quantum security"
        assert verdict.to_dict() == {"safe": True, "note": "128-bit quantum security"}

    def test_unknown_name(self):
        verdict = check_algorithm("quantum-foo")
        assert not verdict.known
        assert verdict.safe is None
        assert verdict.name == "quantum-foo"

    def test_vulnerable(self):
        verdict = check_algorithm("RSA")
        assert verdict.safe is False
        assert verdict.replacement == "NTRU or Kyber"

    def test_partially(self):
        verdict = check_algorithm("AES-128")
        assert verdict.safe == "partially"
        assert verdict.replacement == "AES-256-GCM"
        assert verdict.note == "Grover's algorithm halves security"

    @pytest.mark.parametrize("name", ["rsa", "diffie-hellman", "CHACHA20", " sha-3 "])
    def test_case_insensitive(self, name: str):
        assert check_algorithm(name).known

    def test_canonical_name_returned(self):
        assert check_algorithm("chacha20").name == "ChaCha20"
