"""Static quantum-safety verdicts for well-known algorithms."""

from __future__ import annotations

from ..models.algorithm import PARTIALLY, AlgorithmVerdict

ALGORITHMS: tuple[AlgorithmVerdict, ...] = (
    AlgorithmVerdict(name="RSA", safe=False, replacement="NTRU or Kyber"),
    AlgorithmVerdict(name="ECDSA", safe=False, replacement="FALCON or Dilithium"),
    AlgorithmVerdict(name="DSA", safe=False, replacement="FALCON"),
    AlgorithmVerdict(name="Diffie-Hellman", safe=False, replacement="Kyber"),
    AlgorithmVerdict(
        name="AES-128",
        safe=PARTIALLY,
        replacement="AES-256-GCM",
        note="Grover's algorithm halves security",
    ),
    AlgorithmVerdict(name="AES-256", safe=True, note="128-bit quantum security"),
    AlgorithmVerdict(name="SHA-256", safe=True, note="128-bit quantum security"),
    AlgorithmVerdict(name="SHA-3", safe=True, note="Quantum-resistant design"),
    AlgorithmVerdict(name="ChaCha20", safe=True, note="256-bit security"),
)

_BY_KEY: dict[str, AlgorithmVerdict] = {a.name.upper(): a for a in ALGORITHMS}


def check_algorithm(name: str) -> AlgorithmVerdict:
    """Look up an algorithm by name, case-insensitively.

    Unknown names return a verdict with ``safe=None`` rather than raising.
    """
    verdict = _BY_KEY.get(name.strip().upper())
    if verdict is None:
        return AlgorithmVerdict(name=name)
    return verdict
