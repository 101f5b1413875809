"""Pattern classifier for quantum-vulnerable cryptography.

Each category carries a list of detection patterns evaluated against the
whole file text (any match wins) and one narrower pattern used to locate a
representative line. The two are allowed to disagree: a file can match a
category through a library name that no single line pattern covers, in
which case the line is reported as not found.

This is lexical matching only. Comments, strings and identifiers count the
same as real API calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..models.finding import Category, Severity

# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CategoryRule:
    category: Category
    severity: Severity
    message: str
    fix: str
    patterns: tuple[re.Pattern, ...]
    line_pattern: re.Pattern


@dataclass(frozen=True)
class Detection:
    rule: CategoryRule
    line: Optional[int]


def _compile(*patterns: str, flags: int = 0) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p, flags) for p in patterns)


# "dsa" is excluded right after "ec" so an ECDSA mention is not also a DSA hit.
_DSA = r"(?<!ec)dsa"

RSA_RULE = CategoryRule(
    category=Category.RSA,
    severity=Severity.HIGH,
    message="RSA encryption detected - vulnerable to quantum attacks via Shor's algorithm",
    fix="Replace with NTRU or Kyber (post-quantum algorithms)",
    patterns=(
        re.compile(r"RSA|rsa", re.IGNORECASE),
        re.compile(r"modulusLength.*(2048|4096)"),
        re.compile(r"crypto\.generateKeyPair.*rsa", re.IGNORECASE),
        re.compile(r"crypto\.publicEncrypt|crypto\.privateDecrypt"),
        re.compile(r"forge\.rsa|node-rsa|jsrsasign", re.IGNORECASE),
        # Alternation binds loosely: any bare 2048/4096 counts.
        re.compile(r"keySize.*1024|2048|4096"),
    ),
    line_pattern=re.compile(
        r"RSA|rsa|generateKeyPair.*rsa|modulusLength.*(2048|4096)", re.IGNORECASE
    ),
)

ECDSA_RULE = CategoryRule(
    category=Category.ECDSA,
    severity=Severity.HIGH,
    message="Elliptic Curve cryptography detected - vulnerable to quantum attacks",
    fix="Replace with FALCON or Dilithium (post-quantum algorithms)",
    patterns=(
        re.compile(r"ECDSA|ecdsa", re.IGNORECASE),
        re.compile(r"elliptic.*curve", re.IGNORECASE),
        re.compile(r"crypto\.createSign.*sha256|sha384|sha512"),
        re.compile(r"crypto\.createVerify"),
        re.compile(r"secp256k1|secp384r1|prime256v1"),
        # Edwards/Montgomery curves are flagged too; the classifier does not
        # tell curve families apart.
        re.compile(r"ed25519|ed448", re.IGNORECASE),
        re.compile(r"curve25519|curve448", re.IGNORECASE),
    ),
    line_pattern=re.compile(
        r"ECDSA|ecdsa|elliptic.*curve|secp256k1|prime256v1", re.IGNORECASE
    ),
)

AES128_RULE = CategoryRule(
    category=Category.AES_128,
    severity=Severity.MEDIUM,
    message="AES-128 detected - quantum computers may weaken via Grover's algorithm",
    fix="Upgrade to AES-256-GCM or use LightSaber",
    patterns=_compile(
        r"AES-128|aes-128",
        r"crypto\.createCipheriv.*aes-128",
        r"aes128",
        flags=re.IGNORECASE,
    ),
    line_pattern=re.compile(r"AES-128|aes-128|createCipheriv.*aes-128", re.IGNORECASE),
)

DSA_RULE = CategoryRule(
    category=Category.DSA,
    severity=Severity.HIGH,
    message="DSA signatures detected - vulnerable to quantum attacks",
    fix="Replace with FALCON (post-quantum algorithm)",
    patterns=_compile(_DSA, rf"createSign.*{_DSA}", flags=re.IGNORECASE),
    line_pattern=re.compile(rf"{_DSA}|createSign.*{_DSA}", re.IGNORECASE),
)

DIFFIE_HELLMAN_RULE = CategoryRule(
    category=Category.DIFFIE_HELLMAN,
    severity=Severity.HIGH,
    message="Diffie-Hellman key exchange detected - vulnerable to quantum attacks",
    fix="Replace with post-quantum key encapsulation (Kyber)",
    patterns=_compile(
        r"DiffieHellman|diffie.*hellman",
        r"createDiffieHellman",
        r"ECDH|ecdh",
        flags=re.IGNORECASE,
    ),
    line_pattern=re.compile(
        r"DiffieHellman|diffie.*hellman|createDiffieHellman", re.IGNORECASE
    ),
)

# Check order is part of the result contract: findings are reported in it.
RULES: tuple[CategoryRule, ...] = (
    RSA_RULE,
    ECDSA_RULE,
    AES128_RULE,
    DSA_RULE,
    DIFFIE_HELLMAN_RULE,
)

RULES_BY_CATEGORY: dict[Category, CategoryRule] = {r.category: r for r in RULES}


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def detect(content: str, category: Category) -> bool:
    """Return True if any detection pattern for ``category`` matches the text."""
    rule = RULES_BY_CATEGORY[category]
    return any(p.search(content) for p in rule.patterns)


def locate_line(content: str, category: Category) -> Optional[int]:
    """Return the 1-based number of the first line matching the line pattern."""
    pattern = RULES_BY_CATEGORY[category].line_pattern
    for number, line in enumerate(content.split("\n"), start=1):
        if pattern.search(line):
            return number
    return None


def classify(content: str) -> list[Detection]:
    """Run every category against ``content`` in check order."""
    detections: list[Detection] = []
    for rule in RULES:
        if detect(content, rule.category):
            detections.append(Detection(rule=rule, line=locate_line(content, rule.category)))
    return detections
