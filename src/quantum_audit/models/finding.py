"""Finding data models."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

LINE_NOT_FOUND = "N/A"


class Category(str, Enum):
    RSA = "RSA"
    ECDSA = "ECDSA"
    DSA = "DSA"
    DIFFIE_HELLMAN = "Diffie-Hellman"
    AES_128 = "AES-128"


class Severity(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"


class Finding(BaseModel):
    """One detected category in one file.

    ``line`` is the first line matching the category's line pattern, or
    None when the category matched the whole text but no single line did.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: Category = Field(alias="type")
    severity: Severity
    message: str
    fix: str
    line: Optional[int] = None

    @field_serializer("line")
    def serialize_line(self, line: Optional[int]) -> Union[int, str]:
        return LINE_NOT_FOUND if line is None else line
