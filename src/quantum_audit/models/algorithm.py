"""Algorithm verdict data model."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

PARTIALLY = "partially"


class AlgorithmVerdict(BaseModel):
    """Quantum-safety verdict for a named algorithm.

    ``safe`` is True, False or "partially" for known algorithms and None
    when nothing is known about the name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    safe: Union[bool, Literal["partially"], None] = None
    replacement: Optional[str] = None
    note: Optional[str] = None

    @property
    def known(self) -> bool:
        return self.safe is not None

    def to_dict(self) -> dict:
        data: dict = {"safe": self.safe}
        if self.replacement:
            data["replacement"] = self.replacement
        if self.note:
            data["note"] = self.note
        return data
