"""Typed result models for TrID scans."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class MatchRecord:
    """One candidate file type reported by TrID."""

    extension: str
    probability: float
    name: str
    mime_type: str = ""
    related_url: str = ""
    remarks: str = ""
    definition: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
