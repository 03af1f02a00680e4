from __future__ import annotations

"""Result types produced by the alignment engine."""

import enum
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from pydantic import BaseModel, Field

GAP = "-"


class Op(str, enum.Enum):
    MATCH = "match"
    SUB = "sub"
    DEL = "del"
    INS = "ins"


@dataclass(frozen=True)
class AlignmentStep:
    """One edit operation in a traceback, read from the start of both sequences."""

    op: Op
    source: str
    target: str
    cost: int

    def to_line(self) -> str:
        return f"{self.source} {self.target} {self.cost}"

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["op"] = self.op.value
        return payload


class AlignmentReport(BaseModel):
    """Machine-readable view of a single alignment run."""

    first: str
    second: str
    distance: int
    steps: List[Dict[str, Any]] = Field(default_factory=list)
    summary: Dict[str, Any] = Field(default_factory=dict)
