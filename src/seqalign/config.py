from __future__ import annotations

"""Scoring constants, the scoring-scheme model, and logging settings."""

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MATCH_COST = 0
MISMATCH_COST = 1
INDEL_COST = 2

LOG_LEVEL_ENV_VAR = "SEQALIGN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class ScoringScheme(BaseModel):
    """Fixed costs used to fill and trace the alignment matrix."""

    model_config = ConfigDict(frozen=True)

    match: int = Field(default=MATCH_COST, ge=0)
    mismatch: int = Field(default=MISMATCH_COST, ge=0)
    indel: int = Field(default=INDEL_COST, ge=0)

    def penalty(self, a: str, b: str) -> int:
        """Cost of aligning symbol *a* against symbol *b*."""

        return self.match if a == b else self.mismatch


DEFAULT_SCORING = ScoringScheme()


def resolve_log_level(level: Optional[str] = None) -> int:
    """Turn a level name (or the environment default) into a logging level."""

    name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{name}'")
    return value
