from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from seqalign.config import (
    DEFAULT_SCORING,
    INDEL_COST,
    LOG_LEVEL_ENV_VAR,
    MATCH_COST,
    MISMATCH_COST,
    ScoringScheme,
    resolve_log_level,
)


def test_default_scoring_uses_fixed_costs() -> None:
    assert (MATCH_COST, MISMATCH_COST, INDEL_COST) == (0, 1, 2)
    assert DEFAULT_SCORING.match == MATCH_COST
    assert DEFAULT_SCORING.mismatch == MISMATCH_COST
    assert DEFAULT_SCORING.indel == INDEL_COST
    assert DEFAULT_SCORING.penalty("x", "x") == 0
    assert DEFAULT_SCORING.penalty("x", "y") == 1


def test_scoring_scheme_rejects_negative_costs() -> None:
    with pytest.raises(ValidationError):
        ScoringScheme(indel=-1)


def test_scoring_scheme_is_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_SCORING.indel = 5  # type: ignore[misc]


def test_resolve_log_level_sources(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert resolve_log_level() == logging.WARNING
    assert resolve_log_level("debug") == logging.DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_log_level() == logging.INFO
    assert resolve_log_level("error") == logging.ERROR


def test_resolve_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        resolve_log_level("chatty")
