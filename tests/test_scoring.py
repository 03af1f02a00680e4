from __future__ import annotations

import pytest

from seqalign.engine import AlignmentEngine
from seqalign.scoring import summarise


def test_summarise_counts_operations() -> None:
    steps = AlignmentEngine("AACAGTTACC", "TAAGGTCA").steps()
    summary = summarise(steps)
    assert summary["length"] == 10
    assert summary["matches"] == 5
    assert summary["substitutions"] == 3
    assert summary["deletions"] == 2
    assert summary["insertions"] == 0
    assert summary["total_cost"] == 7
    assert summary["identity"] == pytest.approx(0.5)


def test_summarise_empty_alignment() -> None:
    summary = summarise([])
    assert summary["length"] == 0
    assert summary["identity"] == 0.0
    assert summary["total_cost"] == 0
