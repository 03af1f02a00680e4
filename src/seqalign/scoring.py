from __future__ import annotations

"""Summary statistics over an alignment."""

from typing import Any, Dict, Sequence

from .models import AlignmentStep, Op


def summarise(steps: Sequence[AlignmentStep]) -> Dict[str, Any]:
    if not steps:
        return {
            "length": 0,
            "matches": 0,
            "substitutions": 0,
            "deletions": 0,
            "insertions": 0,
            "total_cost": 0,
            "identity": 0.0,
        }

    counts = {op: 0 for op in Op}
    for step in steps:
        counts[step.op] += 1

    return {
        "length": len(steps),
        "matches": counts[Op.MATCH],
        "substitutions": counts[Op.SUB],
        "deletions": counts[Op.DEL],
        "insertions": counts[Op.INS],
        "total_cost": sum(step.cost for step in steps),
        "identity": counts[Op.MATCH] / len(steps),
    }
