from __future__ import annotations

"""Distance-only computation with a single rolling row."""

from typing import Sequence

from ..config import DEFAULT_SCORING, ScoringScheme


def weighted_distance(
    a: Sequence[str] | str,
    b: Sequence[str] | str,
    scoring: ScoringScheme = DEFAULT_SCORING,
) -> int:
    """Return the weighted edit distance between *a* and *b*.

    Uses the same costs as :class:`~seqalign.engine.AlignmentEngine` but keeps
    only one row of the matrix, so memory grows with the shorter input. No
    traceback is possible from the result.
    """

    if a == b and scoring.match == 0:
        return 0
    if len(a) < len(b):
        a, b = b, a
    indel = scoring.indel
    previous = [indel * j for j in range(len(b) + 1)]
    for i, char_a in enumerate(a, start=1):
        current = [indel * i]
        for j, char_b in enumerate(b, start=1):
            insert_cost = current[j - 1] + indel
            delete_cost = previous[j] + indel
            replace_cost = previous[j - 1] + scoring.penalty(char_a, char_b)
            current.append(min(insert_cost, delete_cost, replace_cost))
        previous = current
    return previous[-1]
