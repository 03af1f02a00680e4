from __future__ import annotations

"""Global alignment engine: cost matrix, optimal distance, and traceback."""

import logging
from typing import List

from .config import DEFAULT_SCORING, ScoringScheme
from .errors import TracebackError
from .models import GAP, AlignmentStep, Op

logger = logging.getLogger(__name__)


def min3(a: int, b: int, c: int) -> int:
    """Return the smallest of three integers."""

    return min(min(a, b), c)


class AlignmentEngine:
    """Needleman-Wunsch style edit distance between two sequences.

    Cell ``(i, j)`` of the matrix holds the cheapest way to turn
    ``first[i:]`` into ``second[j:]``, so the matrix is filled from the
    bottom-right corner and the traceback walks forward from ``(0, 0)``.
    """

    def __init__(
        self, first: str, second: str, *, scoring: ScoringScheme = DEFAULT_SCORING
    ) -> None:
        self.first: List[str] = list(first.strip())
        self.second: List[str] = list(second.strip())
        self.n = len(self.first)
        self.m = len(self.second)
        self.scoring = scoring
        self.matrix: List[List[int]] = [[0] * (self.m + 1) for _ in range(self.n + 1)]
        self.filled = False
        logger.debug("Allocated %dx%d cost matrix", self.n + 1, self.m + 1)

    def penalty(self, a: str, b: str) -> int:
        return self.scoring.penalty(a, b)

    def opt_distance(self) -> int:
        """Populate the matrix and return the optimal edit distance."""

        n, m = self.n, self.m
        indel = self.scoring.indel
        opt = self.matrix
        opt[n][m] = 0
        for i in range(n - 1, -1, -1):
            opt[i][m] = indel * (n - i)
        for j in range(m - 1, -1, -1):
            opt[n][j] = indel * (m - j)

        for i in range(n - 1, -1, -1):
            x = self.first[i]
            row, below = opt[i], opt[i + 1]
            for j in range(m - 1, -1, -1):
                row[j] = min3(
                    below[j + 1] + self.penalty(x, self.second[j]),
                    below[j] + indel,
                    row[j + 1] + indel,
                )

        self.filled = True
        logger.debug("Optimal distance for %d x %d symbols: %d", n, m, opt[0][0])
        return opt[0][0]

    def steps(self) -> List[AlignmentStep]:
        """Trace one optimal alignment through the filled matrix."""

        if not self.filled:
            self.opt_distance()
        opt = self.matrix
        indel = self.scoring.indel
        result: List[AlignmentStep] = []
        i = j = 0
        while i < self.n and j < self.m:
            x, y = self.first[i], self.second[j]
            cost = self.penalty(x, y)
            if opt[i][j] == opt[i + 1][j + 1] + cost:
                op = Op.MATCH if x == y else Op.SUB
                result.append(AlignmentStep(op, x, y, cost))
                i += 1
                j += 1
            elif opt[i][j] == opt[i + 1][j] + indel:
                result.append(AlignmentStep(Op.DEL, x, GAP, indel))
                i += 1
            elif opt[i][j] == opt[i][j + 1] + indel:
                result.append(AlignmentStep(Op.INS, GAP, y, indel))
                j += 1
            else:
                raise TracebackError(
                    f"No consistent move from cell ({i}, {j}) with value {opt[i][j]}"
                )

        for x in self.first[i:]:
            result.append(AlignmentStep(Op.DEL, x, GAP, indel))
        for y in self.second[j:]:
            result.append(AlignmentStep(Op.INS, GAP, y, indel))

        logger.debug("Traceback produced %d steps", len(result))
        return result

    def alignment(self) -> str:
        """Return the traceback as newline-terminated ``"x y cost"`` lines."""

        return "".join(step.to_line() + "\n" for step in self.steps())

    def render_matrix(self) -> str:
        """Tab-separated rows of the matrix, one row per line."""

        return "".join(
            "\t".join(str(value) for value in row) + "\n" for row in self.matrix
        )

    def __str__(self) -> str:
        return self.render_matrix()
