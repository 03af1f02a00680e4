from __future__ import annotations

"""Reading sequence pairs and rendering alignment runs as text."""

from typing import Iterator, TextIO, Tuple

from .engine import AlignmentEngine
from .errors import InputReadError
from .models import AlignmentReport
from .scoring import summarise


def read_sequence(stream: TextIO, index: int) -> str:
    """Read one raw line; end of stream is an error."""

    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Failed to read sequence #{index} from input: {exc}") from exc
    if not line:
        raise InputReadError(f"Failed to read sequence #{index} from input: end of stream")
    return line


def read_sequences(stream: TextIO) -> Tuple[str, str]:
    return read_sequence(stream, 1), read_sequence(stream, 2)


def iter_text_report(engine: AlignmentEngine) -> Iterator[str]:
    """Yield the before/after matrices, the distance and the alignment.

    The engine must not have been filled yet; the first block shows the
    freshly allocated matrix.
    """

    yield f"Before: \n{engine}"
    distance = engine.opt_distance()
    yield f"After: \n{engine}"
    yield f"Edit Distance: {distance}\nAlignment: \n{engine.alignment()}"


def build_report(engine: AlignmentEngine) -> AlignmentReport:
    distance = engine.opt_distance()
    steps = engine.steps()
    return AlignmentReport(
        first="".join(engine.first),
        second="".join(engine.second),
        distance=distance,
        steps=[step.to_dict() for step in steps],
        summary=summarise(steps),
    )
