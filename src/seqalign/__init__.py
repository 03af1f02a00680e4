"""seqalign package."""
from importlib.metadata import version, PackageNotFoundError

from .config import DEFAULT_SCORING, ScoringScheme
from .engine import AlignmentEngine, min3
from .errors import InputReadError, SeqAlignError, TracebackError

try:
    __version__ = version("seqalign")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "AlignmentEngine",
    "DEFAULT_SCORING",
    "InputReadError",
    "ScoringScheme",
    "SeqAlignError",
    "TracebackError",
    "min3",
]
