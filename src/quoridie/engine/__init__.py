"""Engine package: move choosers behind a common protocol."""

from quoridie.engine.random_engine import RandomEngine
from quoridie.engine.search import IEngine, SearchResult

__all__ = [
    "IEngine",
    "RandomEngine",
    "SearchResult",
]
