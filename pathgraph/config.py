"""Configuration classes for pathgraph components."""

from dataclasses import dataclass
from typing import Optional

from pathgraph.algorithms.base import StopCondition


@dataclass
class SearchConfig:
    """Defaults for shortest-path queries."""

    # Strategy used when find_path() is called without stop_on
    stop_on: StopCondition = StopCondition.DISCOVERED

    # Include full prefix paths in DEBUG relaxation records
    trace_paths: bool = False

    def resolve_stop_on(self, override: Optional[StopCondition] = None) -> StopCondition:
        """Return the per-call override if given, otherwise the configured default."""
        if override is None:
            return self.stop_on
        return StopCondition(override)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
