"""Configuration classes for astarpath components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Tunable limits and diagnostics for the best-path search."""

    # Maximum number of frontier entries to expand; None means unbounded
    max_expansions: Optional[int] = None

    # Emit a DEBUG progress line every N expansions; 0 disables
    log_progress_every: int = 0

    def __post_init__(self) -> None:
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(
                f"max_expansions must be non-negative, got {self.max_expansions}"
            )
        if self.log_progress_every < 0:
            raise ValueError(
                f"log_progress_every must be non-negative, got {self.log_progress_every}"
            )


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
