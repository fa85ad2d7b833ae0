"""Typed exceptions raised by the enrichment layer itself.

Inventory adapter errors are not wrapped here; they propagate unchanged.
"""

from __future__ import annotations


class EnrichmentDeadlineExceededError(TimeoutError):
    """Enrichment did not complete within the configured deadline.

    Attributes:
        deadline_seconds: Deadline that expired.
    """

    def __init__(self, deadline_seconds: float):
        super().__init__(f"Zone enrichment exceeded deadline of {deadline_seconds:g} seconds")
        self.deadline_seconds = deadline_seconds
