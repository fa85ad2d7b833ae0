"""Enrichment layer package for offered-zone inventory lookups."""

from .errors import EnrichmentDeadlineExceededError
from .gather import enrichment_gather_fail_fast
from .interfaces import ZoneEnrichmentPort
from .orchestrator import ZoneEnrichmentConfig, ZoneEnrichmentOrchestrator

__all__ = [
	"EnrichmentDeadlineExceededError",
	"ZoneEnrichmentConfig",
	"ZoneEnrichmentOrchestrator",
	"ZoneEnrichmentPort",
	"enrichment_gather_fail_fast",
]
