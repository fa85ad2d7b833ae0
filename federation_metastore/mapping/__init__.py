"""Mapping layer package for wire-to-record conversion boundaries."""

from .application_instance import ZONE_FIELD_DEFAULTS, ApplicationInstanceConverter
from .federation import FederationConverter
from .interfaces import (
	ApplicationInstanceMappingPort,
	FederationMappingPort,
	InvalidPersistedStateError,
	MappingContractViolationError,
	MetadataOption,
)

__all__ = [
	"ApplicationInstanceConverter",
	"ApplicationInstanceMappingPort",
	"FederationConverter",
	"FederationMappingPort",
	"InvalidPersistedStateError",
	"MappingContractViolationError",
	"MetadataOption",
	"ZONE_FIELD_DEFAULTS",
]
