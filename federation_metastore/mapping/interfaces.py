"""Typed interfaces and errors for wire-to-record mapping."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from federation_metastore.domain import (
    ApplicationInstanceDetails,
    ApplicationInstanceRecord,
    ApplicationInstanceRequest,
    EntityKind,
    FederationDetails,
    FederationRecord,
    FederationRequest,
    RecordMetadata,
)

MetadataOption = Callable[[RecordMetadata], None]


class MappingContractViolationError(ValueError):
    """Raised when wire or record input cannot satisfy the mapping contract."""


class InvalidPersistedStateError(ValueError):
    """Raised when a persisted record carries a lifecycle state outside its allowed set.

    Attributes:
        kind: Entity kind of the record.
        state: Offending state string.
    """

    def __init__(self, kind: EntityKind, state: str):
        super().__init__(f"invalid persisted {kind.value} state: {state!r}")
        self.kind = kind
        self.state = state


class ApplicationInstanceMappingPort(Protocol):
    """Port definition for application instance wire/record conversion."""

    def mapping_create_record(
        self,
        request: ApplicationInstanceRequest,
        tenant_context_id: str,
        namespace: str,
        metadata_options: Sequence[MetadataOption] = (),
    ) -> ApplicationInstanceRecord:
        """Build a fresh persisted record from a partner install request."""

    def mapping_apply_update(
        self,
        request: ApplicationInstanceRequest,
        existing: ApplicationInstanceRecord,
    ) -> ApplicationInstanceRecord:
        """Apply partner spec fields to a borrowed existing record."""

    def mapping_to_details(self, record: ApplicationInstanceRecord) -> ApplicationInstanceDetails:
        """Project a persisted record into the partner details response."""


class FederationMappingPort(Protocol):
    """Port definition for federation wire/record conversion."""

    def mapping_create_record(
        self,
        request: FederationRequest,
        tenant_context_id: str,
        namespace: str,
        metadata_options: Sequence[MetadataOption] = (),
    ) -> FederationRecord:
        """Build a fresh persisted record from a partner federation request."""

    def mapping_apply_update(
        self,
        request: FederationRequest,
        existing: FederationRecord,
        tenant_context_id: str,
    ) -> FederationRecord:
        """Apply partner fields to a borrowed existing record."""

    def mapping_to_details(self, record: FederationRecord) -> FederationDetails:
        """Project a persisted record into the partner wire shape with enriched zones."""
