"""Federation conversion between partner wire models and persisted records."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from federation_metastore.domain import (
    FEDERATION_CONTEXT_ID_LABEL,
    CallbackCredentials,
    EntityKind,
    FederationCredentials,
    FederationDetails,
    FederationRecord,
    FederationRequest,
    FederationState,
    MobileNetworkCodes,
    MobileNetworkIds,
    OriginOperator,
    PartnerInfo,
    domain_federation_record_name,
    domain_is_valid_state,
)
from federation_metastore.enrichment import ZoneEnrichmentPort

from .common import mapping_build_metadata, mapping_reassert_labels, mapping_require_text
from .interfaces import (
    FederationMappingPort,
    InvalidPersistedStateError,
    MappingContractViolationError,
    MetadataOption,
)

logger = logging.getLogger(__name__)


class FederationConverter(FederationMappingPort):
    """Convert federations between wire requests and persisted records.

    The read path enriches offered zones through the injected enrichment port,
    so it performs network calls and fails as a whole if any lookup fails.
    """

    def __init__(self, zone_enrichment: ZoneEnrichmentPort):
        """Initialize federation converter.

        Args:
            zone_enrichment: Enrichment orchestrator used on the read path.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when zone_enrichment is missing.
        """

        if zone_enrichment is None:
            raise ValueError("zone_enrichment must not be None")
        self._zone_enrichment = zone_enrichment

    def mapping_create_record(
        self,
        request: FederationRequest,
        tenant_context_id: str,
        namespace: str,
        metadata_options: Sequence[MetadataOption] = (),
    ) -> FederationRecord:
        """Build a fresh persisted record, then apply the partner request to it.

        Raises:
            MappingContractViolationError: Raised when required partner fields are missing.
        """

        normalized_context_id = mapping_require_text(tenant_context_id, "federationContextId")
        metadata = mapping_build_metadata(
            name=domain_federation_record_name(normalized_context_id),
            namespace=namespace,
            tenant_context_id=normalized_context_id,
            entity_id=normalized_context_id,
            metadata_options=metadata_options,
        )
        return self.mapping_apply_update(request, FederationRecord(metadata=metadata), normalized_context_id)

    def mapping_apply_update(
        self,
        request: FederationRequest,
        existing: FederationRecord,
        tenant_context_id: str,
    ) -> FederationRecord:
        """Apply partner fields to a borrowed existing record in place.

        Offered availability zones and status are never touched. The caller
        keeps ownership of `existing`; the same object is returned.

        Args:
            request: Partner federation request.
            existing: Record to update.
            tenant_context_id: Federation context id the request arrived under.

        Returns:
            FederationRecord: The updated `existing` record.

        Raises:
            MappingContractViolationError: Raised when required partner fields are
                missing or the record belongs to another context.
        """

        normalized_context_id = mapping_require_text(tenant_context_id, "federationContextId")
        origin_operator = self._mapping_build_origin_operator(request)
        partner = self._mapping_build_partner(request)

        mapping_reassert_labels(existing.metadata, tenant_context_id=normalized_context_id, entity_id=normalized_context_id)
        existing.spec.initial_date = request.initial_date
        existing.spec.origin_operator = origin_operator
        existing.spec.partner = partner
        existing.spec.accepted_availability_zones = list(request.accepted_availability_zones or [])
        logger.debug("Updated federation record name=%s", existing.metadata.name)
        return existing

    def mapping_to_details(self, record: FederationRecord) -> FederationDetails:
        """Project a persisted record into the partner wire shape with enriched zones.

        Raises:
            MappingContractViolationError: Raised when the record lacks its context label or initial date.
            InventoryAdapterError: Raised unchanged when any zone lookup fails.
            EnrichmentDeadlineExceededError: Raised when enrichment runs out of time.
        """

        federation_context_id = mapping_require_text(
            record.metadata.labels.get(FEDERATION_CONTEXT_ID_LABEL),
            FEDERATION_CONTEXT_ID_LABEL,
        )
        spec = record.spec
        if spec.initial_date is None:
            raise MappingContractViolationError(f"record {record.metadata.name} has no initial date")

        offered_zones = self._zone_enrichment.enrichment_enrich_offered_zones(spec.offered_availability_zones)

        mobile_network_codes = spec.origin_operator.mobile_network_codes
        callback_credentials = spec.partner.callback_credentials
        return FederationDetails(
            federation_context_id=federation_context_id,
            initial_date=spec.initial_date,
            orig_op_country_code=spec.origin_operator.country_code,
            orig_op_fixed_network_codes=list(spec.origin_operator.fixed_network_codes),
            orig_op_mobile_network_codes=(
                None
                if mobile_network_codes is None
                else MobileNetworkIds(mcc=mobile_network_codes.mcc, mncs=list(mobile_network_codes.mncs))
            ),
            partner_callback_credentials=(
                None
                if callback_credentials is None
                else CallbackCredentials(
                    client_id=callback_credentials.client_id,
                    token_url=callback_credentials.token_url,
                )
            ),
            partner_status_link=spec.partner.status_link or None,
            accepted_availability_zones=list(spec.accepted_availability_zones),
            offered_availability_zones=offered_zones,
        )

    def mapping_validate_state(self, record: FederationRecord) -> FederationState | None:
        """Return the record state as a typed value, or None when not yet reported.

        Raises:
            InvalidPersistedStateError: Raised when the record state is not an allowed state.
        """

        state = record.status.state
        if not state:
            return None
        if not domain_is_valid_state(EntityKind.FEDERATION, state):
            raise InvalidPersistedStateError(EntityKind.FEDERATION, state)
        return FederationState(state)

    def _mapping_build_origin_operator(self, request: FederationRequest) -> OriginOperator:
        mobile_network_ids = request.orig_op_mobile_network_codes
        if mobile_network_ids is None or mobile_network_ids.mcc is None or mobile_network_ids.mncs is None:
            raise MappingContractViolationError("origOPMobileNetworkCodes requires both mcc and mncs")
        return OriginOperator(
            country_code=request.orig_op_country_code or "",
            fixed_network_codes=list(request.orig_op_fixed_network_codes or []),
            mobile_network_codes=MobileNetworkCodes(
                mcc=mapping_require_text(mobile_network_ids.mcc, "origOPMobileNetworkCodes.mcc"),
                mncs=list(mobile_network_ids.mncs),
            ),
        )

    def _mapping_build_partner(self, request: FederationRequest) -> PartnerInfo:
        callback_credentials = request.partner_callback_credentials
        if callback_credentials is None:
            raise MappingContractViolationError("partnerCallbackCredentials must be provided")
        return PartnerInfo(
            callback_credentials=FederationCredentials(
                client_id=callback_credentials.client_id,
                token_url=callback_credentials.token_url,
            ),
            status_link=request.partner_status_link or "",
        )
