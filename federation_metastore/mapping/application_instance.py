"""Application instance conversion between partner wire models and persisted records."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Final

from federation_metastore.domain import (
    ID_LABEL,
    AccessPointInfo,
    AccessPointInfoEntry,
    ApplicationInstanceDetails,
    ApplicationInstanceRecord,
    ApplicationInstanceRequest,
    ApplicationInstanceSpec,
    EntityKind,
    FEDERATION_CONTEXT_ID_LABEL,
    ServiceEndpoint,
    ZoneSpec,
    domain_application_instance_record_name,
    domain_is_valid_state,
)

from .common import mapping_build_metadata, mapping_reassert_labels, mapping_require_text
from .interfaces import ApplicationInstanceMappingPort, InvalidPersistedStateError, MetadataOption

logger = logging.getLogger(__name__)

# Values stored when the partner omits an optional zone field.
ZONE_FIELD_DEFAULTS: Final[dict[str, str]] = {
    "resource_consumption": "",
    "res_pool": "",
}


class ApplicationInstanceConverter(ApplicationInstanceMappingPort):
    """Convert application instances between wire requests and persisted records."""

    def mapping_create_record(
        self,
        request: ApplicationInstanceRequest,
        tenant_context_id: str,
        namespace: str,
        metadata_options: Sequence[MetadataOption] = (),
    ) -> ApplicationInstanceRecord:
        """Build a fresh persisted record from a partner install request.

        Args:
            request: Partner install request.
            tenant_context_id: Federation context id the request arrived under.
            namespace: Namespace for the new record.
            metadata_options: Optional callables adjusting record annotations; any
                exception they raise aborts creation.

        Returns:
            ApplicationInstanceRecord: New record with derived name and labels and an empty status.

        Raises:
            MappingContractViolationError: Raised when required identifiers or zone fields are blank.
        """

        normalized_context_id = mapping_require_text(tenant_context_id, "federationContextId")
        app_instance_id = mapping_require_text(request.app_instance_id, "appInstanceId")
        metadata = mapping_build_metadata(
            name=domain_application_instance_record_name(normalized_context_id, app_instance_id),
            namespace=namespace,
            tenant_context_id=normalized_context_id,
            entity_id=app_instance_id,
            metadata_options=metadata_options,
        )
        record = ApplicationInstanceRecord(metadata=metadata, spec=self._mapping_build_spec(request))
        logger.debug("Built application instance record name=%s", metadata.name)
        return record

    def mapping_apply_update(
        self,
        request: ApplicationInstanceRequest,
        existing: ApplicationInstanceRecord,
    ) -> ApplicationInstanceRecord:
        """Apply partner spec fields to a borrowed existing record.

        Status and non-derived metadata are left untouched. The caller keeps
        ownership of `existing`; the same object is returned.

        Raises:
            MappingContractViolationError: Raised when the request targets another
                instance or has blank required fields.
        """

        app_instance_id = mapping_require_text(request.app_instance_id, "appInstanceId")
        tenant_context_id = existing.metadata.labels.get(FEDERATION_CONTEXT_ID_LABEL, "")
        mapping_reassert_labels(
            existing.metadata,
            tenant_context_id=mapping_require_text(tenant_context_id, FEDERATION_CONTEXT_ID_LABEL),
            entity_id=app_instance_id,
        )
        existing.spec = self._mapping_build_spec(request)
        logger.debug("Updated application instance record name=%s", existing.metadata.name)
        return existing

    def mapping_to_details(self, record: ApplicationInstanceRecord) -> ApplicationInstanceDetails:
        """Project a persisted record into the partner details response.

        An empty state means the reconciliation engine has not reported yet and
        is exposed as an absent state.

        Raises:
            InvalidPersistedStateError: Raised when the record state is not an allowed state.
        """

        state = record.status.state
        if state and not domain_is_valid_state(EntityKind.APPLICATION_INSTANCE, state):
            logger.warning(
                "Rejecting application instance record name=%s id=%s with state=%r",
                record.metadata.name,
                record.metadata.labels.get(ID_LABEL),
                state,
            )
            raise InvalidPersistedStateError(EntityKind.APPLICATION_INSTANCE, state)

        return ApplicationInstanceDetails(
            app_instance_state=state or None,
            accesspoint_info=[
                self._mapping_convert_access_point(access_point_info)
                for access_point_info in record.status.access_point_info
            ],
        )

    def _mapping_build_spec(self, request: ApplicationInstanceRequest) -> ApplicationInstanceSpec:
        zone_info = request.zone_info
        return ApplicationInstanceSpec(
            app_provider_id=request.app_provider_id,
            app_id=request.app_id,
            app_version=request.app_version,
            zone_info=ZoneSpec(
                zone_id=mapping_require_text(zone_info.zone_id, "zoneInfo.zoneId"),
                flavour_id=mapping_require_text(zone_info.flavour_id, "zoneInfo.flavourId"),
                resource_consumption=_mapping_default_if_none(zone_info.resource_consumption, "resource_consumption"),
                res_pool=_mapping_default_if_none(zone_info.res_pool, "res_pool"),
            ),
            callback_link=request.app_inst_callback_link,
        )

    def _mapping_convert_access_point(self, access_point_info: AccessPointInfo) -> AccessPointInfoEntry:
        access_point = access_point_info.access_point
        return AccessPointInfoEntry(
            interface_id=access_point_info.interface_id,
            access_points=ServiceEndpoint(
                port=access_point.port,
                fqdn=access_point.fqdn or None,
                ipv4_addresses=[access_point.ipv4_address] if access_point.ipv4_address else [],
                ipv6_addresses=[access_point.ipv6_address] if access_point.ipv6_address else [],
            ),
        )


def _mapping_default_if_none(value: str | None, field_name: str) -> str:
    if value is None:
        return ZONE_FIELD_DEFAULTS[field_name]
    return value
