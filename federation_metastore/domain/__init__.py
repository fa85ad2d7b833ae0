"""Domain models used across metastore layer boundaries."""

from .identity import (
	APPLICATION_INSTANCE_NAME_PREFIX,
	FEDERATION_NAME_PREFIX,
	domain_application_instance_record_name,
	domain_derive_record_name,
	domain_federation_record_name,
)
from .records import (
	FEDERATION_CONTEXT_ID_LABEL,
	FEDERATION_RELATION_LABEL,
	HOST_RELATION,
	ID_LABEL,
	AccessPoint,
	AccessPointInfo,
	ApplicationInstanceRecord,
	ApplicationInstanceSpec,
	ApplicationInstanceStatus,
	FederationCredentials,
	FederationRecord,
	FederationSpec,
	FederationStatus,
	MobileNetworkCodes,
	OriginOperator,
	PartnerInfo,
	RecordMetadata,
	ZoneSpec,
	domain_build_record_labels,
)
from .states import (
	ApplicationInstanceState,
	EntityKind,
	FederationState,
	domain_allowed_states,
	domain_is_valid_application_instance_state,
	domain_is_valid_federation_state,
	domain_is_valid_state,
)
from .wire import (
	AccessPointInfoEntry,
	ApplicationInstanceDetails,
	ApplicationInstanceRequest,
	CallbackCredentials,
	FederationDetails,
	FederationRequest,
	MobileNetworkIds,
	ServiceEndpoint,
	ZoneDetails,
	ZoneInfo,
)

__all__ = [
	"APPLICATION_INSTANCE_NAME_PREFIX",
	"FEDERATION_NAME_PREFIX",
	"domain_application_instance_record_name",
	"domain_derive_record_name",
	"domain_federation_record_name",
	"FEDERATION_CONTEXT_ID_LABEL",
	"FEDERATION_RELATION_LABEL",
	"HOST_RELATION",
	"ID_LABEL",
	"AccessPoint",
	"AccessPointInfo",
	"ApplicationInstanceRecord",
	"ApplicationInstanceSpec",
	"ApplicationInstanceStatus",
	"FederationCredentials",
	"FederationRecord",
	"FederationSpec",
	"FederationStatus",
	"MobileNetworkCodes",
	"OriginOperator",
	"PartnerInfo",
	"RecordMetadata",
	"ZoneSpec",
	"domain_build_record_labels",
	"ApplicationInstanceState",
	"EntityKind",
	"FederationState",
	"domain_allowed_states",
	"domain_is_valid_application_instance_state",
	"domain_is_valid_federation_state",
	"domain_is_valid_state",
	"AccessPointInfoEntry",
	"ApplicationInstanceDetails",
	"ApplicationInstanceRequest",
	"CallbackCredentials",
	"FederationDetails",
	"FederationRequest",
	"MobileNetworkIds",
	"ServiceEndpoint",
	"ZoneDetails",
	"ZoneInfo",
]
