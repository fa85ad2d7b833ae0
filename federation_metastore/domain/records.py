"""Cluster-native persisted record contracts.

Records split declarative `spec` fields, written by the converters, from the
observed `status` section, which only the reconciliation engine writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final

LABEL_DOMAIN: Final[str] = "federation-metastore.io"
FEDERATION_CONTEXT_ID_LABEL: Final[str] = f"{LABEL_DOMAIN}/federation-context-id"
ID_LABEL: Final[str] = f"{LABEL_DOMAIN}/id"
FEDERATION_RELATION_LABEL: Final[str] = f"{LABEL_DOMAIN}/federation-relation"
HOST_RELATION: Final[str] = "host"


def domain_build_record_labels(tenant_context_id: str, entity_id: str) -> dict[str, str]:
    """Build the derived index labels carried by every persisted record.

    Args:
        tenant_context_id: Federation context identifier.
        entity_id: Entity identifier of the record.

    Returns:
        dict[str, str]: Label mapping with context id, entity id and relation marker.
    """

    return {
        FEDERATION_CONTEXT_ID_LABEL: tenant_context_id,
        ID_LABEL: entity_id,
        FEDERATION_RELATION_LABEL: HOST_RELATION,
    }


@dataclass
class RecordMetadata:
    """Identity and index metadata of one persisted record.

    Attributes:
        name: Derived record name.
        namespace: Namespace the record lives in.
        labels: Index labels.
        annotations: Free-form annotations set by metadata options.
    """

    name: str
    namespace: str
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass
class ZoneSpec:
    """Zone selection stored on an application instance record."""

    zone_id: str
    flavour_id: str
    resource_consumption: str = ""
    res_pool: str = ""


@dataclass
class ApplicationInstanceSpec:
    """Declarative fields of an application instance record."""

    app_provider_id: str
    app_id: str
    app_version: str
    zone_info: ZoneSpec
    callback_link: str


@dataclass
class AccessPoint:
    """Single reachable endpoint reported by the reconciliation engine."""

    port: int
    fqdn: str = ""
    ipv4_address: str = ""
    ipv6_address: str = ""


@dataclass
class AccessPointInfo:
    """Access point bound to one logical interface."""

    interface_id: str
    access_point: AccessPoint


@dataclass
class ApplicationInstanceStatus:
    """Observed state of an application instance record."""

    state: str = ""
    access_point_info: list[AccessPointInfo] = field(default_factory=list)


@dataclass
class ApplicationInstanceRecord:
    """Persisted application instance record."""

    metadata: RecordMetadata
    spec: ApplicationInstanceSpec
    status: ApplicationInstanceStatus = field(default_factory=ApplicationInstanceStatus)


@dataclass
class MobileNetworkCodes:
    """Mobile country code and network codes of an operator."""

    mcc: str
    mncs: list[str] = field(default_factory=list)


@dataclass
class OriginOperator:
    """Origin operator identification."""

    country_code: str = ""
    fixed_network_codes: list[str] = field(default_factory=list)
    mobile_network_codes: MobileNetworkCodes | None = None


@dataclass
class FederationCredentials:
    """Partner callback credentials."""

    client_id: str
    token_url: str


@dataclass
class PartnerInfo:
    """Partner callback configuration."""

    callback_credentials: FederationCredentials | None = None
    status_link: str = ""


@dataclass
class FederationSpec:
    """Declarative fields of a federation record.

    Offered zones are provider-declared and populated by the inventory sync
    process, never by partner federation requests.
    """

    initial_date: datetime | None = None
    origin_operator: OriginOperator = field(default_factory=OriginOperator)
    partner: PartnerInfo = field(default_factory=PartnerInfo)
    accepted_availability_zones: list[str] = field(default_factory=list)
    offered_availability_zones: list[str] = field(default_factory=list)


@dataclass
class FederationStatus:
    """Observed state of a federation record."""

    state: str = ""


@dataclass
class FederationRecord:
    """Persisted federation record."""

    metadata: RecordMetadata
    spec: FederationSpec = field(default_factory=FederationSpec)
    status: FederationStatus = field(default_factory=FederationStatus)
