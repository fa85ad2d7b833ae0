"""Partner-facing wire models exchanged over the federation API.

Field aliases follow the partner JSON contract (camelCase). Models accept both
alias and attribute names so converters and tests can build them directly.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base model for partner wire payloads."""

    model_config = ConfigDict(populate_by_name=True)

    def wire_dump(self) -> dict[str, object]:
        """Return JSON-compatible payload keyed by wire aliases."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ZoneInfo(WireModel):
    """Zone selection of one application instance request."""

    zone_id: str = Field(alias="zoneId")
    flavour_id: str = Field(alias="flavourId")
    resource_consumption: str | None = Field(default=None, alias="resourceConsumption")
    res_pool: str | None = Field(default=None, alias="resPool")


class ApplicationInstanceRequest(WireModel):
    """Partner request to install one application instance.

    The federation context id is carried out of band by the endpoint layer
    and is not part of the JSON body.
    """

    app_instance_id: str = Field(alias="appInstanceId")
    app_provider_id: str = Field(alias="appProviderId")
    app_id: str = Field(alias="appId")
    app_version: str = Field(alias="appVersion")
    app_inst_callback_link: str = Field(alias="appInstCallbackLink")
    zone_info: ZoneInfo = Field(alias="zoneInfo")


class ServiceEndpoint(WireModel):
    """Reachable endpoint of one application instance interface."""

    port: int
    fqdn: str | None = None
    ipv4_addresses: list[str] | None = Field(default=None, alias="ipv4Addresses")
    ipv6_addresses: list[str] | None = Field(default=None, alias="ipv6Addresses")


class AccessPointInfoEntry(WireModel):
    """Access point of one application instance interface."""

    interface_id: str = Field(alias="interfaceId")
    access_points: ServiceEndpoint = Field(alias="accessPoints")


class ApplicationInstanceDetails(WireModel):
    """Read-side projection of one application instance."""

    app_instance_state: str | None = Field(default=None, alias="appInstanceState")
    accesspoint_info: list[AccessPointInfoEntry] = Field(default_factory=list, alias="accesspointInfo")


class MobileNetworkIds(WireModel):
    """Mobile network codes of the origin operator."""

    mcc: str | None = None
    mncs: list[str] | None = None


class CallbackCredentials(WireModel):
    """Credentials the partner uses for status callbacks."""

    client_id: str = Field(alias="clientId")
    token_url: str = Field(alias="tokenUrl")


class ZoneDetails(WireModel):
    """Offered availability zone, enriched with inventory geography on reads."""

    zone_id: str = Field(alias="zoneId")
    geography_details: str | None = Field(default=None, alias="geographyDetails")
    geolocation: str | None = None


class FederationRequest(WireModel):
    """Partner request to create or update a federation relationship."""

    initial_date: datetime = Field(alias="initialDate")
    orig_op_country_code: str | None = Field(default=None, alias="origOPCountryCode")
    orig_op_fixed_network_codes: list[str] | None = Field(default=None, alias="origOPFixedNetworkCodes")
    orig_op_mobile_network_codes: MobileNetworkIds | None = Field(default=None, alias="origOPMobileNetworkCodes")
    partner_callback_credentials: CallbackCredentials | None = Field(default=None, alias="partnerCallbackCredentials")
    partner_status_link: str | None = Field(default=None, alias="partnerStatusLink")
    accepted_availability_zones: list[str] | None = Field(default=None, alias="acceptedAvailabilityZones")
    offered_availability_zones: list[ZoneDetails] | None = Field(default=None, alias="offeredAvailabilityZones")


class FederationDetails(FederationRequest):
    """Read-side projection of one federation, scoped by its context id."""

    federation_context_id: str = Field(alias="federationContextId")
