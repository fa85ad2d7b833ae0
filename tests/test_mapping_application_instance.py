"""Regression tests for application instance wire/record conversion."""

from __future__ import annotations

import pytest

from federation_metastore.domain import (
    FEDERATION_CONTEXT_ID_LABEL,
    FEDERATION_RELATION_LABEL,
    HOST_RELATION,
    ID_LABEL,
    AccessPoint,
    AccessPointInfo,
    ApplicationInstanceRequest,
    EntityKind,
    RecordMetadata,
    domain_application_instance_record_name,
)
from federation_metastore.mapping import (
    ApplicationInstanceConverter,
    InvalidPersistedStateError,
    MappingContractViolationError,
)


def _build_request(**zone_overrides: object) -> ApplicationInstanceRequest:
    zone_info: dict[str, object] = {"zoneId": "zone-milan", "flavourId": "flavour-small"}
    zone_info.update(zone_overrides)
    return ApplicationInstanceRequest.model_validate(
        {
            "appInstanceId": "inst-1",
            "appProviderId": "provider-7",
            "appId": "app-42",
            "appVersion": "1.2.3",
            "appInstCallbackLink": "https://partner.test/callbacks/inst-1",
            "zoneInfo": zone_info,
        }
    )


def test_mapping_create_record_derives_name_labels_and_spec() -> None:
    """Build a record with derived name, exact labels, and copied spec fields.

    Returns:
        None: Assertions validate the write path.

    Raises:
        AssertionError: Raised when record fields are missing or wrong.
    """

    record = ApplicationInstanceConverter().mapping_create_record(
        _build_request(resourceConsumption="RESERVED_RES_AVOID", resPool="pool-a"),
        tenant_context_id="ctx-1",
        namespace="federation",
    )

    assert record.metadata.name == domain_application_instance_record_name("ctx-1", "inst-1")
    assert record.metadata.namespace == "federation"
    assert record.metadata.labels == {
        FEDERATION_CONTEXT_ID_LABEL: "ctx-1",
        ID_LABEL: "inst-1",
        FEDERATION_RELATION_LABEL: HOST_RELATION,
    }
    assert record.spec.app_provider_id == "provider-7"
    assert record.spec.zone_info.resource_consumption == "RESERVED_RES_AVOID"
    assert record.spec.zone_info.res_pool == "pool-a"
    assert record.status.state == ""


def test_mapping_create_record_defaults_absent_optional_zone_fields() -> None:
    """Store the named defaults when optional zone fields are absent.

    Returns:
        None: Assertions validate default policy.

    Raises:
        AssertionError: Raised when absent fields are not defaulted.
    """

    record = ApplicationInstanceConverter().mapping_create_record(
        _build_request(),
        tenant_context_id="ctx-1",
        namespace="federation",
    )

    assert record.spec.zone_info.resource_consumption == ""
    assert record.spec.zone_info.res_pool == ""


@pytest.mark.parametrize("zone_overrides", [{"zoneId": " "}, {"flavourId": ""}])
def test_mapping_create_record_rejects_blank_required_zone_fields(zone_overrides: dict[str, object]) -> None:
    """Raise MappingContractViolationError instead of storing blank zone selections.

    Args:
        zone_overrides: Zone fields to blank out.

    Returns:
        None: Assertions validate required-field enforcement.

    Raises:
        AssertionError: Raised when blank zone fields are accepted.
    """

    with pytest.raises(MappingContractViolationError):
        ApplicationInstanceConverter().mapping_create_record(
            _build_request(**zone_overrides),
            tenant_context_id="ctx-1",
            namespace="federation",
        )


def test_mapping_metadata_options_cannot_override_derived_labels() -> None:
    """Keep exactly the derived labels while applying option annotations.

    Returns:
        None: Assertions validate label invariants.

    Raises:
        AssertionError: Raised when an option adds or replaces labels.
    """

    def _option(metadata: RecordMetadata) -> None:
        metadata.labels[ID_LABEL] = "spoofed"
        metadata.labels["team"] = "edge"
        metadata.annotations["owner"] = "ops"

    record = ApplicationInstanceConverter().mapping_create_record(
        _build_request(),
        tenant_context_id="ctx-1",
        namespace="federation",
        metadata_options=[_option],
    )

    assert record.metadata.labels == {
        FEDERATION_CONTEXT_ID_LABEL: "ctx-1",
        ID_LABEL: "inst-1",
        FEDERATION_RELATION_LABEL: HOST_RELATION,
    }
    assert record.metadata.annotations == {"owner": "ops"}


def test_mapping_metadata_option_failure_aborts_creation() -> None:
    """Propagate errors raised by metadata options.

    Returns:
        None: Assertions validate option failure handling.

    Raises:
        AssertionError: Raised when option failures are swallowed.
    """

    def _failing_option(metadata: RecordMetadata) -> None:
        raise ValueError(f"cannot annotate {metadata.name}")

    with pytest.raises(ValueError, match="cannot annotate"):
        ApplicationInstanceConverter().mapping_create_record(
            _build_request(),
            tenant_context_id="ctx-1",
            namespace="federation",
            metadata_options=[_failing_option],
        )


def test_mapping_round_trip_preserves_partner_fields() -> None:
    """Keep partner-supplied fields exact across write then read.

    Returns:
        None: Assertions validate round-trip fidelity.

    Raises:
        AssertionError: Raised when a partner field changes.
    """

    converter = ApplicationInstanceConverter()
    request = _build_request()
    record = converter.mapping_create_record(request, tenant_context_id="ctx-1", namespace="federation")

    assert record.spec.app_provider_id == request.app_provider_id
    assert record.spec.app_id == request.app_id
    assert record.spec.app_version == request.app_version
    assert record.spec.zone_info.zone_id == request.zone_info.zone_id
    assert record.spec.zone_info.flavour_id == request.zone_info.flavour_id
    assert record.spec.callback_link == request.app_inst_callback_link

    record.status.state = "Ready"
    details = converter.mapping_to_details(record)
    assert details.app_instance_state == "Ready"


def test_mapping_apply_update_mutates_spec_only() -> None:
    """Update spec fields in place while preserving status and labels.

    Returns:
        None: Assertions validate update semantics.

    Raises:
        AssertionError: Raised when update touches status or returns another object.
    """

    converter = ApplicationInstanceConverter()
    record = converter.mapping_create_record(_build_request(), tenant_context_id="ctx-1", namespace="federation")
    record.status.state = "Ready"
    updated_request = _build_request(flavourId="flavour-large").model_copy(update={"app_version": "2.0.0"})

    updated_record = converter.mapping_apply_update(updated_request, record)

    assert updated_record is record
    assert record.spec.app_version == "2.0.0"
    assert record.spec.zone_info.flavour_id == "flavour-large"
    assert record.status.state == "Ready"
    assert record.metadata.labels[FEDERATION_CONTEXT_ID_LABEL] == "ctx-1"


def test_mapping_apply_update_rejects_other_instance() -> None:
    """Refuse to re-target a record to another application instance id.

    Returns:
        None: Assertions validate label protection.

    Raises:
        AssertionError: Raised when labels are overwritten by partner input.
    """

    converter = ApplicationInstanceConverter()
    record = converter.mapping_create_record(_build_request(), tenant_context_id="ctx-1", namespace="federation")
    foreign_request = _build_request().model_copy(update={"app_instance_id": "inst-2"})

    with pytest.raises(MappingContractViolationError):
        converter.mapping_apply_update(foreign_request, record)
    assert record.metadata.labels[ID_LABEL] == "inst-1"


def test_mapping_to_details_expands_access_points() -> None:
    """Expand each persisted access point into one wire entry with address lists.

    Returns:
        None: Assertions validate read-path access point mapping.

    Raises:
        AssertionError: Raised when access point fields are dropped.
    """

    converter = ApplicationInstanceConverter()
    record = converter.mapping_create_record(_build_request(), tenant_context_id="ctx-1", namespace="federation")
    record.status.state = "Ready"
    record.status.access_point_info = [
        AccessPointInfo(
            interface_id="eth0",
            access_point=AccessPoint(port=8443, fqdn="app.edge.test", ipv4_address="10.0.0.5", ipv6_address="fd00::5"),
        ),
        AccessPointInfo(interface_id="eth1", access_point=AccessPoint(port=80)),
    ]

    details = converter.mapping_to_details(record)

    assert details.wire_dump() == {
        "appInstanceState": "Ready",
        "accesspointInfo": [
            {
                "interfaceId": "eth0",
                "accessPoints": {
                    "port": 8443,
                    "fqdn": "app.edge.test",
                    "ipv4Addresses": ["10.0.0.5"],
                    "ipv6Addresses": ["fd00::5"],
                },
            },
            {
                "interfaceId": "eth1",
                "accessPoints": {"port": 80, "ipv4Addresses": [], "ipv6Addresses": []},
            },
        ],
    }


def test_mapping_to_details_rejects_unknown_state() -> None:
    """Fail the read with a typed error for unrecognised persisted states.

    Returns:
        None: Assertions validate read-path state validation.

    Raises:
        AssertionError: Raised when unknown states reach the partner.
    """

    converter = ApplicationInstanceConverter()
    record = converter.mapping_create_record(_build_request(), tenant_context_id="ctx-1", namespace="federation")
    record.status.state = "Degraded"

    with pytest.raises(InvalidPersistedStateError) as error_info:
        converter.mapping_to_details(record)

    assert error_info.value.kind is EntityKind.APPLICATION_INSTANCE
    assert error_info.value.state == "Degraded"


def test_mapping_to_details_reports_absent_state_before_reconciliation() -> None:
    """Expose an unreported state as absent rather than failing.

    Returns:
        None: Assertions validate pre-reconciliation reads.

    Raises:
        AssertionError: Raised when empty state is rejected.
    """

    converter = ApplicationInstanceConverter()
    record = converter.mapping_create_record(_build_request(), tenant_context_id="ctx-1", namespace="federation")

    details = converter.mapping_to_details(record)

    assert details.app_instance_state is None
    assert details.accesspoint_info == []
