"""Regression tests for inventory adapter request building and failure mapping."""

from __future__ import annotations

import httpx
from pydantic import ValidationError
import pytest

from federation_metastore.adapters import (
    InventoryAdapterError,
    InventoryApiClient,
    InventoryConnectionError,
    InventoryDecodeError,
    InventoryRequestBuildError,
    InventoryStatusError,
    InventoryTimeoutError,
    ZoneDetailsEnrichmentResult,
)

BASE_URL = "http://inventory.test/inventory/api/v1"


def _client_for(handler) -> InventoryApiClient:
    return InventoryApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


def test_adapters_inventory_fetch_zone_details_builds_lookup_url() -> None:
    """Issue one GET to `{base}/zone-details?zoneid=<zone>` and decode the body.

    Returns:
        None: Assertions validate URL building and decoding.

    Raises:
        AssertionError: Raised when the request or decoded payload is wrong.
    """

    seen_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen_requests.append(request)
        return httpx.Response(200, json={"geographyDetails": "aws,Milan", "geolocation": "45.4642,9.19"})

    client = _client_for(_handler)
    result = client.inventory_fetch_zone_details("zone-milan")

    assert len(seen_requests) == 1
    assert seen_requests[0].method == "GET"
    assert seen_requests[0].url.path == "/inventory/api/v1/zone-details"
    assert seen_requests[0].url.params["zoneid"] == "zone-milan"
    assert result.geography_details == "aws,Milan"
    assert result.geolocation == "45.4642,9.19"


def test_adapters_inventory_trailing_slash_in_base_url_is_ignored() -> None:
    """Avoid a double slash when the configured base URL ends with `/`.

    Returns:
        None: Assertions validate base URL normalization.

    Raises:
        AssertionError: Raised when the path is built incorrectly.
    """

    seen_paths: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen_paths.append(request.url.path)
        return httpx.Response(200, json={"geographyDetails": "gcp,Paris", "geolocation": "48.8566,2.3522"})

    client = InventoryApiClient(base_url=f"{BASE_URL}/", transport=httpx.MockTransport(_handler))
    client.inventory_fetch_zone_details("zone-paris")

    assert seen_paths == ["/inventory/api/v1/zone-details"]


def test_adapters_inventory_non_200_status_raises_status_error() -> None:
    """Raise InventoryStatusError carrying the status text for non-200 responses.

    Returns:
        None: Assertions validate status error mapping.

    Raises:
        AssertionError: Raised when status failures are not typed.
    """

    client = _client_for(lambda request: httpx.Response(503, json={"error": "unavailable"}))

    with pytest.raises(InventoryStatusError, match="503 Service Unavailable") as error_info:
        client.inventory_fetch_zone_details("zone-1")

    assert error_info.value.status_code == 503
    assert error_info.value.reason_phrase == "Service Unavailable"
    assert error_info.value.zone_id == "zone-1"
    assert not isinstance(error_info.value, InventoryDecodeError)


def test_adapters_inventory_other_success_status_is_still_an_error() -> None:
    """Treat any status other than 200 as a failure, including other 2xx codes.

    Returns:
        None: Assertions validate strict status handling.

    Raises:
        AssertionError: Raised when a 204 response is accepted.
    """

    client = _client_for(lambda request: httpx.Response(204))

    with pytest.raises(InventoryStatusError):
        client.inventory_fetch_zone_details("zone-1")


def test_adapters_inventory_malformed_json_raises_decode_error() -> None:
    """Raise InventoryDecodeError when the body is not JSON.

    Returns:
        None: Assertions validate decode error mapping.

    Raises:
        AssertionError: Raised when decode failures are not typed.
    """

    client = _client_for(lambda request: httpx.Response(200, content=b"<html>oops</html>"))

    with pytest.raises(InventoryDecodeError) as error_info:
        client.inventory_fetch_zone_details("zone-1")

    assert not isinstance(error_info.value, InventoryStatusError)


@pytest.mark.parametrize(
    "payload",
    [
        {"geographyDetails": "aws,Milan"},
        {"geographyDetails": 12, "geolocation": "45.4642,9.19"},
        ["aws,Milan", "45.4642,9.19"],
        {"geography_details": "aws,Milan", "geolocation": "45.4642,9.19"},
    ],
)
def test_adapters_inventory_unexpected_document_shape_raises_decode_error(payload: object) -> None:
    """Raise InventoryDecodeError when fields are missing or not strings.

    Args:
        payload: JSON document returned by the fake inventory.

    Returns:
        None: Assertions validate contract enforcement.

    Raises:
        AssertionError: Raised when malformed documents are accepted.
    """

    client = _client_for(lambda request: httpx.Response(200, json=payload))

    with pytest.raises(InventoryDecodeError):
        client.inventory_fetch_zone_details("zone-1")


def test_adapters_inventory_transport_failure_raises_connection_error() -> None:
    """Map transport failures to InventoryConnectionError without retrying.

    Returns:
        None: Assertions validate transport error mapping.

    Raises:
        AssertionError: Raised when transport failures are retried or untyped.
    """

    call_count = 0

    def _handler(request: httpx.Request) -> httpx.Response:
        nonlocal call_count
        call_count += 1
        raise httpx.ConnectError("connection refused", request=request)

    client = _client_for(_handler)

    with pytest.raises(InventoryConnectionError):
        client.inventory_fetch_zone_details("zone-1")
    assert call_count == 1


def test_adapters_inventory_timeout_raises_timeout_error() -> None:
    """Map transport timeouts to InventoryTimeoutError.

    Returns:
        None: Assertions validate timeout mapping.

    Raises:
        AssertionError: Raised when timeouts are not typed.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client_for(_handler)

    with pytest.raises(InventoryTimeoutError, match="timed out"):
        client.inventory_fetch_zone_details("zone-1")


def test_adapters_inventory_malformed_base_url_raises_request_build_error() -> None:
    """Raise InventoryRequestBuildError before any request is sent for a malformed base URL.

    Returns:
        None: Assertions validate request-construction failure mapping.

    Raises:
        AssertionError: Raised when the malformed URL reaches the transport.
    """

    call_count = 0

    def _handler(request: httpx.Request) -> httpx.Response:
        nonlocal call_count
        call_count += 1
        return httpx.Response(200)

    client = InventoryApiClient(
        base_url="http://inventory.test:notaport/api",
        transport=httpx.MockTransport(_handler),
    )

    with pytest.raises(InventoryRequestBuildError):
        client.inventory_fetch_zone_details("zone-1")
    assert call_count == 0


def test_adapters_inventory_errors_share_adapter_base() -> None:
    """Expose one base class so callers can catch every lookup failure.

    Returns:
        None: Assertions validate error hierarchy.

    Raises:
        AssertionError: Raised when hierarchy drifts.
    """

    for error_type in (
        InventoryRequestBuildError,
        InventoryConnectionError,
        InventoryTimeoutError,
        InventoryStatusError,
        InventoryDecodeError,
    ):
        assert issubclass(error_type, InventoryAdapterError)
    assert issubclass(InventoryTimeoutError, TimeoutError)
    assert issubclass(InventoryConnectionError, ConnectionError)


def test_adapters_inventory_blank_base_url_is_rejected() -> None:
    """Reject blank base URLs at construction.

    Returns:
        None: Assertions validate constructor guards.

    Raises:
        AssertionError: Raised when blank configuration is accepted.
    """

    with pytest.raises(ValueError, match="base_url"):
        InventoryApiClient(base_url="  ")
    with pytest.raises(ValueError, match="request_timeout_seconds"):
        InventoryApiClient(base_url=BASE_URL, request_timeout_seconds=0)


def test_adapters_inventory_result_accepts_only_wire_field_names() -> None:
    """Decode the camelCase wire key and reject the Python attribute name.

    Returns:
        None: Assertions validate strict response decoding.

    Raises:
        AssertionError: Raised when non-wire keys are accepted.
    """

    result = ZoneDetailsEnrichmentResult.model_validate_json('{"geographyDetails": "aws,Milan", "geolocation": "45.4642,9.19"}')

    assert result.geography_details == "aws,Milan"
    with pytest.raises(ValidationError):
        ZoneDetailsEnrichmentResult.model_validate({"geography_details": "aws,Milan", "geolocation": "45.4642,9.19"})
