"""Tests for settings-driven component wiring."""

from __future__ import annotations

from federation_metastore.bootstrap import bootstrap_create_components
from federation_metastore.config import AppSettings


def test_bootstrap_injects_inventory_settings() -> None:
    """Pass the configured base URL into the inventory adapter.

    Returns:
        None: Assertions validate explicit configuration injection.

    Raises:
        AssertionError: Raised when wiring ignores settings.
    """

    settings = AppSettings(
        inventory_api_base_url="http://inventory.test/api/",
        inventory_max_concurrency=2,
    )

    components = bootstrap_create_components(settings)
    try:
        assert components.settings is settings
        assert components.inventory_client.base_url == "http://inventory.test/api"
        assert components.federation_converter is not None
        assert components.application_instance_converter is not None
    finally:
        components.inventory_client.inventory_close()
