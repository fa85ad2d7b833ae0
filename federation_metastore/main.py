"""Main module entrypoint for operator diagnostics.

Commands derive record names, check lifecycle states and run offered-zone
enrichment against the configured inventory.
"""

import argparse
import json
import logging
import sys

from federation_metastore.adapters import InventoryAdapterError
from federation_metastore.bootstrap import bootstrap_create_components
from federation_metastore.config import config_configure_logging, config_load_settings
from federation_metastore.domain import (
    EntityKind,
    domain_application_instance_record_name,
    domain_federation_record_name,
    domain_is_valid_state,
)
from federation_metastore.enrichment import EnrichmentDeadlineExceededError

logger = logging.getLogger(__name__)


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Parser with one sub-command per diagnostic.
    """

    kind_choices = [kind.value for kind in EntityKind]
    argument_parser = argparse.ArgumentParser(description="Federation metastore diagnostics")
    subparsers = argument_parser.add_subparsers(dest="command", required=True)

    derive_parser = subparsers.add_parser("derive-name", help="Print the persisted-record name for an entity")
    derive_parser.add_argument("--kind", choices=kind_choices, required=True, type=str)
    derive_parser.add_argument("--context-id", dest="context_id", required=True, type=str)
    derive_parser.add_argument(
        "--entity-id",
        dest="entity_id",
        type=str,
        help="Entity id; ignored for federations, which are named by context id",
    )

    state_parser = subparsers.add_parser("validate-state", help="Exit 0 when a state is allowed for the kind")
    state_parser.add_argument("--kind", choices=kind_choices, required=True, type=str)
    state_parser.add_argument("state", type=str)

    zone_parser = subparsers.add_parser("zone-details", help="Enrich zone ids from the configured inventory")
    zone_parser.add_argument("zone_ids", nargs="+", type=str)
    return argument_parser


def main(argv: list[str] | None = None) -> int:
    """Run one diagnostic command.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        int: Process exit code.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    parsed_arguments = main_build_argument_parser().parse_args(argv)
    kind = EntityKind(parsed_arguments.kind) if hasattr(parsed_arguments, "kind") else None

    if parsed_arguments.command == "derive-name":
        if kind is EntityKind.FEDERATION:
            print(domain_federation_record_name(parsed_arguments.context_id))
            return 0
        if not parsed_arguments.entity_id:
            print("--entity-id is required for application instances", file=sys.stderr)
            return 2
        print(domain_application_instance_record_name(parsed_arguments.context_id, parsed_arguments.entity_id))
        return 0

    if parsed_arguments.command == "validate-state":
        return 0 if domain_is_valid_state(kind, parsed_arguments.state) else 1

    settings = config_load_settings()
    config_configure_logging(settings)
    components = bootstrap_create_components(settings)
    try:
        zone_details = components.zone_enrichment.enrichment_enrich_offered_zones(parsed_arguments.zone_ids)
    except (InventoryAdapterError, EnrichmentDeadlineExceededError) as error:
        logger.error("Zone enrichment failed: %s", error)
        return 1
    finally:
        components.inventory_client.inventory_close()

    print(json.dumps([zone.wire_dump() for zone in zone_details], indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
