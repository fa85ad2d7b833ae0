"""Deterministic persisted-record naming helpers."""

from __future__ import annotations

from typing import Final
from uuid import NAMESPACE_OID, UUID, uuid5

APPLICATION_INSTANCE_NAME_PREFIX: Final[str] = "appinst"
FEDERATION_NAME_PREFIX: Final[str] = "fed"
RECORD_NAME_NAMESPACE: Final[UUID] = NAMESPACE_OID


def domain_derive_record_name(kind_prefix: str, tenant_context_id: str, entity_id: str) -> str:
    """Derive a stable persisted-record name from tenant context and entity ids.

    The name is `<kind_prefix>-<uuid5(tenant_context_id + "/" + entity_id)>`.
    Inputs are not validated; callers must not pass blank identifiers.

    Args:
        kind_prefix: Entity-kind marker placed before the derived identifier.
        tenant_context_id: Federation context identifier scoping the record.
        entity_id: Partner-supplied entity identifier.

    Returns:
        str: Deterministic record name.
    """

    derived_identifier = uuid5(RECORD_NAME_NAMESPACE, f"{tenant_context_id}/{entity_id}")
    return f"{kind_prefix}-{derived_identifier}"


def domain_application_instance_record_name(tenant_context_id: str, app_instance_id: str) -> str:
    """Return the persisted-record name of one application instance."""

    return domain_derive_record_name(APPLICATION_INSTANCE_NAME_PREFIX, tenant_context_id, app_instance_id)


def domain_federation_record_name(tenant_context_id: str) -> str:
    """Return the persisted-record name of one federation.

    A federation is identified by its context id alone, so the context id is
    used as both halves of the derivation input.
    """

    return domain_derive_record_name(FEDERATION_NAME_PREFIX, tenant_context_id, tenant_context_id)
