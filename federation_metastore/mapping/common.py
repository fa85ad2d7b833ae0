"""Shared helpers for record metadata handling in converters."""

from __future__ import annotations

from collections.abc import Sequence

from federation_metastore.domain import (
    FEDERATION_CONTEXT_ID_LABEL,
    ID_LABEL,
    RecordMetadata,
    domain_build_record_labels,
)

from .interfaces import MappingContractViolationError, MetadataOption


def mapping_require_text(value: str | None, field_name: str) -> str:
    """Return text unchanged or raise when it is missing or blank.

    Args:
        value: Candidate text value.
        field_name: Wire field name used in the error message.

    Returns:
        str: The value, unchanged.

    Raises:
        MappingContractViolationError: Raised when value is missing or blank.
    """

    if value is None or not value.strip():
        raise MappingContractViolationError(f"{field_name} must not be blank")
    return value


def mapping_build_metadata(
    name: str,
    namespace: str,
    tenant_context_id: str,
    entity_id: str,
    metadata_options: Sequence[MetadataOption],
) -> RecordMetadata:
    """Build record metadata and apply caller-supplied metadata options.

    Options may adjust annotations. The label set is reset to exactly the
    derived labels after the options run, so no option can add or replace one.

    Raises:
        MappingContractViolationError: Raised when namespace is blank.
        Exception: Any exception raised by a metadata option aborts creation.
    """

    metadata = RecordMetadata(
        name=name,
        namespace=mapping_require_text(namespace, "namespace"),
        labels=domain_build_record_labels(tenant_context_id, entity_id),
    )
    for metadata_option in metadata_options:
        metadata_option(metadata)
    metadata.labels = domain_build_record_labels(tenant_context_id, entity_id)
    return metadata


def mapping_reassert_labels(metadata: RecordMetadata, tenant_context_id: str, entity_id: str) -> None:
    """Re-apply derived labels on an existing record, refusing to re-target it.

    Raises:
        MappingContractViolationError: Raised when the record already belongs to
            another context or entity.
    """

    current_context_id = metadata.labels.get(FEDERATION_CONTEXT_ID_LABEL)
    current_entity_id = metadata.labels.get(ID_LABEL)
    if current_context_id is not None and current_context_id != tenant_context_id:
        raise MappingContractViolationError(
            f"record {metadata.name} belongs to federation context {current_context_id}, not {tenant_context_id}"
        )
    if current_entity_id is not None and current_entity_id != entity_id:
        raise MappingContractViolationError(f"record {metadata.name} belongs to entity {current_entity_id}, not {entity_id}")
    metadata.labels.update(domain_build_record_labels(tenant_context_id, entity_id))
