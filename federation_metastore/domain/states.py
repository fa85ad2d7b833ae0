"""Allowed lifecycle states per persisted entity kind."""

from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    """Persisted entity kinds handled by the metastore converters."""

    APPLICATION_INSTANCE = "application-instance"
    FEDERATION = "federation"


class ApplicationInstanceState(str, Enum):
    """Lifecycle states reported for an application instance record."""

    PENDING = "Pending"
    READY = "Ready"
    FAILED = "Failed"
    TERMINATING = "Terminating"


class FederationState(str, Enum):
    """Lifecycle states reported for a federation record."""

    AVAILABLE = "Available"
    LOCKED = "Locked"
    NOT_AVAILABLE = "NotAvailable"
    FAILED = "Failed"
    TEMPORARY_FAILURE = "TemporaryFailure"


_ALLOWED_STATES: dict[EntityKind, frozenset[str]] = {
    EntityKind.APPLICATION_INSTANCE: frozenset(state.value for state in ApplicationInstanceState),
    EntityKind.FEDERATION: frozenset(state.value for state in FederationState),
}


def domain_allowed_states(kind: EntityKind) -> frozenset[str]:
    """Return the closed set of lifecycle state strings for one entity kind.

    Args:
        kind: Entity kind.

    Returns:
        frozenset[str]: Allowed state strings.

    Raises:
        ValueError: Raised when kind is not a known entity kind.
    """

    return _ALLOWED_STATES[EntityKind(kind)]


def domain_is_valid_state(kind: EntityKind, status: str) -> bool:
    """Return whether status is exactly one of the allowed states for kind.

    Matching is exact: no case folding and no surrounding-whitespace trimming.

    Args:
        kind: Entity kind.
        status: Candidate state string.

    Returns:
        bool: True only for exact membership.
    """

    if not isinstance(status, str):
        return False
    return status in domain_allowed_states(kind)


def domain_is_valid_application_instance_state(status: str) -> bool:
    """Return whether status is a known application instance state."""

    return domain_is_valid_state(EntityKind.APPLICATION_INSTANCE, status)


def domain_is_valid_federation_state(status: str) -> bool:
    """Return whether status is a known federation state."""

    return domain_is_valid_state(EntityKind.FEDERATION, status)
