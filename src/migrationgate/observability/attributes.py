"""
Standard span attributes for migrationgate.

Example:
    >>> from migrationgate.observability.attributes import ATTR_MIGRATION_REQUIRED
    >>>
    >>> with tracer.span(
    ...     "migration_gate.migrate",
    ...     {ATTR_MIGRATION_REQUIRED: False},
    ... ):
    ...     pass
"""

# =============================================================================
# Custom Resource Attributes
# =============================================================================

ATTR_CR_NAME = "migrationgate.cr.name"
"""Name of the custom resource being reconciled."""

ATTR_CR_NAMESPACE = "migrationgate.cr.namespace"
"""Namespace of the custom resource being reconciled."""

ATTR_PROFILE = "migrationgate.cr.profile"
"""Profile of the custom resource (empty string for the default profile)."""

# =============================================================================
# Action Attributes
# =============================================================================

ATTR_ACTION_COUNT = "migrationgate.actions.count"
"""Number of actions in the desired sequence handed to the gate (integer)."""

ATTR_RESULT_ACTION_COUNT = "migrationgate.actions.result_count"
"""Number of actions in the sequence returned by the gate (integer)."""

# =============================================================================
# Migration Attributes
# =============================================================================

ATTR_WORKLOAD_KIND = "migrationgate.workload.kind"
"""Kind of the workload controller resource (e.g., 'StatefulSet')."""

ATTR_WORKLOAD_NAME = "migrationgate.workload.name"
"""Name of the workload controller resource."""

ATTR_MIGRATION_REQUIRED = "migrationgate.migration.required"
"""Whether a version migration was detected (boolean)."""

ATTR_BACKUP_REQUESTED = "migrationgate.migration.backup_requested"
"""Whether a backup request action was appended (boolean)."""


__all__ = [
    "ATTR_ACTION_COUNT",
    "ATTR_BACKUP_REQUESTED",
    "ATTR_CR_NAME",
    "ATTR_CR_NAMESPACE",
    "ATTR_MIGRATION_REQUIRED",
    "ATTR_PROFILE",
    "ATTR_RESULT_ACTION_COUNT",
    "ATTR_WORKLOAD_KIND",
    "ATTR_WORKLOAD_NAME",
]
