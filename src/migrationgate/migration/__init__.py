"""
Migration gate for version migrations of the managed workload.

This package detects when the desired update of the workload controller
changes the application image and rewrites the desired actions so that the
old and new versions never run side by side.

Key Components:
    MigrationGate: Entry point composing detection and rewriting.
    detect_migration: Compares the current and desired primary images.
    ActionRewriter: Zeroes the workload replicas and requests a backup.
    ProfileRegistry: Workload kind, name and container per profile.

Exceptions:
    UnknownProfileError: The custom resource's profile is not registered.
    AmbiguousWorkloadActionError: Several actions update the workload.

Example:
    >>> from migrationgate.migration import create_migration_gate
    >>>
    >>> gate = create_migration_gate(enable_tracing=False)
    >>> actions = gate.migrate(cr, current_state, desired)
"""

from migrationgate.exceptions import (
    AmbiguousWorkloadActionError,
    UnknownProfileError,
)
from migrationgate.migration.detector import detect_migration, primary_image
from migrationgate.migration.gate import (
    MigrationGate,
    MigrationOutcome,
    Migrator,
    create_migration_gate,
    find_workload_update,
)
from migrationgate.migration.profiles import (
    DEFAULT_IMAGE,
    DEFAULT_WORKLOAD_PROFILE,
    RHSSO_IMAGE,
    RHSSO_WORKLOAD_PROFILE,
    WORKLOAD_KIND,
    WORKLOAD_NAME,
    ProfileRegistry,
    WorkloadProfile,
    default_profiles,
)
from migrationgate.migration.rewriter import ActionRewriter, scale_to_zero

__all__ = [
    # Gate
    "MigrationGate",
    "MigrationOutcome",
    "Migrator",
    "create_migration_gate",
    "find_workload_update",
    # Detection
    "detect_migration",
    "primary_image",
    # Rewriting
    "ActionRewriter",
    "scale_to_zero",
    # Profiles
    "DEFAULT_IMAGE",
    "DEFAULT_WORKLOAD_PROFILE",
    "RHSSO_IMAGE",
    "RHSSO_WORKLOAD_PROFILE",
    "WORKLOAD_KIND",
    "WORKLOAD_NAME",
    "ProfileRegistry",
    "WorkloadProfile",
    "default_profiles",
    # Exceptions
    "AmbiguousWorkloadActionError",
    "UnknownProfileError",
]
