"""
migrationgate - Safe version migrations for a declarative cluster reconciler.

This library provides:
- An action model for the create/update/delete operations of a reconciliation pass
- Resource bodies and an observed-state snapshot for the managed workload
- A migration gate that detects image changes of the workload and rewrites
  the pending actions to scale to zero first and request a backup
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("migrationgate")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from migrationgate.actions import (
    ActionKind,
    ClusterAction,
    CreateAction,
    DeleteAction,
    DesiredClusterState,
    UpdateAction,
)
from migrationgate.config import (
    ApplicationSpec,
    BackupsSpec,
    ManagedApplication,
    MigrationSpec,
    ObjectReference,
    Profile,
)
from migrationgate.exceptions import (
    AmbiguousWorkloadActionError,
    MigrationGateError,
    UnknownProfileError,
)
from migrationgate.migration import (
    ActionRewriter,
    MigrationGate,
    MigrationOutcome,
    Migrator,
    ProfileRegistry,
    WorkloadProfile,
    create_migration_gate,
    default_profiles,
    detect_migration,
)
from migrationgate.resources import (
    BackupRequest,
    Container,
    ObjectMeta,
    Resource,
    ResourceRef,
    Service,
    StatefulSet,
    migration_backup_for,
)
from migrationgate.state import ClusterState

__all__ = [
    "__version__",
    # Actions
    "ActionKind",
    "ClusterAction",
    "CreateAction",
    "DeleteAction",
    "DesiredClusterState",
    "UpdateAction",
    # Configuration
    "ApplicationSpec",
    "BackupsSpec",
    "ManagedApplication",
    "MigrationSpec",
    "ObjectReference",
    "Profile",
    # Exceptions
    "AmbiguousWorkloadActionError",
    "MigrationGateError",
    "UnknownProfileError",
    # Migration
    "ActionRewriter",
    "MigrationGate",
    "MigrationOutcome",
    "Migrator",
    "ProfileRegistry",
    "WorkloadProfile",
    "create_migration_gate",
    "default_profiles",
    "detect_migration",
    # Resources
    "BackupRequest",
    "Container",
    "ObjectMeta",
    "Resource",
    "ResourceRef",
    "Service",
    "StatefulSet",
    "migration_backup_for",
    # State
    "ClusterState",
]
