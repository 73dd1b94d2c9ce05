"""
Resource bodies for the migration gate.

Key Components:
    StatefulSet: The workload controller resource and its pod template.
    Service: An unrelated resource commonly found in the desired actions.
    Resource: Base class; ``identity`` yields a ResourceRef.
    BackupRequest: Declarative backup request created ahead of a migration.
"""

from migrationgate.resources.backup import (
    BACKUP_API_VERSION,
    BACKUP_KIND,
    MIGRATION_BACKUP_NAME,
    BackupInstance,
    BackupRequest,
    BackupRequestSpec,
    migration_backup_for,
)
from migrationgate.resources.models import (
    Container,
    ObjectMeta,
    PodSpec,
    PodTemplateSpec,
    Resource,
    ResourceRef,
    Service,
    StatefulSet,
    StatefulSetSpec,
    StatefulSetStatus,
)

__all__ = [
    # Models
    "Container",
    "ObjectMeta",
    "PodSpec",
    "PodTemplateSpec",
    "Resource",
    "ResourceRef",
    "Service",
    "StatefulSet",
    "StatefulSetSpec",
    "StatefulSetStatus",
    # Backup
    "BACKUP_API_VERSION",
    "BACKUP_KIND",
    "MIGRATION_BACKUP_NAME",
    "BackupInstance",
    "BackupRequest",
    "BackupRequestSpec",
    "migration_backup_for",
]
