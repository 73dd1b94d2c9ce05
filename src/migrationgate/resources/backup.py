"""
One-time backup request resource.

The gate never performs a backup. When a migration is detected and the
custom resource enables migration backups, it asks the backup subsystem to
capture the application data by creating a ``BackupRequest`` resource that
names the custom resource it belongs to.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from migrationgate.config import APPLICATION_NAME, ManagedApplication
from migrationgate.resources.models import ObjectMeta, Resource

MIGRATION_BACKUP_NAME = "migration-backup"
"""Name of the backup request created ahead of a version migration."""

BACKUP_API_VERSION = "keycloak.org/v1alpha1"
BACKUP_KIND = "KeycloakBackup"


class BackupInstance(BaseModel):
    """The custom resource whose data has to be backed up."""

    name: str = ""
    namespace: str = ""


class BackupRequestSpec(BaseModel):
    instance: BackupInstance = Field(default_factory=BackupInstance)
    reason: str = Field(default="migration", description="Why the backup was requested")


class BackupRequest(Resource):
    """Declarative request for the backup subsystem."""

    api_version: str = BACKUP_API_VERSION
    kind: str = BACKUP_KIND
    spec: BackupRequestSpec = Field(default_factory=BackupRequestSpec)


def migration_backup_for(cr: ManagedApplication) -> BackupRequest:
    """
    Build the one-time backup request for a migration of ``cr``.

    Args:
        cr: The custom resource being migrated.

    Returns:
        A new BackupRequest in the custom resource's namespace, labelled as
        part of the managed application.
    """
    return BackupRequest(
        metadata=ObjectMeta(
            name=MIGRATION_BACKUP_NAME,
            namespace=cr.metadata.namespace,
            labels={"app": APPLICATION_NAME},
        ),
        spec=BackupRequestSpec(
            instance=BackupInstance(
                name=cr.metadata.name,
                namespace=cr.metadata.namespace,
            ),
        ),
    )


__all__ = [
    "BACKUP_API_VERSION",
    "BACKUP_KIND",
    "BackupInstance",
    "BackupRequest",
    "BackupRequestSpec",
    "MIGRATION_BACKUP_NAME",
    "migration_backup_for",
]
