"""
Custom resource configuration consumed by the migration gate.

The custom resource is owned by the caller. The gate only reads it, and the
models are frozen so that the configuration cannot change while a single
``migrate`` call is in progress.

Example:
    >>> cr = ManagedApplication.model_validate(
    ...     {
    ...         "metadata": {"name": "sso", "namespace": "identity"},
    ...         "spec": {"migration": {"backups": {"enabled": True}}},
    ...     }
    ... )
    >>> cr.spec.migration.backups.enabled
    True
    >>> cr.spec.profile is Profile.DEFAULT
    True
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

APPLICATION_NAME = "keycloak"
"""Value of the ``app`` label carried by every resource the operator manages."""


class Profile(Enum):
    """
    Product variant of the managed application.

    The profile decides which workload template family the operator uses,
    and therefore the kind, name and primary container of the workload
    controller resource the gate has to inspect.
    """

    DEFAULT = ""
    """Community build."""

    RHSSO = "RHSSO"
    """Productized build with its own image and container layout."""


class ObjectReference(BaseModel):
    """Name and namespace of the custom resource itself."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(default="", description="Custom resource name")
    namespace: str = Field(default="", description="Namespace the custom resource lives in")
    labels: dict[str, str] = Field(default_factory=dict, description="Custom resource labels")


class BackupsSpec(BaseModel):
    """Backup behaviour during migrations."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = Field(
        default=False,
        description="Request a one-time backup before a version migration",
    )


class MigrationSpec(BaseModel):
    """Migration settings of the custom resource."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    backups: BackupsSpec = Field(default_factory=BackupsSpec)


class ApplicationSpec(BaseModel):
    """Spec section of the custom resource, restricted to what the gate reads."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    profile: Profile = Field(
        default=Profile.DEFAULT,
        description="Workload template family in use",
    )
    image: str | None = Field(
        default=None,
        description="Image override; the profile default is used when unset",
    )
    migration: MigrationSpec = Field(default_factory=MigrationSpec)


class ManagedApplication(BaseModel):
    """
    The custom resource describing one managed application instance.

    Attributes:
        metadata: Name, namespace and labels of the custom resource
        spec: Profile, image override and migration settings
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    metadata: ObjectReference = Field(default_factory=ObjectReference)
    spec: ApplicationSpec = Field(default_factory=ApplicationSpec)

    @property
    def backups_enabled(self) -> bool:
        """Whether a migration should request a backup."""
        return self.spec.migration.backups.enabled


__all__ = [
    "APPLICATION_NAME",
    "ApplicationSpec",
    "BackupsSpec",
    "ManagedApplication",
    "MigrationSpec",
    "ObjectReference",
    "Profile",
]
