"""
Workload profiles.

Each custom resource profile templates its workload controller from a
different template family. A ``WorkloadProfile`` captures what the gate
needs to know about that family: which resource in the desired actions is
the workload controller, which of its containers carries the application
image, and which image the operator deploys by default.

Usage:
    registry = default_profiles()
    profile = registry.resolve(cr)

    if profile.matches(action):
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeGuard

from migrationgate.actions.base import ClusterAction, UpdateAction
from migrationgate.config import ManagedApplication, Profile
from migrationgate.exceptions import UnknownProfileError
from migrationgate.types import ImageReference, ResourceKind, ResourceName

WORKLOAD_KIND = "StatefulSet"
WORKLOAD_NAME = "keycloak"
# Both profiles template the application container under the workload name

DEFAULT_IMAGE = "quay.io/keycloak/keycloak:9.0.2"
RHSSO_IMAGE = "registry.redhat.io/rh-sso-7/sso74-openshift-rhel8:7.4"


@dataclass(frozen=True)
class WorkloadProfile:
    """
    Description of the workload controller for one profile.

    Attributes:
        profile: The custom resource profile this entry applies to
        kind: Resource kind of the workload controller
        name: Resource name of the workload controller
        container_name: Name of the container carrying the application image
        default_image: Image deployed when the custom resource sets none
    """

    profile: Profile
    kind: ResourceKind
    name: ResourceName
    container_name: str
    default_image: ImageReference

    def matches(self, action: ClusterAction) -> TypeGuard[UpdateAction]:
        """Check whether ``action`` is an update of this profile's workload."""
        if not isinstance(action, UpdateAction):
            return False
        target = action.target
        return target.kind == self.kind and target.name == self.name


class ProfileRegistry:
    """
    Lookup of workload profiles by custom resource profile.

    Example:
        >>> registry = ProfileRegistry([DEFAULT_WORKLOAD_PROFILE])
        >>> registry.get(Profile.DEFAULT) is DEFAULT_WORKLOAD_PROFILE
        True
    """

    def __init__(self, profiles: Iterable[WorkloadProfile] = ()) -> None:
        self._profiles: dict[Profile, WorkloadProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: WorkloadProfile) -> WorkloadProfile:
        """Register ``profile``, replacing any entry for the same profile."""
        self._profiles[profile.profile] = profile
        return profile

    def get(self, profile: Profile) -> WorkloadProfile:
        """
        Get the workload profile for ``profile``.

        Raises:
            UnknownProfileError: If no entry is registered for the profile
        """
        try:
            return self._profiles[profile]
        except KeyError:
            raise UnknownProfileError(
                profile.value, [p.value for p in self._profiles]
            ) from None

    def resolve(self, cr: ManagedApplication) -> WorkloadProfile:
        """Get the workload profile selected by the custom resource."""
        return self.get(cr.spec.profile)

    def desired_image(self, cr: ManagedApplication) -> ImageReference:
        """Image the operator intends to run for ``cr``."""
        return cr.spec.image or self.resolve(cr).default_image

    def __contains__(self, profile: Profile) -> bool:
        return profile in self._profiles

    def __iter__(self) -> Iterator[WorkloadProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


DEFAULT_WORKLOAD_PROFILE = WorkloadProfile(
    profile=Profile.DEFAULT,
    kind=WORKLOAD_KIND,
    name=WORKLOAD_NAME,
    container_name=WORKLOAD_NAME,
    default_image=DEFAULT_IMAGE,
)

RHSSO_WORKLOAD_PROFILE = WorkloadProfile(
    profile=Profile.RHSSO,
    kind=WORKLOAD_KIND,
    name=WORKLOAD_NAME,
    container_name=WORKLOAD_NAME,
    default_image=RHSSO_IMAGE,
)


def default_profiles() -> ProfileRegistry:
    """Build a registry holding the built-in profiles."""
    return ProfileRegistry([DEFAULT_WORKLOAD_PROFILE, RHSSO_WORKLOAD_PROFILE])


__all__ = [
    "DEFAULT_IMAGE",
    "DEFAULT_WORKLOAD_PROFILE",
    "ProfileRegistry",
    "RHSSO_IMAGE",
    "RHSSO_WORKLOAD_PROFILE",
    "WORKLOAD_KIND",
    "WORKLOAD_NAME",
    "WorkloadProfile",
    "default_profiles",
]
