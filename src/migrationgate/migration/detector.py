"""
Migration detection.

A version migration is defined purely as "the running image differs from
the intended image". The detector compares the primary container image of
the live workload controller with the one carried by the desired update of
that same workload. There is no version parsing: any string difference is a
migration.

Detection never raises. Missing inputs and bodies that do not carry an image
(partially initialized state) all resolve to "no migration", which leaves the
desired actions untouched.
"""

from __future__ import annotations

import logging

from migrationgate.actions.base import UpdateAction
from migrationgate.migration.profiles import WorkloadProfile
from migrationgate.resources.models import Resource, StatefulSet
from migrationgate.types import ImageReference

logger = logging.getLogger(__name__)


def primary_image(body: Resource, container_name: str | None = None) -> ImageReference | None:
    """
    Extract the application image from a workload body.

    The container named ``container_name`` is preferred; when there is no
    such container the first one is used.

    Args:
        body: Workload controller resource body
        container_name: Name of the container carrying the application image

    Returns:
        The image reference, or None if the body has no usable image
    """
    if not isinstance(body, StatefulSet):
        return None

    containers = body.containers
    if not containers:
        return None

    container = containers[0]
    if container_name is not None:
        container = next((c for c in containers if c.name == container_name), container)

    return container.image or None


def detect_migration(
    current: StatefulSet | None,
    update_action: UpdateAction | None,
    profile: WorkloadProfile | None = None,
) -> bool:
    """
    Decide whether the desired update of the workload is a version migration.

    Args:
        current: Live workload controller resource, None if it does not exist
        update_action: Desired update targeting the workload, None if absent
        profile: Workload profile naming the primary container (optional)

    Returns:
        True if both images are known and differ
    """
    if current is None or update_action is None:
        return False

    container_name = profile.container_name if profile is not None else None
    current_image = primary_image(current, container_name)
    desired_image = primary_image(update_action.ref, container_name)

    if current_image is None or desired_image is None:
        logger.warning(
            "Cannot determine image of %s (current=%r, desired=%r); assuming no migration",
            update_action.target,
            current_image,
            desired_image,
        )
        return False

    if current_image == desired_image:
        logger.debug("Image of %s unchanged (%s)", update_action.target, current_image)
        return False

    logger.info(
        "Image of %s changes from %s to %s; migration required",
        update_action.target,
        current_image,
        desired_image,
    )
    return True


__all__ = [
    "detect_migration",
    "primary_image",
]
