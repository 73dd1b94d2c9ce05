"""
MigrationGate - make version migrations of the managed workload safe.

The reconciler computes the desired actions for a custom resource and hands
them to the gate together with the observed state. The gate looks for the
single update of the workload controller, asks the detector whether that
update changes the application image and, if it does, lets the rewriter
force the workload through a zero-replica state and request a backup.

Responsibilities:
    - Locate the workload update by kind and name for the active profile
    - Detect a version migration from the current and desired images
    - Rewrite the actions (zero replicas, optional backup request)

The gate is a stateless, synchronous computation. Calling ``migrate`` twice
with the same inputs gives the same result. Feeding an already rewritten
action list back in with the same stale observed state detects the
migration again; the migration only ends once the observed state runs the
new image.

Usage:
    >>> from migrationgate import create_migration_gate
    >>>
    >>> gate = create_migration_gate()
    >>> actions = gate.migrate(cr, current_state, desired_actions)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from migrationgate.actions.base import ClusterAction, UpdateAction
from migrationgate.config import ManagedApplication
from migrationgate.exceptions import AmbiguousWorkloadActionError
from migrationgate.migration.detector import detect_migration
from migrationgate.migration.profiles import (
    ProfileRegistry,
    WorkloadProfile,
    default_profiles,
)
from migrationgate.migration.rewriter import ActionRewriter
from migrationgate.observability import (
    ATTR_ACTION_COUNT,
    ATTR_BACKUP_REQUESTED,
    ATTR_CR_NAME,
    ATTR_CR_NAMESPACE,
    ATTR_MIGRATION_REQUIRED,
    ATTR_PROFILE,
    ATTR_RESULT_ACTION_COUNT,
    ATTR_WORKLOAD_KIND,
    ATTR_WORKLOAD_NAME,
    Tracer,
    create_tracer,
)
from migrationgate.state import ClusterState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MigrationOutcome:
    """
    Result of running the gate over one reconciliation pass.

    Attributes:
        required: Whether a version migration was detected
        actions: Actions to execute, rewritten if a migration is required
        matched_index: Position of the workload update, None if there is none
    """

    required: bool
    actions: list[ClusterAction] = field(default_factory=list)
    matched_index: int | None = None


@runtime_checkable
class Migrator(Protocol):
    """Protocol for components that prepare desired actions for migrations."""

    def migrate(
        self,
        cr: ManagedApplication,
        current_state: ClusterState,
        desired: list[ClusterAction],
    ) -> list[ClusterAction]:
        """
        Return the actions to execute for this reconciliation pass.

        Raises:
            MigrationGateError: If the inputs cannot be interpreted
        """
        ...


def find_workload_update(
    profile: WorkloadProfile,
    desired: list[ClusterAction],
) -> tuple[int, UpdateAction] | None:
    """
    Find the update of the profile's workload controller.

    Args:
        profile: Workload profile of the custom resource
        desired: Desired actions

    Returns:
        ``(index, action)`` of the single match, or None if nothing matches

    Raises:
        AmbiguousWorkloadActionError: If more than one action matches
    """
    matches = [
        (i, a)
        for i, a in enumerate(desired)
        if profile.matches(a)
    ]
    if not matches:
        return None
    if len(matches) > 1:
        raise AmbiguousWorkloadActionError(profile.kind, profile.name, [i for i, _ in matches])

    index, action = matches[0]
    return index, action


class MigrationGate:
    """
    Detects version migrations and rewrites the desired actions for them.

    Example:
        >>> gate = MigrationGate()
        >>> outcome = gate.evaluate(cr, current_state, desired)
        >>> if outcome.required:
        ...     print("migrating", cr.metadata.name)

    Attributes:
        _profiles: Workload profiles by custom resource profile.
        _rewriter: Rewriter applied when a migration is detected.
    """

    def __init__(
        self,
        profiles: ProfileRegistry | None = None,
        rewriter: ActionRewriter | None = None,
        *,
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        """
        Initialize the gate.

        Args:
            profiles: Workload profile registry. Defaults to the built-in profiles.
            rewriter: Action rewriter. Defaults to ActionRewriter().
            tracer: Optional custom Tracer instance.
            enable_tracing: Whether to enable OpenTelemetry tracing.
        """
        self._tracer = tracer or create_tracer(__name__, enable_tracing)
        self._enable_tracing = self._tracer.enabled
        self._profiles = profiles if profiles is not None else default_profiles()
        self._rewriter = rewriter or ActionRewriter()

    @property
    def profiles(self) -> ProfileRegistry:
        return self._profiles

    def migrate(
        self,
        cr: ManagedApplication,
        current_state: ClusterState,
        desired: list[ClusterAction],
    ) -> list[ClusterAction]:
        """
        Return the actions to execute for this reconciliation pass.

        Args:
            cr: The custom resource being reconciled
            current_state: Observed state of the custom resource's objects
            desired: Desired actions from the diff engine, in execution order

        Returns:
            ``desired`` itself when no migration is required, otherwise the
            rewritten actions

        Raises:
            UnknownProfileError: If the custom resource's profile is not registered
            AmbiguousWorkloadActionError: If several actions update the workload
        """
        return self.evaluate(cr, current_state, desired).actions

    def evaluate(
        self,
        cr: ManagedApplication,
        current_state: ClusterState,
        desired: list[ClusterAction],
    ) -> MigrationOutcome:
        """
        Run detection and rewriting, returning the full outcome.

        Same contract as ``migrate``.
        """
        profile = self._profiles.resolve(cr)

        attributes = None
        if self._enable_tracing:
            attributes = {
                ATTR_CR_NAME: cr.metadata.name,
                ATTR_CR_NAMESPACE: cr.metadata.namespace,
                ATTR_PROFILE: cr.spec.profile.value,
                ATTR_WORKLOAD_KIND: profile.kind,
                ATTR_WORKLOAD_NAME: profile.name,
                ATTR_ACTION_COUNT: len(desired),
            }

        with self._tracer.span("migration_gate.migrate", attributes) as span:
            outcome = self._evaluate(cr, current_state, desired, profile)
            if span:
                span.set_attribute(ATTR_MIGRATION_REQUIRED, outcome.required)
                span.set_attribute(ATTR_RESULT_ACTION_COUNT, len(outcome.actions))
                span.set_attribute(
                    ATTR_BACKUP_REQUESTED, len(outcome.actions) > len(desired)
                )
            return outcome

    def _evaluate(
        self,
        cr: ManagedApplication,
        current_state: ClusterState,
        desired: list[ClusterAction],
        profile: WorkloadProfile,
    ) -> MigrationOutcome:
        match = find_workload_update(profile, desired)
        if match is None:
            logger.debug(
                "No update of %s '%s' among %d desired actions; nothing to migrate",
                profile.kind,
                profile.name,
                len(desired),
            )
            return MigrationOutcome(required=False, actions=desired)

        index, action = match
        required = detect_migration(current_state.workload_resource, action, profile)
        actions = self._rewriter.rewrite(cr, required, desired, index)
        return MigrationOutcome(required=required, actions=actions, matched_index=index)


def create_migration_gate(
    *,
    tracer: Tracer | None = None,
    enable_tracing: bool = True,
) -> MigrationGate:
    """
    Build a ready-to-use gate with the built-in profiles.

    Every call returns a new gate; gates hold no state between calls, so
    sharing one across custom resources is equally fine.
    """
    return MigrationGate(
        default_profiles(),
        ActionRewriter(),
        tracer=tracer,
        enable_tracing=enable_tracing,
    )


__all__ = [
    "MigrationGate",
    "MigrationOutcome",
    "Migrator",
    "create_migration_gate",
    "find_workload_update",
]
