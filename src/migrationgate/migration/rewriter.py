"""
Action rewriting for detected migrations.

Two versions of the application must never run at the same time against the
shared database, because both may run schema-sensitive initialization. When
a migration is detected the workload update is therefore rewritten to go
through a zero-replica state: the observed replica count on the desired body
is forced to zero, which tells the execution layer to drain every old
replica before any new one starts. The declared replica count is left alone;
it is the target the workload scales back up to.

If the custom resource enables migration backups, a backup request is
appended after the rewritten update, so the execution order is: earlier
unrelated actions, the zero-replica workload update, the backup request.

The caller's actions and bodies are never mutated. The rewritten update
carries a deep copy of the original body.
"""

from __future__ import annotations

import logging

from migrationgate.actions.base import ClusterAction, CreateAction, UpdateAction
from migrationgate.config import ManagedApplication
from migrationgate.resources.backup import migration_backup_for
from migrationgate.resources.models import Resource, StatefulSet

logger = logging.getLogger(__name__)


def scale_to_zero(body: Resource) -> Resource:
    """
    Return a copy of ``body`` whose observed replica count is zero.

    Args:
        body: Workload controller body from the desired update

    Returns:
        A deep copy of the body; ``body`` itself is left untouched
    """
    copied = body.model_copy(deep=True)
    if isinstance(copied, StatefulSet):
        copied.status.replicas = 0
    return copied


class ActionRewriter:
    """
    Rewrites the desired actions once a migration has been detected.

    The rewriter holds no state; one instance can serve any number of
    custom resources.

    Example:
        >>> rewriter = ActionRewriter()
        >>> rewritten = rewriter.rewrite(cr, True, actions, matched_index=1)
        >>> rewritten[1].ref.status.replicas
        0
    """

    def rewrite(
        self,
        cr: ManagedApplication,
        migration_required: bool,
        actions: list[ClusterAction],
        matched_index: int | None,
    ) -> list[ClusterAction]:
        """
        Rewrite ``actions`` for a migration.

        Args:
            cr: The custom resource being reconciled
            migration_required: Result of migration detection
            actions: Desired actions, in execution order
            matched_index: Position of the workload update in ``actions``

        Returns:
            ``actions`` itself when no migration is required, otherwise a new
            list with the workload update scaled to zero and, if backups are
            enabled, a backup request appended
        """
        if not migration_required:
            return actions

        rewritten = list(actions)

        if matched_index is not None:
            original = rewritten[matched_index]
            rewritten[matched_index] = UpdateAction(
                ref=scale_to_zero(original.ref),
                msg=original.msg or f"scale {original.target} to zero for migration",
            )
            logger.info("Scaling %s to zero replicas before migration", original.target)

        if cr.backups_enabled:
            backup = migration_backup_for(cr)
            rewritten.append(
                CreateAction(
                    ref=backup,
                    msg=f"create migration backup for {cr.metadata.namespace}/{cr.metadata.name}",
                )
            )
            logger.info(
                "Requesting backup %s for migration of %s/%s",
                backup.identity,
                cr.metadata.namespace,
                cr.metadata.name,
            )

        return rewritten


__all__ = [
    "ActionRewriter",
    "scale_to_zero",
]
