"""
Observed cluster state handed to the migration gate.

The reconciler reads the live objects belonging to one custom resource and
packs them into a ``ClusterState`` before computing the desired actions.
The gate only looks at the workload controller resource.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from migrationgate.resources.models import StatefulSet


class ClusterState(BaseModel):
    """
    Snapshot of the currently observed state.

    Attributes:
        workload_resource: The live workload controller resource, or None
            when it does not exist yet (first reconciliation). Without it
            there is nothing to migrate from.
    """

    workload_resource: StatefulSet | None = Field(
        default=None,
        description="Currently observed workload controller resource",
    )


__all__ = ["ClusterState"]
