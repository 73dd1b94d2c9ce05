"""
Action model for the migration gate.

Key Components:
    ClusterAction: Base class carrying a resource body and a message.
    CreateAction, UpdateAction, DeleteAction: The three operation kinds.
    DesiredClusterState: Ordered list of actions for one reconciliation pass.
"""

from migrationgate.actions.base import (
    ActionKind,
    ClusterAction,
    CreateAction,
    DeleteAction,
    DesiredClusterState,
    UpdateAction,
)

__all__ = [
    "ActionKind",
    "ClusterAction",
    "CreateAction",
    "DeleteAction",
    "DesiredClusterState",
    "UpdateAction",
]
