"""
Pending reconciliation actions.

The diff engine compares the observed state with the desired state and
emits an ordered list of actions. The list order is execution order (a
service before the stateful set that uses it, for example). Actions are
immutable; the resource body they reference is not, which is why the
migration gate swaps in a copied body instead of editing one in place.

Example:
    >>> from migrationgate.resources import Service
    >>> action = UpdateAction(ref=Service(), msg="update service")
    >>> action.action_kind
    <ActionKind.UPDATE: 'update'>
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from migrationgate.resources.models import Resource, ResourceRef


class ActionKind(Enum):
    """Kind of operation an action performs against the cluster."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ClusterAction(BaseModel):
    """
    Base class for pending actions.

    Attributes:
        ref: Body of the resource the action applies.
        msg: Human readable description, used in logs.
    """

    model_config = ConfigDict(frozen=True)

    action_kind: ClassVar[ActionKind]

    ref: SerializeAsAny[Resource]
    msg: str = Field(default="", description="Description of the action")

    @property
    def target(self) -> ResourceRef:
        """Identity of the resource this action targets."""
        return self.ref.identity

    def describe(self) -> str:
        return self.msg or f"{self.action_kind.value} {self.target}"


class CreateAction(ClusterAction):
    """Create a resource that does not exist yet."""

    action_kind: ClassVar[ActionKind] = ActionKind.CREATE


class UpdateAction(ClusterAction):
    """Replace a live resource with the carried body."""

    action_kind: ClassVar[ActionKind] = ActionKind.UPDATE


class DeleteAction(ClusterAction):
    """Delete a resource, given either its body or its identity."""

    action_kind: ClassVar[ActionKind] = ActionKind.DELETE

    ref: SerializeAsAny[Resource] | ResourceRef

    @property
    def target(self) -> ResourceRef:
        if isinstance(self.ref, ResourceRef):
            return self.ref
        return self.ref.identity


# Ordered actions for one reconciliation pass
DesiredClusterState = list[ClusterAction]


__all__ = [
    "ActionKind",
    "ClusterAction",
    "CreateAction",
    "DeleteAction",
    "DesiredClusterState",
    "UpdateAction",
]
