"""
Resource bodies read and rewritten by the migration gate.

These models mirror the small subset of the cluster API objects the gate
needs: object metadata, the workload controller (a stateful set) with its
pod template and observed status, and a plain service. Bodies are mutable
because the templating layer fills them in; the gate itself only mutates
private copies.

Models in this module:
    - ResourceRef: Kind, name and namespace identifying a resource
    - ObjectMeta: Standard object metadata
    - Resource: Base class for every resource body
    - Container, PodSpec, PodTemplateSpec: Pod template pieces
    - StatefulSet: The workload controller resource
    - Service: Network service in front of the workload
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceRef(BaseModel):
    """
    Identity of a resource inside the cluster.

    Used as the target of delete actions and to match actions against the
    workload profile.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    name: str
    namespace: str = ""

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.kind}/{self.namespace}/{self.name}"
        return f"{self.kind}/{self.name}"


class ObjectMeta(BaseModel):
    """Standard object metadata."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class Resource(BaseModel):
    """
    Base class for resource bodies.

    Subclasses pin ``api_version`` and ``kind`` through field defaults.
    Unknown fields are preserved so that bodies produced by the templating
    layer survive a copy unchanged.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    api_version: str = "v1"
    kind: str = ""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def identity(self) -> ResourceRef:
        """Kind, name and namespace of this resource."""
        return ResourceRef(
            kind=self.kind,
            name=self.metadata.name,
            namespace=self.metadata.namespace,
        )


class Container(BaseModel):
    """A container in a pod template."""

    name: str = ""
    image: str = ""


class PodSpec(BaseModel):
    containers: list[Container] = Field(default_factory=list)


class PodTemplateSpec(BaseModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec = Field(default_factory=PodSpec)


class StatefulSetSpec(BaseModel):
    """
    Desired state of a stateful set.

    Attributes:
        replicas: Declared replica count. ``None`` lets the controller
            apply its own default.
        template: Pod template. ``None`` on partially initialized bodies.
    """

    replicas: int | None = Field(default=None, ge=0)
    service_name: str = ""
    template: PodTemplateSpec | None = Field(default_factory=PodTemplateSpec)


class StatefulSetStatus(BaseModel):
    """Observed state of a stateful set."""

    replicas: int = Field(default=0, ge=0)
    ready_replicas: int = Field(default=0, ge=0)


class StatefulSet(Resource):
    """The workload controller resource running the application replicas."""

    api_version: str = "apps/v1"
    kind: str = "StatefulSet"
    spec: StatefulSetSpec = Field(default_factory=StatefulSetSpec)
    status: StatefulSetStatus = Field(default_factory=StatefulSetStatus)

    @property
    def containers(self) -> list[Container]:
        """Containers of the pod template, empty when the template is missing."""
        if self.spec.template is None:
            return []
        return self.spec.template.spec.containers


class Service(Resource):
    kind: str = "Service"
    spec: dict[str, Any] = Field(default_factory=dict)


__all__ = [
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
]
