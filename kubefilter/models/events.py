"""Watch event data structures and enumerations.

Every object variant here is produced by ``kubefilter.collector.normalize``
and consumed read-only by the filter rules.  The variants form a closed set:
``KubeEvent``, ``Job``, ``Pod`` and ``UnknownObject``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ChangeReason(StrEnum):
    """Change type attached to a watch event."""

    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"


class ResourceKind(StrEnum):
    """Resource kinds with a dedicated filter rule."""

    EVENT = "Event"
    JOB = "Job"
    POD = "Pod"


class ContainerStateKind(StrEnum):
    """Tag of a ContainerState variant."""

    WAITING = "waiting"
    RUNNING = "running"
    TERMINATED = "terminated"
    NONE = "none"


@dataclass(frozen=True)
class KubeEvent:
    """A core/v1 or events.k8s.io/v1 Event object."""

    api_version: str = "v1"
    type: str = ""
    reason: str = ""
    message: str = ""
    name: str = ""
    namespace: str = ""


@dataclass(frozen=True)
class JobCondition:
    type: str
    status: str


@dataclass(frozen=True)
class Job:
    """A batch/v1 Job.  ``spec`` is kept opaque and compared as a whole."""

    name: str = ""
    namespace: str = ""
    spec: dict[str, object] = field(default_factory=dict)
    conditions: tuple[JobCondition, ...] = ()


@dataclass(frozen=True)
class ContainerState:
    kind: ContainerStateKind = ContainerStateKind.NONE
    reason: str = ""


@dataclass(frozen=True)
class ContainerStatus:
    """Status of one container or init container in a Pod.

    ``last_state`` describes the previous termination of the container and
    is independent of the current ``state``.
    """

    name: str = ""
    restart_count: int = 0
    state: ContainerState = field(default_factory=ContainerState)
    last_state: ContainerState = field(default_factory=ContainerState)


@dataclass(frozen=True)
class PodStatus:
    phase: str = ""
    reason: str = ""
    message: str = ""
    init_container_statuses: tuple[ContainerStatus, ...] = ()
    container_statuses: tuple[ContainerStatus, ...] = ()


@dataclass(frozen=True)
class Pod:
    """A core/v1 Pod.  ``spec`` is kept opaque and compared as a whole."""

    name: str = ""
    namespace: str = ""
    spec: dict[str, object] = field(default_factory=dict)
    status: PodStatus = field(default_factory=PodStatus)


@dataclass(frozen=True)
class UnknownObject:
    """Payload that could not be classified as one of the typed variants."""

    raw: object = None


ResourceObject = KubeEvent | Job | Pod | UnknownObject


@dataclass(frozen=True)
class WatchEvent:
    """Normalized change event handed to the filter.

    ``reason`` is a plain string: values other than the three
    ``ChangeReason`` members are legal and fall through every kind rule.
    ``old_obj`` is only meaningful for ``Updated`` events.
    """

    kind: str
    reason: str
    obj: ResourceObject
    old_obj: ResourceObject | None = None
