"""Core data structures for kubefilter."""

from kubefilter.models.config import FilterConfig, KubeFilterConfig, LogConfig
from kubefilter.models.events import (
    ChangeReason,
    ContainerState,
    ContainerStateKind,
    ContainerStatus,
    Job,
    JobCondition,
    KubeEvent,
    Pod,
    PodStatus,
    ResourceKind,
    ResourceObject,
    UnknownObject,
    WatchEvent,
)

__all__ = [
    "ChangeReason",
    "ContainerState",
    "ContainerStateKind",
    "ContainerStatus",
    "FilterConfig",
    "Job",
    "JobCondition",
    "KubeEvent",
    "KubeFilterConfig",
    "LogConfig",
    "Pod",
    "PodStatus",
    "ResourceKind",
    "ResourceObject",
    "UnknownObject",
    "WatchEvent",
]
