"""Predicates over Pod container statuses.

All checks look at the current object only and scan init containers
before regular containers.
"""

from __future__ import annotations

from collections.abc import Iterator

from kubefilter.models.events import ContainerStateKind, ContainerStatus, Pod

_IMAGE_PULL_BACKOFF = "ImagePullBackOff"
_OOM_KILLED = "OOMKilled"
_EVICTED = "Evicted"
_POD_FAILED = "Failed"


def spec_changed(current: dict[str, object], previous: dict[str, object]) -> bool:
    """Deep structural comparison of two opaque spec mappings.

    Any difference counts, including fields with no operational meaning.
    """
    return current != previous


def _all_statuses(pod: Pod) -> Iterator[ContainerStatus]:
    yield from pod.status.init_container_statuses
    yield from pod.status.container_statuses


def has_container_restarted(pod: Pod) -> bool:
    return any(status.restart_count > 0 for status in _all_statuses(pod))


def has_image_pull_backoff(pod: Pod) -> bool:
    return any(
        status.state.kind == ContainerStateKind.WAITING and status.state.reason == _IMAGE_PULL_BACKOFF
        for status in _all_statuses(pod)
    )


def is_pod_evicted(pod: Pod) -> bool:
    """True for a Failed/Evicted pod, or when the status message mentions eviction.

    The message check is a case-sensitive substring match on "evicted".
    """
    status = pod.status
    if status.phase == _POD_FAILED and status.reason == _EVICTED:
        return True
    return "evicted" in status.message


def is_container_oom_killed(status: ContainerStatus) -> bool:
    for state in (status.state, status.last_state):
        if state.kind == ContainerStateKind.TERMINATED and state.reason == _OOM_KILLED:
            return True
    return False


def has_oom_killed(pod: Pod) -> bool:
    return any(is_container_oom_killed(status) for status in _all_statuses(pod))
