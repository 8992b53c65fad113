"""Rule for core/v1 Pod resources.

Creations and deletions always pass.  An update passes when the spec
changed or the current status shows one of the signals below, checked in
this order (the order only affects which debug line is written):

    restarted         -- any container has restartCount > 0
    image_pull_backoff -- any container waiting in ImagePullBackOff
    evicted           -- Failed/Evicted phase, or "evicted" in the status message
    oom_killed        -- any container terminated by OOMKilled, now or last time
"""

from __future__ import annotations

from collections.abc import Callable

from kubefilter.models.events import ChangeReason, Pod, ResourceKind, WatchEvent
from kubefilter.observability.logging import get_logger
from kubefilter.rules.base import KindRule
from kubefilter.rules.container_status import (
    has_container_restarted,
    has_image_pull_backoff,
    has_oom_killed,
    is_pod_evicted,
    spec_changed,
)

_logger = get_logger("rule.pod")

_SIGNALS: tuple[tuple[str, Callable[[Pod], bool]], ...] = (
    ("container restarted", has_container_restarted),
    ("image pull back-off", has_image_pull_backoff),
    ("pod evicted", is_pod_evicted),
    ("container OOMKilled", has_oom_killed),
)


class PodRule(KindRule):
    """Forwards Pod updates only when something operationally significant happened."""

    kind = ResourceKind.POD
    display_name = "Pod"

    def evaluate(self, event: WatchEvent) -> bool:
        if event.reason in (ChangeReason.CREATED, ChangeReason.DELETED):
            return True

        if event.reason != ChangeReason.UPDATED:
            _logger.debug("pod_dropped", kind=event.kind, reason=event.reason, detail="unhandled change reason")
            return False

        pod = event.obj
        if not isinstance(pod, Pod):
            _logger.warning("pod_uncastable", kind=event.kind, detail="unable to read Pod object, sending event")
            return True

        old_pod = event.old_obj
        if not isinstance(old_pod, Pod):
            if old_pod is not None:
                _logger.warning(
                    "pod_uncastable",
                    kind=event.kind,
                    name=pod.name,
                    namespace=pod.namespace,
                    detail="unable to read previous Pod object, sending event",
                )
            return True

        if spec_changed(pod.spec, old_pod.spec):
            _logger.debug("pod_sent", name=pod.name, namespace=pod.namespace, detail="spec changed")
            return True

        for label, check in _SIGNALS:
            if check(pod):
                _logger.debug("pod_sent", name=pod.name, namespace=pod.namespace, detail=label)
                return True

        _logger.debug(
            "pod_dropped",
            name=pod.name,
            namespace=pod.namespace,
            detail="no significant changes detected",
        )
        return False
