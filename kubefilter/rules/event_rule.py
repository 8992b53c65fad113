"""Rule for Kubernetes Event resources (core/v1 and events.k8s.io/v1).

Only newly created Warning events pass, except that Evicted events pass
whatever their type.  Updates and deletions of Event objects are dropped.
"""

from __future__ import annotations

from kubefilter.models.events import ChangeReason, KubeEvent, ResourceKind, WatchEvent
from kubefilter.observability.logging import get_logger
from kubefilter.rules.base import KindRule

_logger = get_logger("rule.event")

_WARNING = "Warning"
_EVICTED = "Evicted"


class EventResourceRule(KindRule):
    """Filters Event objects by change reason, object reason and type."""

    kind = ResourceKind.EVENT
    display_name = "Event resource"

    def evaluate(self, event: WatchEvent) -> bool:
        if event.reason != ChangeReason.CREATED:
            _logger.debug(
                "event_dropped",
                kind=event.kind,
                reason=event.reason,
                detail="only Created Event resources are sent",
            )
            return False

        obj = event.obj
        if not isinstance(obj, KubeEvent):
            _logger.warning(
                "event_type_undetermined",
                kind=event.kind,
                detail="unable to determine Event type, sending event",
            )
            return True

        if obj.reason == _EVICTED:
            _logger.debug(
                "event_sent",
                kind=event.kind,
                name=obj.name,
                namespace=obj.namespace,
                detail="Evicted events are sent regardless of type",
            )
            return True

        if obj.type != _WARNING:
            _logger.debug(
                "event_dropped",
                kind=event.kind,
                name=obj.name,
                namespace=obj.namespace,
                type=obj.type,
                detail="only Warning events are sent",
            )
            return False

        return True
