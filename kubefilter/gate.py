"""Forwarding gate: runs the filter in front of an event sink.

FilterGate is the only place decisions are counted; the filter itself
stays free of side effects.
"""

from __future__ import annotations

from collections.abc import Callable

from kubefilter.filter import EventFilter
from kubefilter.models.events import ResourceKind, WatchEvent
from kubefilter.observability.metrics import filter_decisions_total

_KNOWN_KINDS = frozenset(ResourceKind)


def _kind_label(kind: str) -> str:
    # bound label cardinality
    return kind if kind in _KNOWN_KINDS else "other"


class FilterGate:
    """Forwards events that pass *event_filter* to *sink*.

    The sink is called synchronously.  Its exceptions propagate to the
    caller; the gate does not retry.
    """

    def __init__(self, event_filter: EventFilter, sink: Callable[[WatchEvent], None]) -> None:
        self._filter = event_filter
        self._sink = sink

    def offer(self, event: WatchEvent) -> bool:
        """Filter *event* and forward it if it passes.  Returns the decision."""
        send = self._filter.should_send(event)
        filter_decisions_total.labels(
            kind=_kind_label(event.kind),
            decision="sent" if send else "dropped",
        ).inc()
        if send:
            self._sink(event)
        return send
