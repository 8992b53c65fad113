"""EventFilter: decides which watch events are forwarded to the sink.

Usage::

    from kubefilter.config import load_config
    from kubefilter.filter import EventFilter

    event_filter = EventFilter.from_config(load_config().filter)
    if event_filter.should_send(event):
        sink(event)

The instance holds a single flag fixed at construction, so one filter can be
shared between threads without locking.
"""

from __future__ import annotations

from kubefilter.models.config import FilterConfig
from kubefilter.models.events import WatchEvent
from kubefilter.observability.logging import get_logger
from kubefilter.rules import RULES

_logger = get_logger("filter")


class EventFilter:
    """Stateless send/drop predicate over WatchEvents.

    When disabled every event passes.  When enabled, Event, Job and Pod
    events go through their kind rule and all other kinds pass.
    """

    __slots__ = ("_enabled",)

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        _logger.info("advanced_filtering", state="ENABLED" if enabled else "DISABLED")

    @classmethod
    def from_config(cls, config: FilterConfig) -> EventFilter:
        return cls(enabled=config.enabled)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def should_send(self, event: WatchEvent) -> bool:
        """Return True if *event* should be forwarded.  Never raises."""
        if not self._enabled:
            return True
        rule = RULES.get(event.kind)
        if rule is None:
            return True
        return rule.evaluate(event)
