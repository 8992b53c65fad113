"""Rule contract shared by the per-kind filter rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kubefilter.models.events import ResourceKind, WatchEvent


class KindRule(ABC):
    """Decides send/drop for every event of one resource kind.

    Implementations are stateless: ``evaluate`` reads only its argument and
    must return a bool for every input, failing open (True) when an object
    cannot be interpreted.
    """

    kind: ResourceKind
    display_name: str = ""

    @abstractmethod
    def evaluate(self, event: WatchEvent) -> bool:
        """Return True if *event* should be forwarded."""
