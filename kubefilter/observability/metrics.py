"""Prometheus metrics for kubefilter."""

from __future__ import annotations

from prometheus_client import Counter

filter_decisions_total = Counter(
    "kubefilter_decisions_total",
    "Filter decisions taken by the forwarding gate",
    ["kind", "decision"],
)
