"""Per-kind filter rules.

The rule set is fixed: one rule per ResourceKind.  Kinds without a rule
are always forwarded by the filter.
"""

from __future__ import annotations

from kubefilter.rules.base import KindRule
from kubefilter.rules.event_rule import EventResourceRule
from kubefilter.rules.job_rule import JobRule
from kubefilter.rules.pod_rule import PodRule

RULES: dict[str, KindRule] = {rule.kind: rule for rule in (EventResourceRule(), JobRule(), PodRule())}

__all__ = ["RULES", "EventResourceRule", "JobRule", "KindRule", "PodRule"]
