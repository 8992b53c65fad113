"""Rule for batch/v1 Job resources.

Creations and deletions always pass.  Updates pass when the spec changed
or the Job reports a Failed=True condition.
"""

from __future__ import annotations

from kubefilter.models.events import ChangeReason, Job, ResourceKind, WatchEvent
from kubefilter.observability.logging import get_logger
from kubefilter.rules.base import KindRule
from kubefilter.rules.container_status import spec_changed

_logger = get_logger("rule.job")

_JOB_FAILED = "Failed"
_CONDITION_TRUE = "True"


def has_failed_condition(job: Job) -> bool:
    return any(c.type == _JOB_FAILED and c.status == _CONDITION_TRUE for c in job.conditions)


class JobRule(KindRule):
    """Filters Job update noise while keeping lifecycle and failure events."""

    kind = ResourceKind.JOB
    display_name = "Job"

    def evaluate(self, event: WatchEvent) -> bool:
        if event.reason in (ChangeReason.CREATED, ChangeReason.DELETED):
            return True

        if event.reason != ChangeReason.UPDATED:
            _logger.debug("job_dropped", kind=event.kind, reason=event.reason, detail="unhandled change reason")
            return False

        job = event.obj
        if not isinstance(job, Job):
            _logger.warning("job_uncastable", kind=event.kind, detail="unable to read Job object, sending event")
            return True

        old_job = event.old_obj
        if not isinstance(old_job, Job):
            # nothing to compare against
            if old_job is not None:
                _logger.warning(
                    "job_uncastable",
                    kind=event.kind,
                    name=job.name,
                    namespace=job.namespace,
                    detail="unable to read previous Job object, sending event",
                )
            return True

        if spec_changed(job.spec, old_job.spec):
            _logger.debug("job_sent", name=job.name, namespace=job.namespace, detail="spec changed")
            return True

        if has_failed_condition(job):
            _logger.debug("job_sent", name=job.name, namespace=job.namespace, detail="job failed")
            return True

        _logger.debug(
            "job_dropped",
            name=job.name,
            namespace=job.namespace,
            detail="no spec change or failure detected",
        )
        return False
