"""Boundary classification of raw watch payloads.

Turns whatever the watch layer hands over into one of the typed variants in
``kubefilter.models.events`` so the filter rules never inspect raw shapes.

Accepted payloads:
    * JSON-style mappings with camelCase keys, as served by the API server.
    * Generated Kubernetes client models (``kubernetes_asyncio.client.V1Pod``
      and friends).  These are converted to their wire mapping first via
      their ``attribute_map``.

A payload that does not fit the shape expected for its kind becomes an
``UnknownObject``.  Nothing in this module raises on bad input; deciding
what to do with an unclassifiable object is the filter's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

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
from kubefilter.observability.logging import get_logger

_logger = get_logger("collector.normalize")

_EVENT_API_VERSIONS = frozenset({"v1", "events.k8s.io/v1"})

# Kubernetes watch types -> change reasons
_WATCH_TYPES: dict[str, ChangeReason] = {
    "ADDED": ChangeReason.CREATED,
    "MODIFIED": ChangeReason.UPDATED,
    "DELETED": ChangeReason.DELETED,
}


class _ShapeError(ValueError):
    """Raised internally when a payload does not match the expected shape."""


# ---------------------------------------------------------------------------
# Wire conversion
# ---------------------------------------------------------------------------


def to_wire(value: Any) -> Any:
    """Convert a client model tree into plain JSON-style values.

    Mappings, sequences and scalars pass through (recursively).  Objects that
    expose an ``attribute_map`` are rendered with their camelCase wire keys,
    skipping unset (None) attributes like the API server does.
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    attribute_map = getattr(value, "attribute_map", None)
    if isinstance(attribute_map, Mapping):
        wire: dict[str, Any] = {}
        for attr, key in attribute_map.items():
            attr_value = getattr(value, attr, None)
            if attr_value is not None:
                wire[key] = to_wire(attr_value)
        return wire
    return value


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise _ShapeError(f"{what} is not a mapping")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _ShapeError(f"{key} is not a string")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise _ShapeError(f"{key} is not a list")
    return list(value)


def _check_kind(data: Mapping[str, Any], kind: ResourceKind) -> None:
    declared = data.get("kind")
    if declared is not None and declared != kind:
        raise _ShapeError(f"declared kind {declared!r} does not match {kind}")


def _metadata(data: Mapping[str, Any]) -> tuple[str, str]:
    meta = _mapping(data.get("metadata"), "metadata")
    return _str(meta, "name"), _str(meta, "namespace")


# ---------------------------------------------------------------------------
# Per-kind parsers
# ---------------------------------------------------------------------------


def _parse_event(data: Mapping[str, Any]) -> KubeEvent:
    _check_kind(data, ResourceKind.EVENT)
    api_version = _str(data, "apiVersion") or "v1"
    if api_version not in _EVENT_API_VERSIONS:
        raise _ShapeError(f"unsupported Event apiVersion {api_version!r}")
    name, namespace = _metadata(data)
    # events.k8s.io/v1 renamed message to note
    message = _str(data, "message") or _str(data, "note")
    return KubeEvent(
        api_version=api_version,
        type=_str(data, "type"),
        reason=_str(data, "reason"),
        message=message,
        name=name,
        namespace=namespace,
    )


def _parse_job(data: Mapping[str, Any]) -> Job:
    _check_kind(data, ResourceKind.JOB)
    name, namespace = _metadata(data)
    spec = _mapping(data.get("spec"), "spec")
    status = _mapping(data.get("status"), "status")
    conditions = []
    for raw in _list(status, "conditions"):
        cond = _mapping(raw, "condition")
        conditions.append(JobCondition(type=_str(cond, "type"), status=_str(cond, "status")))
    return Job(name=name, namespace=namespace, spec=dict(spec), conditions=tuple(conditions))


def _parse_container_state(value: Any) -> ContainerState:
    state = _mapping(value, "container state")
    # the API server sets at most one key; terminated takes precedence
    terminated = state.get("terminated")
    if terminated is not None:
        return ContainerState(ContainerStateKind.TERMINATED, _str(_mapping(terminated, "terminated"), "reason"))
    waiting = state.get("waiting")
    if waiting is not None:
        return ContainerState(ContainerStateKind.WAITING, _str(_mapping(waiting, "waiting"), "reason"))
    if state.get("running") is not None:
        return ContainerState(ContainerStateKind.RUNNING)
    return ContainerState()


def _parse_container_status(value: Any) -> ContainerStatus:
    data = _mapping(value, "container status")
    restart_count = data.get("restartCount", 0)
    if restart_count is None:
        restart_count = 0
    if isinstance(restart_count, bool) or not isinstance(restart_count, int) or restart_count < 0:
        raise _ShapeError("restartCount is not a non-negative integer")
    return ContainerStatus(
        name=_str(data, "name"),
        restart_count=restart_count,
        state=_parse_container_state(data.get("state")),
        last_state=_parse_container_state(data.get("lastState")),
    )


def _parse_pod(data: Mapping[str, Any]) -> Pod:
    _check_kind(data, ResourceKind.POD)
    name, namespace = _metadata(data)
    spec = _mapping(data.get("spec"), "spec")
    status = _mapping(data.get("status"), "status")
    pod_status = PodStatus(
        phase=_str(status, "phase"),
        reason=_str(status, "reason"),
        message=_str(status, "message"),
        init_container_statuses=tuple(
            _parse_container_status(s) for s in _list(status, "initContainerStatuses")
        ),
        container_statuses=tuple(_parse_container_status(s) for s in _list(status, "containerStatuses")),
    )
    return Pod(name=name, namespace=namespace, spec=dict(spec), status=pod_status)


_PARSERS = {
    ResourceKind.EVENT: _parse_event,
    ResourceKind.JOB: _parse_job,
    ResourceKind.POD: _parse_pod,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_object(kind: str, payload: Any) -> ResourceObject:
    """Classify *payload* as the typed variant expected for *kind*.

    Already-normalized variants are returned unchanged.  Kinds without a
    dedicated parser, and payloads that do not fit, become UnknownObject.
    """
    if isinstance(payload, (KubeEvent, Job, Pod, UnknownObject)):
        return payload
    parser = _PARSERS.get(kind)  # type: ignore[call-overload]
    if parser is None:
        return UnknownObject(raw=payload)
    try:
        wire = to_wire(payload)
        if not isinstance(wire, Mapping):
            raise _ShapeError("payload is not a mapping")
        return parser(wire)
    except (_ShapeError, RecursionError) as exc:
        _logger.debug("object_unclassified", kind=kind, detail=str(exc))
        return UnknownObject(raw=payload)


def translate_change(change: str) -> str:
    """Map a Kubernetes watch type (ADDED/MODIFIED/DELETED) to a change reason.

    Any other value is returned verbatim.
    """
    reason = _WATCH_TYPES.get(change)
    return str(reason) if reason is not None else change


def build_event(kind: str, change: str, obj: Any, old_obj: Any = None) -> WatchEvent:
    """Build a WatchEvent from raw watch data.

    ``old_obj`` is normalized only when given; a missing previous object
    stays None.
    """
    return WatchEvent(
        kind=kind,
        reason=translate_change(change),
        obj=normalize_object(kind, obj),
        old_obj=normalize_object(kind, old_obj) if old_obj is not None else None,
    )


def event_from_record(record: Mapping[str, Any]) -> WatchEvent:
    """Build a WatchEvent from a serialized watch record.

    The record carries ``kind``, the change as ``reason`` or a watch ``type``,
    the current ``object`` and optionally ``oldObject``.

    Raises:
        ValueError: the record has no usable ``kind``.
    """
    kind = record.get("kind")
    if not isinstance(kind, str) or not kind:
        raise ValueError("watch record has no kind")
    change = record.get("reason") or record.get("type") or ""
    if not isinstance(change, str):
        change = str(change)
    return build_event(kind, change, record.get("object"), record.get("oldObject"))
