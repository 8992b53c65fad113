"""Collector boundary for kubefilter.

Submodules
----------
normalize -- classify raw watch payloads (API mappings or client models)
             into the typed object variants the filter rules consume.
"""

from kubefilter.collector.normalize import build_event, event_from_record, normalize_object

__all__ = ["build_event", "event_from_record", "normalize_object"]
