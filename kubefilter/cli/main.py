"""kubefilter command-line interface.

    kubefilter screen events.jsonl > forwarded.jsonl
    kubectl get pods -w -o json --output-watch-events | jq -c . | kubefilter screen

Input is one JSON watch record per line::

    {"kind": "Pod", "type": "MODIFIED", "object": {...}, "oldObject": {...}}

``reason`` (Created/Updated/Deleted) may be given instead of ``type``.  When
``kind`` is absent the object's own ``kind`` is used.  Records that pass
the filter are written to stdout unchanged; logs go to stderr.
"""

from __future__ import annotations

import json
from typing import IO

import click

from kubefilter import __version__
from kubefilter.collector.normalize import event_from_record
from kubefilter.config import load_filter_config, load_log_config
from kubefilter.filter import EventFilter
from kubefilter.gate import FilterGate
from kubefilter.models.config import LogConfig
from kubefilter.models.events import WatchEvent
from kubefilter.observability.logging import LOG_FORMATS, get_logger, setup_logging

_logger = get_logger("cli")


class _LineSink:
    """Echoes the raw line currently being screened."""

    def __init__(self) -> None:
        self.line = ""

    def __call__(self, event: WatchEvent) -> None:
        click.echo(self.line)


def _load_log_config() -> LogConfig:
    try:
        return load_log_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _record_kind(record: dict) -> dict:
    if "kind" in record:
        return record
    obj = record.get("object")
    if isinstance(obj, dict) and isinstance(obj.get("kind"), str):
        return {**record, "kind": obj["kind"]}
    return record


@click.group()
@click.version_option(__version__, prog_name="kubefilter")
def cli() -> None:
    """Decide which Kubernetes resource changes are worth forwarding."""


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--enabled/--disabled",
    "enabled",
    default=None,
    help="Override the ADVANCED_FILTERS environment toggle.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override KUBEFILTER_LOG_LEVEL.",
)
@click.option("--log-format", type=click.Choice(LOG_FORMATS), default="json", show_default=True)
def screen(source: IO[bytes], enabled: bool | None, log_level: str | None, log_format: str) -> None:
    """Read JSON watch records from SOURCE and print the ones that pass."""
    log_config = _load_log_config()
    setup_logging(log_level or log_config.level, fmt=log_format)
    filter_config = load_filter_config()

    event_filter = EventFilter(enabled=filter_config.enabled if enabled is None else enabled)
    sink = _LineSink()
    gate = FilterGate(event_filter, sink)

    sent = dropped = skipped = 0
    for lineno, raw_line in enumerate(source, start=1):
        line = raw_line.strip()
        if not line:
            continue
        try:
            text = line.decode("utf-8")
            record = json.loads(text)
            if not isinstance(record, dict):
                raise ValueError("watch record is not a JSON object")
            event = event_from_record(_record_kind(record))
        except (ValueError, RecursionError) as exc:
            _logger.warning("record_skipped", line=lineno, error=str(exc))
            skipped += 1
            continue

        sink.line = text
        if gate.offer(event):
            sent += 1
        else:
            dropped += 1

    _logger.info("screen_finished", sent=sent, dropped=dropped, skipped=skipped)


@cli.command("check-config")
def check_config() -> None:
    """Print the effective configuration read from the environment."""
    log_config = _load_log_config()
    setup_logging(log_config.level)
    filter_config = load_filter_config()
    click.echo(f"advanced_filters={str(filter_config.enabled).lower()}")
    click.echo(f"log_level={log_config.level}")
