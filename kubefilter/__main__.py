"""Entry point for `python -m kubefilter`.

Usage:
    python -m kubefilter screen events.jsonl
    uv run python -m kubefilter check-config
"""

from __future__ import annotations

from kubefilter.cli import cli

cli(prog_name="kubefilter")
