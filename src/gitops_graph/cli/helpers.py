"""Shared helpers for gitops-graph CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from gitops_graph.manifest import ManifestError, PackageManifest, parse_manifests

console = Console()


def load_snapshot(snapshot_path: Path) -> list[PackageManifest]:
    """Read a JSON manifest snapshot or exit with an error.

    The file holds either a list of package.json-shaped objects or an
    object with a ``packages`` list.
    """
    try:
        data = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except OSError as exc:
        console.print(f"[red]Error:[/red] Cannot read {snapshot_path}: {escape(str(exc))}")
        raise typer.Exit(1) from None
    except json.JSONDecodeError as exc:
        console.print(f"[red]Error:[/red] Invalid JSON in {snapshot_path}: {escape(str(exc))}")
        raise typer.Exit(1) from None

    if isinstance(data, dict):
        data = data.get("packages")
    if not isinstance(data, list):
        console.print(
            f"[red]Error:[/red] {snapshot_path} must contain a list of manifests "
            "or an object with a 'packages' list"
        )
        raise typer.Exit(1)

    try:
        return parse_manifests(data)
    except ManifestError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None


def format_cycle(cycle: list[str]) -> str:
    return " -> ".join(cycle)


__all__ = ["console", "format_cycle", "load_snapshot"]
