"""Top-level ``gitops-graph config`` command."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from gitops_graph.cli.helpers import console
from gitops_graph.core.config import GitopsConfigError, load_gitops_config
from gitops_graph.core.constants import GITOPS_CONFIG_PATH_DEFAULT


def config(
    path: Path = typer.Option(
        Path(GITOPS_CONFIG_PATH_DEFAULT),
        "--path",
        "-p",
        help="Path to the gitops config file",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Display the resolved gitops configuration."""
    try:
        resolved = load_gitops_config(path)
    except GitopsConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(resolved.model_dump(), indent=2))
        return

    settings = Table(title="Gitops Configuration")
    settings.add_column("Setting", style="cyan")
    settings.add_column("Value")
    settings.add_row("source", str(path) if path.exists() else "[dim]defaults[/dim]")
    settings.add_row("max_iterations", str(resolved.max_iterations))
    settings.add_row("concurrency", str(resolved.concurrency))
    settings.add_row("npm_wait_timeout_ms", f"{resolved.npm_wait_timeout_ms:,}")
    console.print(settings)

    if resolved.repos:
        repos = Table(title="Repositories")
        repos.add_column("Name", style="bold")
        repos.add_column("Branch", style="magenta")
        repos.add_column("URL")
        for repo in resolved.repos:
            repos.add_row(repo.name, repo.branch, repo.repo_url)
        console.print(repos)


__all__ = ["config"]
