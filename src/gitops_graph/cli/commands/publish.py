"""Publish ordering and graph diagnostics commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.table import Table

from gitops_graph.cli.helpers import console, format_cycle, load_snapshot
from gitops_graph.graph import AnalysisReport, DependencyGraphBuilder, OrderingCycleError


def order(
    snapshot: Path = typer.Argument(..., help="JSON file with the package manifests"),
    include_dev: bool = typer.Option(
        False,
        "--include-dev",
        help="Also order by dev dependencies (fails on dev-only cycles)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Print the order in which packages can be published safely."""
    builder = DependencyGraphBuilder()
    graph = builder.build_from_repos(load_snapshot(snapshot))

    try:
        if include_dev:
            publish_order = graph.topological_sort(exclude_dev=False)
        else:
            publish_order = builder.compute_publishing_order(graph)
    except OrderingCycleError as exc:
        blocking = graph.detect_cycles(include_dev=include_dev)
        if json_output:
            print(json.dumps({"error": str(exc), "cycles": blocking}, indent=2))
        else:
            console.print(f"[red]Error:[/red] {exc}")
            for cycle in blocking:
                console.print(f"  [yellow]cycle:[/yellow] {format_cycle(cycle)}")
        raise typer.Exit(1) from None

    if json_output:
        print(json.dumps({"order": publish_order}, indent=2))
        return

    table = Table(title="Publishing Order")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Package", style="cyan")
    table.add_column("Version")
    table.add_column("Publishable", justify="center")
    for index, name in enumerate(publish_order, start=1):
        node = graph.nodes[name]
        table.add_row(
            str(index),
            name,
            node.version,
            "[green]yes[/green]" if node.publishable else "[dim]private[/dim]",
        )
    console.print(table)


def analyze(
    snapshot: Path = typer.Argument(..., help="JSON file with the package manifests"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 when production cycles exist"),
) -> None:
    """Report dependency cycles, wildcard versions, and external peers."""
    builder = DependencyGraphBuilder()
    graph = builder.build_from_repos(load_snapshot(snapshot))
    report = builder.analyze(graph)

    if json_output:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        _print_report(report)

    if strict and report.has_blocking_issues:
        raise typer.Exit(1)


def show_graph(
    snapshot: Path = typer.Argument(..., help="JSON file with the package manifests"),
) -> None:
    """Print the serialized dependency graph as JSON."""
    graph = DependencyGraphBuilder().build_from_repos(load_snapshot(snapshot))
    print(json.dumps(graph.serialize(), indent=2))


def _print_report(report: AnalysisReport) -> None:
    """Render the analysis report with Rich."""
    if report.production_cycles:
        console.print("[bold red]Production cycles (block publishing):[/bold red]")
        for cycle in report.production_cycles:
            console.print(f"  [red]✗[/red] {format_cycle(cycle)}")
    else:
        console.print("[green]✓[/green] No production cycles")

    if report.dev_cycles:
        console.print("[bold]Dev cycles (tolerated):[/bold]")
        for cycle in report.dev_cycles:
            console.print(f"  [dim]•[/dim] {format_cycle(cycle)}")

    if report.wildcard_deps:
        table = Table(title="Wildcard Dependencies")
        table.add_column("Package", style="cyan")
        table.add_column("Dependency")
        table.add_column("Version", style="yellow")
        for finding in report.wildcard_deps:
            table.add_row(finding.pkg, finding.dep, finding.version)
        console.print(table)

    if report.missing_peers:
        table = Table(title="External Peer Dependencies")
        table.add_column("Package", style="cyan")
        table.add_column("Peer")
        for peer in report.missing_peers:
            table.add_row(peer.pkg, peer.dep)
        console.print(table)


__all__ = ["analyze", "order", "show_graph"]
