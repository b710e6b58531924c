"""Command line interface for gitops-graph."""

from __future__ import annotations

import typer

from .commands import analyze, config, order, show_graph

app = typer.Typer(
    name="gitops-graph",
    help="Compute safe publish ordering for packages spread across repositories",
    add_completion=False,
    no_args_is_help=True,
)

app.command(name="order")(order)
app.command(name="analyze")(analyze)
app.command(name="graph")(show_graph)
app.command(name="config")(config)


def main() -> None:
    app()


__all__ = ["app", "main"]
