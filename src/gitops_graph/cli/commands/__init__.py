"""CLI command modules for gitops-graph."""

from .config_cmd import config
from .publish import analyze, order, show_graph

__all__ = ["analyze", "config", "order", "show_graph"]
