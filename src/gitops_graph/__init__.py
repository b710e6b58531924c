"""Publish ordering for interdependent packages spread across repositories."""

from gitops_graph.graph import (
    AnalysisReport,
    DependencyGraph,
    DependencyGraphBuilder,
    OrderingCycleError,
)
from gitops_graph.manifest import ManifestError, PackageManifest, parse_manifests

__version__ = "0.1.0"

__all__ = [
    "AnalysisReport",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "ManifestError",
    "OrderingCycleError",
    "PackageManifest",
    "parse_manifests",
]
