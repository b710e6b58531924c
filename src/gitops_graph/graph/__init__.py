"""Dependency graph construction, ordering, and analysis."""

from .builder import DependencyGraphBuilder
from .dependency_graph import DependencyGraph, GraphStateError, OrderingCycleError
from .models import (
    AnalysisReport,
    CycleReport,
    DependencyNode,
    DependencySpec,
    DependencyType,
    MissingPeer,
    WildcardDependency,
)

__all__ = [
    "AnalysisReport",
    "CycleReport",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "DependencyNode",
    "DependencySpec",
    "DependencyType",
    "GraphStateError",
    "MissingPeer",
    "OrderingCycleError",
    "WildcardDependency",
]
