"""Builder for creating and analyzing dependency graphs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gitops_graph.core.constants import WILDCARD_VERSION
from gitops_graph.manifest import PackageManifest

from .dependency_graph import DependencyGraph
from .models import AnalysisReport, DependencyType, MissingPeer, WildcardDependency

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Builds graphs from manifests and derives publishing information."""

    def build_from_repos(self, repos: Iterable[PackageManifest]) -> DependencyGraph:
        """Construct a dependency graph from a snapshot of manifests.

        Two-pass algorithm: first creates nodes, then builds edges
        (dependents). Prod/peer deps take priority over dev deps when the
        same package appears in multiple dependency sections.
        """
        graph = DependencyGraph()
        graph.init_from_repos(repos)
        return graph

    def compute_publishing_order(self, graph: DependencyGraph) -> list[str]:
        """Compute publishing order with dev dependencies excluded.

        Dev-only cycles (shared test utilities, configs) are expected and
        must never block publishing, so only prod/peer edges constrain the
        order.

        Raises:
            OrderingCycleError: If prod/peer dependencies form a cycle
        """
        return graph.topological_sort(exclude_dev=True)

    def analyze(self, graph: DependencyGraph) -> AnalysisReport:
        """Collect cycles, wildcard versions, and unverifiable peer deps.

        Wildcard detection matches only the literal ``*`` range, not
        broad-but-bounded ranges like ``>=0``.
        """
        cycles = graph.detect_cycles_by_type()
        wildcard_deps: list[WildcardDependency] = []
        missing_peers: list[MissingPeer] = []

        for node in graph.nodes.values():
            for dep_name, spec in node.dependencies.items():
                if spec.version == WILDCARD_VERSION:
                    wildcard_deps.append(WildcardDependency(pkg=node.name, dep=dep_name, version=spec.version))
                if spec.type == DependencyType.PEER and dep_name not in graph.nodes:
                    # Satisfied outside the graph, cannot be verified here
                    missing_peers.append(MissingPeer(pkg=node.name, dep=dep_name))

        if cycles.production_cycles:
            logger.warning(f"{len(cycles.production_cycles)} production dependency cycle(s) block publishing")
        logger.debug(f"Analysis: {len(wildcard_deps)} wildcard deps, {len(missing_peers)} external peers")

        return AnalysisReport(
            production_cycles=cycles.production_cycles,
            dev_cycles=cycles.dev_cycles,
            wildcard_deps=wildcard_deps,
            missing_peers=missing_peers,
        )
