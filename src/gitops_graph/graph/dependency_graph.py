"""Dependency graph data structure and algorithms for multi-repo publishing.

Provides :class:`DependencyGraph` with topological sort (Kahn's algorithm)
and cycle detection by dependency type. For publishing order computation
and diagnostics, see :mod:`gitops_graph.graph.builder`.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from gitops_graph.core.constants import DEFAULT_PACKAGE_VERSION
from gitops_graph.manifest import PackageManifest

from .models import CycleReport, DependencyNode, DependencySpec, DependencyType

logger = logging.getLogger(__name__)


class OrderingCycleError(RuntimeError):
    """Raised when the graph cannot be ordered because of a cycle.

    ``unresolved`` holds every package left over when no zero-indegree
    node remained. That includes the cycle members and anything
    downstream of them; use :meth:`DependencyGraph.detect_cycles_by_type`
    to find the members themselves.
    """

    def __init__(self, unresolved: Iterable[str]):
        self.unresolved = frozenset(unresolved)
        names = ", ".join(sorted(self.unresolved))
        super().__init__(f"Circular dependency detected; unable to order packages: {names}")


class GraphStateError(RuntimeError):
    """Raised when a graph is initialized more than once."""


class DependencyGraph:
    """Packages and the "depends on" relationships between them.

    ``nodes`` maps package name to node; each node's ``dependencies`` is
    the forward index. ``edges`` maps package name to the names of the
    in-graph packages that depend on it (the reverse index).

    A graph is populated once by :meth:`init_from_repos` and treated as
    immutable afterwards.
    """

    def __init__(self) -> None:
        self.nodes: dict[str, DependencyNode] = {}
        self.edges: dict[str, set[str]] = {}  # pkg -> dependents
        self._initialized = False

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

    def init_from_repos(self, repos: Iterable[PackageManifest]) -> None:
        """Populate the graph from a snapshot of manifests.

        Pass 1 creates one node per manifest. Pass 2 records a dependent
        edge for every dependency that names another node; dependencies
        on packages outside the graph stay on the node without an edge.

        Raises:
            GraphStateError: If the graph was already initialized
        """
        if self._initialized:
            raise GraphStateError("Dependency graph is already initialized; build a new graph instead")
        self._initialized = True

        # First pass: nodes
        for repo in repos:
            if repo.name in self.nodes:
                logger.warning(f"Duplicate package name {repo.name!r} in manifests; later entry wins")
            self.nodes[repo.name] = DependencyNode(
                name=repo.name,
                version=repo.version or DEFAULT_PACKAGE_VERSION,
                repo=repo,
                dependencies=_merge_dependency_sections(repo),
                publishable=not repo.private,
            )
            self.edges[repo.name] = set()

        # Second pass: dependents
        edge_count = 0
        for node in self.nodes.values():
            for dep_name in node.dependencies:
                if dep_name in self.nodes:
                    self.nodes[dep_name].dependents.add(node.name)
                    self.edges[dep_name].add(node.name)
                    edge_count += 1

        logger.debug(f"Built dependency graph: {len(self.nodes)} nodes, {edge_count} internal edges")

    def get_node(self, name: str) -> DependencyNode | None:
        return self.nodes.get(name)

    def get_dependents(self, name: str) -> frozenset[str]:
        return frozenset(self.edges.get(name, ()))

    def get_dependencies(self, name: str) -> Mapping[str, DependencySpec]:
        """Read-only view of a package's dependencies; empty for unknown names."""
        node = self.nodes.get(name)
        return MappingProxyType(node.dependencies if node is not None else {})

    def topological_sort(self, exclude_dev: bool = False) -> list[str]:
        """Compute a dependency-first ordering of every package.

        Uses Kahn's algorithm; among packages ready at the same time, the
        one inserted into the graph first comes first.

        Args:
            exclude_dev: If True, dev dependencies impose no ordering.
                Publishing uses this to tolerate circular dev dependencies.

        Returns:
            Package names, dependencies before dependents

        Raises:
            OrderingCycleError: If the included edges contain a cycle
        """
        position = {name: index for index, name in enumerate(self.nodes)}
        in_degree = dict.fromkeys(self.nodes, 0)
        dependents: dict[str, list[str]] = {name: [] for name in self.nodes}

        for node in self.nodes.values():
            for dep_name, spec in node.dependencies.items():
                if dep_name not in self.nodes:
                    continue
                if exclude_dev and spec.type == DependencyType.DEV:
                    continue
                in_degree[node.name] += 1
                dependents[dep_name].append(node.name)

        ready = [position[name] for name, degree in in_degree.items() if degree == 0]
        heapq.heapify(ready)
        names = list(self.nodes)
        order: list[str] = []

        while ready:
            name = names[heapq.heappop(ready)]
            order.append(name)
            for dependent in dependents[name]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    heapq.heappush(ready, position[dependent])

        if len(order) != len(self.nodes):
            raise OrderingCycleError(name for name in self.nodes if in_degree[name] > 0)

        logger.debug(f"Topological sort (exclude_dev={exclude_dev}): {order}")
        return order

    def detect_cycles_by_type(self) -> CycleReport:
        """Detect circular dependencies, categorized by severity.

        Production/peer cycles prevent publishing (no valid order exists).
        Dev cycles are normal (test utils, shared configs) and tolerated.
        Each distinct set of packages is reported once, as the first path
        the search found through it.
        """
        report = CycleReport(
            production_cycles=self._find_cycles(lambda spec: spec.type != DependencyType.DEV),
            dev_cycles=self._find_cycles(lambda spec: spec.type == DependencyType.DEV),
        )
        logger.debug(
            f"Cycle detection: {len(report.production_cycles)} production, "
            f"{len(report.dev_cycles)} dev"
        )
        return report

    def detect_cycles(self, include_dev: bool = False) -> list[list[str]]:
        """Find cycles over every edge the matching sort would honor.

        With ``include_dev`` this also finds loops that mix dev and
        prod/peer edges, which neither half of
        :meth:`detect_cycles_by_type` can see.
        """
        if include_dev:
            return self._find_cycles(lambda spec: True)
        return self._find_cycles(lambda spec: spec.type != DependencyType.DEV)

    def _find_cycles(self, include: Callable[[DependencySpec], bool]) -> list[list[str]]:
        """DFS cycle detection following only edges that match ``include``."""
        cycles: list[list[str]] = []
        seen_keys: set[tuple[str, ...]] = set()
        visited: set[str] = set()
        on_stack: set[str] = set()
        path: list[str] = []

        def dfs(name: str) -> None:
            visited.add(name)
            on_stack.add(name)
            path.append(name)

            for dep_name, spec in self.nodes[name].dependencies.items():
                if not include(spec) or dep_name not in self.nodes:
                    continue
                if dep_name not in visited:
                    dfs(dep_name)
                elif dep_name in on_stack:
                    members = path[path.index(dep_name):]
                    cycle = members + [dep_name]
                    key = tuple(sorted(members))
                    if key not in seen_keys:
                        seen_keys.add(key)
                        cycles.append(cycle)

            path.pop()
            on_stack.discard(name)

        for name in self.nodes:
            if name not in visited:
                dfs(name)

        return cycles

    def serialize(self) -> dict[str, Any]:
        """Read-only structural snapshot for diagnostics and UIs.

        ``edges`` entries point from a dependency to its dependent.
        """
        edges = [
            {"from": dep_name, "to": dependent}
            for dep_name, dependents in self.edges.items()
            for dependent in sorted(dependents)
        ]
        return {
            "nodes": [node.to_dict() for node in self.nodes.values()],
            "edges": edges,
        }

    def to_dict(self) -> dict[str, Any]:
        return self.serialize()


def _merge_dependency_sections(repo: PackageManifest) -> dict[str, DependencySpec]:
    """Merge a manifest's dependency sections into one mapping.

    Inserts dev, then peer, then prod. Later writes replace earlier ones,
    so when a package is listed in several sections the stronger
    constraint wins (prod > peer > dev). Reversing the order silently
    changes which spec survives.
    """
    merged: dict[str, DependencySpec] = {}
    sections = (
        (DependencyType.DEV, repo.dev_dependencies),
        (DependencyType.PEER, repo.peer_dependencies),
        (DependencyType.PROD, repo.dependencies),
    )
    for dep_type, section in sections:
        for dep_name, version in section.items():
            merged[dep_name] = DependencySpec(type=dep_type, version=version)
    return merged
