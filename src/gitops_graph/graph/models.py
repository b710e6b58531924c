"""Dependency graph data types.

Defines DependencyType, DependencySpec (one directed edge's metadata),
DependencyNode (one package), and the report types produced by cycle
detection and analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from gitops_graph.manifest import PackageManifest


class DependencyType(StrEnum):
    """Manifest section a dependency was declared in."""

    PROD = "prod"
    PEER = "peer"
    DEV = "dev"


@dataclass(frozen=True)
class DependencySpec:
    """Metadata for one dependency edge."""

    type: DependencyType
    version: str  # version range as written in the manifest
    resolved: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": str(self.type), "version": self.version}
        if self.resolved is not None:
            d["resolved"] = self.resolved
        return d


@dataclass
class DependencyNode:
    """A package tracked in the graph, publishable or private."""

    name: str
    version: str
    repo: PackageManifest | None = None
    dependencies: dict[str, DependencySpec] = field(default_factory=dict)
    dependents: set[str] = field(default_factory=set)
    publishable: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "dependencies": [
                {"name": dep_name, "spec": spec.to_dict()}
                for dep_name, spec in self.dependencies.items()
            ],
            "dependents": sorted(self.dependents),
            "publishable": self.publishable,
        }


@dataclass(frozen=True)
class CycleReport:
    """Cycles found in the graph, split by severity.

    Production cycles (prod/peer edges) make publishing impossible.
    Dev cycles are tolerated and reported for information only.
    """

    production_cycles: list[list[str]] = field(default_factory=list)
    dev_cycles: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "production_cycles": [list(c) for c in self.production_cycles],
            "dev_cycles": [list(c) for c in self.dev_cycles],
        }


@dataclass(frozen=True)
class WildcardDependency:
    """A dependency declared with the unconstrained ``*`` range."""

    pkg: str
    dep: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return {"pkg": self.pkg, "dep": self.dep, "version": self.version}


@dataclass(frozen=True)
class MissingPeer:
    """A peer dependency whose target is not part of the graph."""

    pkg: str
    dep: str

    def to_dict(self) -> dict[str, Any]:
        return {"pkg": self.pkg, "dep": self.dep}


@dataclass(frozen=True)
class AnalysisReport:
    """Diagnostics for a built graph.

    Only production cycles block publishing; the remaining findings are
    advisory and accompany a successful computation.
    """

    production_cycles: list[list[str]] = field(default_factory=list)
    dev_cycles: list[list[str]] = field(default_factory=list)
    wildcard_deps: list[WildcardDependency] = field(default_factory=list)
    missing_peers: list[MissingPeer] = field(default_factory=list)

    @property
    def has_blocking_issues(self) -> bool:
        return bool(self.production_cycles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "production_cycles": [list(c) for c in self.production_cycles],
            "dev_cycles": [list(c) for c in self.dev_cycles],
            "wildcard_deps": [w.to_dict() for w in self.wildcard_deps],
            "missing_peers": [m.to_dict() for m in self.missing_peers],
        }
