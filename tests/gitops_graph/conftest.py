"""Shared fixtures for dependency graph tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gitops_graph.graph import DependencyGraph, DependencyGraphBuilder
from gitops_graph.manifest import PackageManifest


def make_manifest(
    name: str,
    *,
    version: str | None = "1.0.0",
    private: bool = False,
    prod: dict[str, str] | None = None,
    peer: dict[str, str] | None = None,
    dev: dict[str, str] | None = None,
) -> PackageManifest:
    """Helper to build a PackageManifest with sensible defaults."""
    return PackageManifest(
        name=name,
        version=version,
        private=private,
        dependencies=prod or {},
        peer_dependencies=peer or {},
        dev_dependencies=dev or {},
    )


@pytest.fixture
def builder() -> DependencyGraphBuilder:
    return DependencyGraphBuilder()


@pytest.fixture
def build_graph(builder: DependencyGraphBuilder) -> Callable[..., DependencyGraph]:
    """Build a graph from manifests passed as positional arguments."""

    def _build(*manifests: PackageManifest) -> DependencyGraph:
        return builder.build_from_repos(list(manifests))

    return _build


@pytest.fixture
def manifest() -> Callable[..., PackageManifest]:
    return make_manifest
