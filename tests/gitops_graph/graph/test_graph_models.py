"""Tests for dependency graph data types."""

from __future__ import annotations

from gitops_graph.graph import (
    AnalysisReport,
    CycleReport,
    DependencyNode,
    DependencySpec,
    DependencyType,
    MissingPeer,
)


class TestDependencySpec:
    """Test edge metadata serialization."""

    def test_to_dict_omits_unset_resolved(self):
        spec = DependencySpec(type=DependencyType.PEER, version="^5")
        assert spec.to_dict() == {"type": "peer", "version": "^5"}

    def test_to_dict_includes_resolved(self):
        spec = DependencySpec(type=DependencyType.PROD, version="^1.0.0", resolved="1.2.3")
        assert spec.to_dict() == {"type": "prod", "version": "^1.0.0", "resolved": "1.2.3"}

    def test_type_values(self):
        assert [t.value for t in DependencyType] == ["prod", "peer", "dev"]


class TestDependencyNode:
    """Test node defaults and serialization."""

    def test_defaults(self):
        node = DependencyNode(name="a", version="1.0.0")
        assert node.repo is None
        assert node.dependencies == {}
        assert node.dependents == set()
        assert node.publishable is True

    def test_to_dict_sorts_dependents(self):
        node = DependencyNode(name="a", version="1.0.0", dependents={"z", "b", "m"})
        assert node.to_dict()["dependents"] == ["b", "m", "z"]


class TestReports:
    """Test cycle and analysis report types."""

    def test_cycle_report_to_dict(self):
        report = CycleReport(production_cycles=[["a", "b", "a"]])
        assert report.to_dict() == {"production_cycles": [["a", "b", "a"]], "dev_cycles": []}

    def test_blocking_only_for_production_cycles(self):
        assert AnalysisReport(dev_cycles=[["a", "b", "a"]]).has_blocking_issues is False
        assert AnalysisReport(missing_peers=[MissingPeer(pkg="a", dep="b")]).has_blocking_issues is False
        assert AnalysisReport(production_cycles=[["a", "a"]]).has_blocking_issues is True
