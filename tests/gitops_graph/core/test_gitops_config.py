"""Tests for gitops configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gitops_graph.core.config import GitopsConfig, GitopsConfigError, RepoConfig, load_gitops_config
from gitops_graph.core.constants import GITOPS_MAX_ITERATIONS_DEFAULT


def _write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "gitops.config.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


class TestLoadGitopsConfig:
    """Test loading gitops.config.yaml."""

    def test_missing_file_returns_defaults(self, tmp_path: Path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_gitops_config(tmp_path / "gitops.config.yaml")

        assert config == GitopsConfig()
        assert config.max_iterations == GITOPS_MAX_ITERATIONS_DEFAULT == 10
        assert config.concurrency == 5
        assert config.npm_wait_timeout_ms == 600_000
        assert "Config file not found" in caplog.text

    def test_empty_file_returns_defaults(self, tmp_path: Path):
        config = load_gitops_config(_write_config(tmp_path, ""))
        assert config == GitopsConfig()

    def test_repo_shorthand_and_mapping(self, tmp_path: Path):
        config_file = _write_config(
            tmp_path,
            """repos:
  - https://github.com/fuzdev/fuz_util
  - repo_url: https://github.com/fuzdev/fuz_gitops.git
    branch: develop
max_iterations: 4
""",
        )
        config = load_gitops_config(config_file)

        assert config.repos == [
            RepoConfig(repo_url="https://github.com/fuzdev/fuz_util"),
            RepoConfig(repo_url="https://github.com/fuzdev/fuz_gitops.git", branch="develop"),
        ]
        assert [repo.name for repo in config.repos] == ["fuz_util", "fuz_gitops"]
        assert config.repos[0].branch == "main"
        assert config.max_iterations == 4

    def test_invalid_yaml(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "repos: [unclosed\n")
        with pytest.raises(GitopsConfigError, match="Invalid YAML"):
            load_gitops_config(config_file)

    def test_non_mapping_top_level(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "- just\n- a list\n")
        with pytest.raises(GitopsConfigError, match="mapping"):
            load_gitops_config(config_file)

    def test_iterations_must_be_positive(self, tmp_path: Path):
        config_file = _write_config(tmp_path, "max_iterations: 0\n")
        with pytest.raises(GitopsConfigError, match="max_iterations"):
            load_gitops_config(config_file)


class TestRepoConfig:
    """Test repository entries."""

    def test_name_strips_trailing_slash(self):
        assert RepoConfig(repo_url="https://github.com/fuzdev/fuz.dev/").name == "fuz.dev"
