"""Tests for workspace root detection."""

from tw_patterns.workspace import find_workspace_root


class TestFindWorkspaceRoot:
    def test_manifest_with_workspaces(self, workspace):
        start = workspace / "apps" / "web" / "src"
        assert find_workspace_root(start) == workspace.resolve()

    def test_manifest_without_workspaces_ignored(self, tmp_path):
        (tmp_path / "package.json").write_text('{"workspaces": ["pkgs/*"]}')
        inner = tmp_path / "site"
        inner.mkdir()
        (inner / "package.json").write_text('{"name": "site"}')
        assert find_workspace_root(inner) == tmp_path.resolve()

    def test_unparseable_manifest_skipped(self, tmp_path):
        (tmp_path / "package.json").write_text('{"workspaces": ["a"]}')
        inner = tmp_path / "b"
        inner.mkdir()
        (inner / "package.json").write_text("{not json")
        assert find_workspace_root(inner) == tmp_path.resolve()

    def test_lifts_above_packages_dir(self, tmp_path):
        start = tmp_path / "repo" / "packages" / "ui"
        start.mkdir(parents=True)
        assert find_workspace_root(start) == (tmp_path / "repo").resolve()

    def test_plain_directory(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        assert find_workspace_root(project) == project.resolve()

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_workspace_root() == tmp_path.resolve()
