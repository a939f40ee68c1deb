"""Tests for the pkginit command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pkginit import __version__
from pkginit.cli import app

runner = CliRunner()


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    root = tmp_path / "Widget"
    root.mkdir()
    return root


class TestInit:
    """Tests for the init command."""

    def test_defaults_to_library(self, package_dir: Path) -> None:
        result = runner.invoke(app, ["init", "--path", str(package_dir)])

        assert result.exit_code == 0, result.output
        assert "Creating library package: Widget" in result.output
        assert (package_dir / "Sources" / "Widget.swift").exists()
        assert (package_dir / "Tests" / "Widget" / "WidgetTests.swift").exists()

    def test_type_is_case_insensitive(self, package_dir: Path) -> None:
        result = runner.invoke(app, ["init", "--type", "EXECUTABLE", "-p", str(package_dir)])

        assert result.exit_code == 0, result.output
        assert (package_dir / "Sources" / "main.swift").exists()

    def test_system_module(self, tmp_path: Path) -> None:
        root = tmp_path / "CFoo"
        root.mkdir()

        result = runner.invoke(app, ["init", "-t", "system-module", "-p", str(root)])

        assert result.exit_code == 0, result.output
        assert (root / "module.modulemap").exists()
        assert not (root / "Sources").exists()

    def test_uses_cwd_by_default(self, package_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PKGINIT_PACKAGE_DIR", raising=False)
        monkeypatch.chdir(package_dir)

        result = runner.invoke(app, ["init", "--type", "executable"])

        assert result.exit_code == 0, result.output
        assert (package_dir / "Package.swift").exists()

    def test_parent_path_uses_real_directory_name(
        self, package_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should name the package after the directory '..' points to."""
        sub = package_dir / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)

        result = runner.invoke(app, ["init", "-t", "executable", "-p", ".."])

        assert result.exit_code == 0, result.output
        assert "Creating executable package: Widget" in result.output
        assert 'name: "Widget"' in (package_dir / "Package.swift").read_text(encoding="utf-8")

    def test_invalid_type_is_usage_error(self, package_dir: Path) -> None:
        result = runner.invoke(app, ["init", "--type", "system_module", "-p", str(package_dir)])

        assert result.exit_code == 2
        assert not (package_dir / "Package.swift").exists()

    def test_already_initialized(self, package_dir: Path) -> None:
        (package_dir / "Package.swift").write_text("// existing\n", encoding="utf-8")

        result = runner.invoke(app, ["init", "-p", str(package_dir)])

        assert result.exit_code == 1
        assert "error: a manifest file already exists in this directory" in result.output
        assert not (package_dir / ".gitignore").exists()

    def test_invalid_name(self, tmp_path: Path) -> None:
        root = tmp_path / "my-package"
        root.mkdir()

        result = runner.invoke(app, ["init", "-p", str(root)])

        assert result.exit_code == 1
        assert "invalid package name" in result.output
        assert list(root.iterdir()) == []

    def test_dry_run_writes_nothing(self, package_dir: Path) -> None:
        result = runner.invoke(app, ["init", "--dry-run", "-t", "executable", "-p", str(package_dir)])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Would create executable package: Widget",
            "  Package.swift",
            "  .gitignore",
            "  Sources/",
            "  Sources/main.swift",
            "  Tests/",
        ]
        assert list(package_dir.iterdir()) == []


class TestVersion:
    """Tests for the --version option."""

    def test_prints_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"pkginit {__version__}" in result.output
