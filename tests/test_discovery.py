"""Tests for TypeScript file discovery."""

import os
from pathlib import Path

import pytest

from ts_quality.config import AnalysisConfig
from ts_quality.discovery import find_typescript_files, is_typescript_file
from ts_quality.exceptions import InvalidPathError


class TestIsTypescriptFile:
    @pytest.mark.parametrize("name", ["a.ts", "b.tsx", "c.d.ts", "D.TS"])
    def test_accepted(self, name):
        assert is_typescript_file(Path(name))

    @pytest.mark.parametrize("name", ["a.js", "b.jsx", "c.ts.bak", "Makefile"])
    def test_rejected(self, name):
        assert not is_typescript_file(Path(name))


class TestFindTypescriptFiles:
    def test_single_file(self, write_file):
        path = write_file("index.ts", "const a = 1;")
        assert find_typescript_files(path) == [path]

    def test_single_non_typescript_file(self, write_file):
        path = write_file("index.js", "var a = 1;")
        with pytest.raises(InvalidPathError, match="Invalid path"):
            find_typescript_files(path)

    def test_missing_path(self, tmp_path):
        with pytest.raises(InvalidPathError) as excinfo:
            find_typescript_files(tmp_path / "nope")
        assert excinfo.value.reason == "path does not exist"

    def test_recursive_and_sorted(self, tmp_path, write_file):
        write_file("src/b.ts")
        write_file("src/a.tsx")
        write_file("src/nested/deep/c.ts")
        write_file("src/readme.md")
        write_file("src/util.js")
        found = find_typescript_files(tmp_path / "src")
        assert [p.relative_to(tmp_path).as_posix() for p in found] == [
            "src/a.tsx",
            "src/b.ts",
            "src/nested/deep/c.ts",
        ]

    def test_empty_directory(self, tmp_path):
        assert find_typescript_files(tmp_path) == []

    def test_excluded_directories(self, tmp_path, write_file):
        write_file("app.ts")
        write_file("node_modules/lib/index.ts")
        write_file("dist/app.ts")
        config = AnalysisConfig(exclude_dirs=["node_modules", "dist"])
        found = find_typescript_files(tmp_path, config)
        assert [p.name for p in found] == ["app.ts"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_loop_terminates(self, tmp_path, write_file):
        write_file("pkg/mod.ts")
        (tmp_path / "pkg" / "loop").symlink_to(tmp_path / "pkg", target_is_directory=True)
        config = AnalysisConfig(follow_symlinks=True)
        found = find_typescript_files(tmp_path / "pkg", config)
        assert [p.name for p in found] == ["mod.ts"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinks_not_followed_by_default(self, tmp_path, write_file):
        write_file("outside/extra.ts")
        write_file("project/main.ts")
        (tmp_path / "project" / "linked").symlink_to(
            tmp_path / "outside", target_is_directory=True
        )
        found = find_typescript_files(tmp_path / "project")
        assert [p.name for p in found] == ["main.ts"]
