"""Packaging correctness verification for yays.

Tests validate:
- Top-level import exposes the documented public API
- py.typed marker is present in the wheel
- The ``yays`` console script entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import shutil
import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    def test_import_yays(self) -> None:
        import yays

        assert hasattr(yays, "sort_yaml")
        assert hasattr(yays, "sort_file")
        assert hasattr(yays, "YamlSorter")

    def test_sort_yaml_basic(self) -> None:
        from yays import sort_yaml

        assert sort_yaml("b: 1\na: 2\n", ["."]) == "a: 2\nb: 1\n"

    def test_subpackages_import(self) -> None:
        from yays.ordering import SortMode, rank_key
        from yays.path import parse_path
        from yays.tree import load_document

        assert rank_key("kind", SortMode.HUMAN) == 1
        assert parse_path(".").is_root
        assert load_document("a: 1\n").indent == 2


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        if shutil.which("poetry") is None:
            pytest.skip("poetry is not installed")
        dist_dir = PROJECT_ROOT / "dist"
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("yays-*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            assert "yays/py.typed" in zf.namelist()

    def test_all_source_modules_in_wheel(self, wheel_path: Path) -> None:
        expected_modules = [
            "yays/__init__.py",
            "yays/api.py",
            "yays/cli.py",
            "yays/errors.py",
            "yays/result.py",
            "yays/sorter.py",
            "yays/ordering/__init__.py",
            "yays/ordering/config.py",
            "yays/ordering/ranker.py",
            "yays/ordering/sort.py",
            "yays/path/__init__.py",
            "yays/path/parser.py",
            "yays/path/resolver.py",
            "yays/path/steps.py",
            "yays/tree/__init__.py",
            "yays/tree/indentation.py",
            "yays/tree/io.py",
            "yays/tree/nodes.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert module in names, f"Module {module} not found in wheel"


class TestEntryPoint:
    def test_console_script_registered(self) -> None:
        from importlib.metadata import entry_points

        scripts = [ep for ep in entry_points(group="console_scripts") if ep.name == "yays"]
        if not scripts:
            pytest.skip("yays is not installed as a distribution")
        assert scripts[0].value == "yays.cli:main"


class TestPackageMetadata:
    def test_version(self) -> None:
        import yays

        assert yays.__version__ == "0.1.0"

    def test_all_exports(self) -> None:
        import yays

        expected = {
            "IndexOutOfRangeError",
            "KeyNotFoundError",
            "NotAMappingError",
            "NotASequenceError",
            "NotIterableError",
            "PathSyntaxError",
            "ResolveError",
            "SortConfig",
            "SortMode",
            "SortReport",
            "SortTargetError",
            "YamlDecodeError",
            "YamlSorter",
            "YaysError",
            "sort_file",
            "sort_yaml",
        }
        actual = set(yays.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
