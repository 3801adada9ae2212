"""Tests for packaging metadata."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _extras(pyproject: dict[str, Any]) -> dict[str, list[str]]:
    return cast(dict[str, list[str]], pyproject.get("project", {}).get("optional-dependencies", {}))


def test_dev_extra_has_pytest() -> None:
    extras = _extras(_load_pyproject())
    assert "dev" in extras
    assert any(req.startswith("pytest") for req in extras["dev"])


def test_runtime_dependencies() -> None:
    deps = _load_pyproject()["project"]["dependencies"]
    names = {d.split(">")[0].split("=")[0].lower() for d in deps}
    assert {"pydantic", "pyyaml", "typer"}.issubset(names)


def test_console_script_entrypoint() -> None:
    pyproject = _load_pyproject()
    scripts = pyproject.get("project", {}).get("scripts", {})
    assert scripts.get("regexcollection") == "regexcollection.cli:app"


def test_defaults_shipped_as_package_data() -> None:
    data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in data["regexcollection.config"]


def test_import_smoke() -> None:
    importlib.import_module("regexcollection")
    importlib.import_module("regexcollection.cli")
