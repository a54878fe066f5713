"""Installed-package dependency declarations."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def _names(requirements: list[str]) -> set[str]:
    return {re.split(r"[\[<>=~! ]", req, maxsplit=1)[0].lower() for req in requirements}


def test_testing_harness_dependencies_install_with_the_package() -> None:
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]

    assert "factory-boy" in _names(project["dependencies"])
    assert "pytest" in _names(project["optional-dependencies"]["test"])
