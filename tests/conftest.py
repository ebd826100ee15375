"""Pytest configuration and shared fixtures for the proofreader test suite.

This module provides fixtures that isolate process-wide state (cached
settings and the default validator factory) and build throwaway plugin
packages on disk for discovery and fallback-loading tests.
"""

import importlib
import os
import sys
import textwrap
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from proofreader.config.settings import get_settings
from proofreader.validator.factory import get_default_factory

PluginPackageFactory = Callable[[dict[str, str]], str]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear PROOFREADER_* variables and cached singletons around each test."""
    for key in [k for k in list(os.environ) if k.startswith("PROOFREADER_")]:
        monkeypatch.delenv(key, raising=False)

    get_settings.cache_clear()
    get_default_factory.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_factory.cache_clear()


@pytest.fixture
def make_plugin_package(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[PluginPackageFactory]:
    """Provide a builder for importable packages written under tmp_path.

    The builder takes a mapping of relative file path to source code,
    adds missing ``__init__.py`` files, and returns the package name.
    Modules are removed from ``sys.modules`` afterwards.

    """
    monkeypatch.syspath_prepend(str(tmp_path))
    created: list[str] = []

    def _make(files: dict[str, str]) -> str:
        name = f"proofreader_plugins_{uuid.uuid4().hex[:12]}"
        root = tmp_path / name
        root.mkdir()
        for relative, source in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")

        for directory in [root, *(p for p in root.rglob("*") if p.is_dir())]:
            init = directory / "__init__.py"
            if not init.exists():
                init.write_text("", encoding="utf-8")

        importlib.invalidate_caches()
        created.append(name)
        return name

    yield _make

    for name in created:
        for module_name in [m for m in sys.modules if m == name or m.startswith(f"{name}.")]:
            del sys.modules[module_name]
