"""Shared pytest fixtures for the SolAnchorGen test suite.

Provides reusable fixtures for:
- The default template registry and renderer
- Settings rooted in a temporary output directory
- A progress reporter writing to an in-memory console
- A package manager whose install step never spawns a process
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from sol_anchor_gen.config import Settings
from sol_anchor_gen.patterns import GenerationContext, TemplateRegistry, create_template_registry
from sol_anchor_gen.progress import ProgressReporter
from sol_anchor_gen.rendering import TemplateRenderer
from sol_anchor_gen.scaffolder import FileSystemWriter, PackageManager, WorkspaceGenerator


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def registry(renderer: TemplateRenderer) -> TemplateRegistry:
    """A fresh registry holding the six built-in templates."""
    return create_template_registry(renderer)


# ---------------------------------------------------------------------------
# Configuration & output
# ---------------------------------------------------------------------------


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings whose output directory is the test's tmp_path."""
    return Settings(output_dir=tmp_path)


@pytest.fixture
def record_console() -> Console:
    """A wide, colourless console that records everything printed to it."""
    return Console(file=io.StringIO(), width=200, record=True, color_system=None)


@pytest.fixture
def progress(record_console: Console) -> ProgressReporter:
    return ProgressReporter(console=record_console)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_package_manager() -> MagicMock:
    """A PackageManager stand-in whose install succeeds without a subprocess."""
    manager = MagicMock(spec=PackageManager)
    manager.tool = "pnpm"
    manager.install = AsyncMock(return_value=None)
    manager.is_available = AsyncMock(return_value=True)
    return manager


@pytest.fixture
def workspace_generator(
    fake_package_manager: MagicMock,
    progress: ProgressReporter,
    settings: Settings,
    renderer: TemplateRenderer,
) -> WorkspaceGenerator:
    return WorkspaceGenerator(
        fs_writer=FileSystemWriter(),
        package_manager=fake_package_manager,
        progress=progress,
        settings=settings,
        renderer=renderer,
    )


@pytest.fixture
def make_context(registry: TemplateRegistry, settings: Settings):
    """Factory building a GenerationContext for a template in tmp_path."""

    def _make(template_id: str, project_name: str = "my-project", **supplied) -> GenerationContext:
        descriptor = registry.get(template_id)
        assert descriptor is not None, f"unknown template {template_id}"
        return GenerationContext.build(
            project_name,
            settings.project_path(project_name),
            descriptor.options,
            supplied,
        )

    return _make


@pytest.fixture
def captured_console(monkeypatch, record_console: Console) -> Console:
    """Route every module-level console used by the CLI to ``record_console``."""
    for target in (
        "sol_anchor_gen.utils.console",
        "sol_anchor_gen.cli.console",
        "sol_anchor_gen.progress.default_console",
        "sol_anchor_gen.prompts.default_console",
    ):
        monkeypatch.setattr(target, record_console)
    return record_console
