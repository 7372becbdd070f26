"""Workspace generation orchestrator.

``WorkspaceGenerator.generate`` runs a fixed, strictly sequential step list:

1. Pre-flight: the destination must not exist.
2. Create the skeleton directories.
3. Render the template files and write them inside the project root.
4. Write ``Anchor.toml``.
5. Write ``package.json`` with the merged dependency maps.
6. Install dependencies with the configured package manager.

A failure in steps 2-6 removes the whole destination directory before the
original exception propagates, so a failed run never leaves a partial
workspace behind.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from sol_anchor_gen.config import Settings
from sol_anchor_gen.errors import FileSystemError, PathCollisionError, PathContainmentError
from sol_anchor_gen.patterns.base import GeneratedFile, GenerationContext
from sol_anchor_gen.patterns.registry import TemplateDescriptor
from sol_anchor_gen.progress import ProgressReporter
from sol_anchor_gen.rendering import TemplateRenderer
from sol_anchor_gen.scaffolder.fs_writer import FileSystemWriter
from sol_anchor_gen.scaffolder.manifests import build_package_manifest, render_anchor_toml
from sol_anchor_gen.scaffolder.package_manager import PackageManager

SKELETON_DIRS = ("programs", "tests", "app", "migrations", "target")


@dataclass(frozen=True)
class WorkspaceConfig:
    """A fully resolved generation request: which template, with what inputs."""

    template: TemplateDescriptor
    context: GenerationContext

    @property
    def project_name(self) -> str:
        return self.context.project_name

    @property
    def project_path(self) -> Path:
        return self.context.project_path


class WorkspaceGenerator:
    """Composes the writer, package manager and reporter into one run."""

    def __init__(
        self,
        fs_writer: FileSystemWriter,
        package_manager: PackageManager,
        progress: ProgressReporter,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.fs_writer = fs_writer
        self.package_manager = package_manager
        self.progress = progress
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()

    async def generate(self, config: WorkspaceConfig) -> Path:
        """Generate the workspace described by *config*.

        Returns:
            The project root directory.

        Raises:
            PathCollisionError: The destination already exists. Nothing is
                created or removed.
            ScaffoldError: Any failure after pre-flight, re-raised unchanged
                once the destination has been removed.
        """
        root = config.project_path
        if await self.fs_writer.path_exists(root):
            raise PathCollisionError(root)

        steps: list[tuple[str, str, Callable[[], Awaitable[None]]]] = [
            (
                "Creating project directory...",
                "Created project directory",
                lambda: self._create_skeleton(root),
            ),
            (
                "Generating template files...",
                "Generated template files",
                lambda: self._write_template_files(config),
            ),
            (
                "Creating Anchor configuration...",
                "Created Anchor.toml",
                lambda: self._write_anchor_toml(config),
            ),
            (
                "Creating package.json...",
                "Created package.json",
                lambda: self._write_package_json(config),
            ),
            (
                f"Installing dependencies with {self.package_manager.tool}...",
                "Installed dependencies",
                lambda: self.package_manager.install(root),
            ),
        ]

        for label, done, action in steps:
            self.progress.start_step(label)
            try:
                await action()
            except BaseException:
                self.progress.fail_step(f"{label.rstrip('.')} failed")
                await self._rollback(root)
                raise
            self.progress.complete_step(done)

        return root

    # -- Steps -------------------------------------------------------------

    async def _create_skeleton(self, root: Path) -> None:
        await self.fs_writer.ensure_directory(root)
        for name in SKELETON_DIRS:
            await self.fs_writer.ensure_directory(root / name)

    async def _write_template_files(self, config: WorkspaceConfig) -> None:
        files = await config.template.generator.generate(config.context)
        for generated in files:
            target = resolve_inside(config.project_path, generated)
            await self.fs_writer.write_file(target, generated.content)

    async def _write_anchor_toml(self, config: WorkspaceConfig) -> None:
        content = render_anchor_toml(config.context, self.settings, self.renderer)
        await self.fs_writer.write_file(config.project_path / "Anchor.toml", content)

    async def _write_package_json(self, config: WorkspaceConfig) -> None:
        generator = config.template.generator
        manifest = build_package_manifest(
            config.context,
            generator.dependencies(config.context),
            generator.dev_dependencies(config.context),
            version=self.settings.project_version,
        )
        await self.fs_writer.write_file(config.project_path / "package.json", manifest.to_json())

    async def _rollback(self, root: Path) -> None:
        try:
            await self.fs_writer.remove_tree(root)
        except FileSystemError as exc:
            self.progress.warning(f"Failed to clean up partial generation: {exc}")


def resolve_inside(root: Path, generated: GeneratedFile) -> Path:
    """Map a generated file's relative path onto *root*.

    Raises:
        PathContainmentError: The path is empty, absolute, or resolves
            outside *root*.
    """
    relative = PurePosixPath(generated.path)
    if not generated.path or relative.is_absolute() or Path(generated.path).is_absolute():
        raise PathContainmentError(generated.path or "<empty>", root)

    resolved_root = root.resolve()
    target = (resolved_root / relative).resolve()
    if target == resolved_root or not target.is_relative_to(resolved_root):
        raise PathContainmentError(target, resolved_root)
    return target


def create_workspace_generator(
    settings: Settings | None = None,
    renderer: TemplateRenderer | None = None,
    progress: ProgressReporter | None = None,
) -> WorkspaceGenerator:
    """Wire a generator with the default writer and configured package manager."""
    settings = settings or Settings()
    return WorkspaceGenerator(
        fs_writer=FileSystemWriter(),
        package_manager=PackageManager(settings.package_manager),
        progress=progress or ProgressReporter(),
        settings=settings,
        renderer=renderer,
    )
