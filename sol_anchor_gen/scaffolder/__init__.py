"""Workspace scaffolding: file writing, manifests, installer and orchestration.

Quick usage::

    from sol_anchor_gen.patterns import GenerationContext, create_template_registry
    from sol_anchor_gen.scaffolder import WorkspaceConfig, create_workspace_generator

    registry = create_template_registry()
    vault = registry.get("vault")
    context = GenerationContext.build("my-vault", "./my-vault", vault.options)
    await create_workspace_generator().generate(WorkspaceConfig(vault, context))
"""

from sol_anchor_gen.scaffolder.fs_writer import FileSystemWriter
from sol_anchor_gen.scaffolder.manifests import (
    PackageManifest,
    build_package_manifest,
    render_anchor_toml,
)
from sol_anchor_gen.scaffolder.package_manager import PackageManager
from sol_anchor_gen.scaffolder.workspace import (
    SKELETON_DIRS,
    WorkspaceConfig,
    WorkspaceGenerator,
    create_workspace_generator,
    resolve_inside,
)

__all__ = [
    "FileSystemWriter",
    "PackageManager",
    "PackageManifest",
    "SKELETON_DIRS",
    "WorkspaceConfig",
    "WorkspaceGenerator",
    "build_package_manifest",
    "create_workspace_generator",
    "render_anchor_toml",
    "resolve_inside",
]
