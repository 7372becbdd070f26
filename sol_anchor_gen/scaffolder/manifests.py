"""Project manifests written next to the generated sources.

``Anchor.toml`` is rendered from ``templates/shared/Anchor.toml.j2``;
``package.json`` is built from a Pydantic model so the key order and the
camelCase field names stay fixed.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

from sol_anchor_gen.config import Settings
from sol_anchor_gen.patterns.base import Dependencies, GenerationContext
from sol_anchor_gen.rendering import TemplateRenderer

PACKAGE_DESCRIPTION = "Anchor program generated with SolAnchorGen"

DEFAULT_SCRIPTS: dict[str, str] = {
    "build": "anchor build",
    "test": "anchor test",
    "deploy": "anchor deploy",
    "test:unit": "ts-node tests/**/*.ts",
}


class PackageManifest(BaseModel):
    """The generated project's ``package.json``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "0.1.0"
    description: str = PACKAGE_DESCRIPTION
    scripts: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    dependencies: Dependencies = Field(default_factory=dict)
    dev_dependencies: Dependencies = Field(default_factory=dict, alias="devDependencies")
    keywords: list[str] = Field(default_factory=lambda: ["solana", "anchor", "blockchain"])
    author: str = ""
    license: str = "MIT"

    def to_json(self) -> str:
        """Serialise with 2-space indentation and a trailing newline."""
        return json.dumps(self.model_dump(by_alias=True), indent=2) + "\n"


def render_anchor_toml(
    context: GenerationContext,
    settings: Settings,
    renderer: TemplateRenderer,
) -> str:
    """Render ``Anchor.toml`` naming the program under ``[programs.localnet]``."""
    anchor = settings.anchor
    return renderer.render(
        "shared/Anchor.toml.j2",
        {
            "program_name": context.program_name,
            "program_id": context.program_id,
            "registry_url": anchor.registry_url,
            "cluster": anchor.cluster,
            "wallet": anchor.wallet,
            "package_manager": settings.package_manager,
        },
    )


def build_package_manifest(
    context: GenerationContext,
    dependencies: Dependencies,
    dev_dependencies: Dependencies,
    version: str = "0.1.0",
) -> PackageManifest:
    return PackageManifest(
        name=context.project_name,
        version=version,
        dependencies=dict(dependencies),
        dev_dependencies=dict(dev_dependencies),
    )
