"""SolAnchorGen configuration.

Typed settings for the scaffolder. All settings use Pydantic v2 models so
they are validated at construction time and can be built from environment
variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class AnchorConfig(BaseModel):
    """Values written into the generated ``Anchor.toml``."""

    program_id: str = Field(
        default="Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS",
        min_length=32,
        max_length=44,
        description="Placeholder program id declared for localnet",
    )
    cluster: str = Field(default="Localnet")
    wallet: str = Field(default="~/.config/solana/id.json")
    registry_url: str = Field(default="https://api.apr.dev")


class Settings(BaseModel):
    """Global SolAnchorGen settings.

    Instances are created once by the CLI entry point and passed to the
    workspace generator and package manager.
    """

    package_manager: str = Field(default="pnpm", min_length=1)
    project_version: str = Field(default="0.1.0")
    output_dir: Path = Field(default_factory=Path.cwd)
    anchor: AnchorConfig = Field(default_factory=AnchorConfig)

    def project_path(self, project_name: str) -> Path:
        """Absolute destination directory for *project_name*."""
        return (self.output_dir / project_name).resolve()

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SOL_ANCHOR_GEN_PACKAGE_MANAGER, SOL_ANCHOR_GEN_OUTPUT_DIR,
            SOL_ANCHOR_GEN_PROGRAM_ID, SOL_ANCHOR_GEN_CLUSTER,
            SOL_ANCHOR_GEN_WALLET.
        """
        anchor_kwargs: dict[str, Any] = {}
        if os.environ.get("SOL_ANCHOR_GEN_PROGRAM_ID"):
            anchor_kwargs["program_id"] = os.environ["SOL_ANCHOR_GEN_PROGRAM_ID"]
        if os.environ.get("SOL_ANCHOR_GEN_CLUSTER"):
            anchor_kwargs["cluster"] = os.environ["SOL_ANCHOR_GEN_CLUSTER"]
        if os.environ.get("SOL_ANCHOR_GEN_WALLET"):
            anchor_kwargs["wallet"] = os.environ["SOL_ANCHOR_GEN_WALLET"]

        kwargs: dict[str, Any] = {"anchor": AnchorConfig(**anchor_kwargs)}
        if os.environ.get("SOL_ANCHOR_GEN_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["SOL_ANCHOR_GEN_PACKAGE_MANAGER"]
        if os.environ.get("SOL_ANCHOR_GEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SOL_ANCHOR_GEN_OUTPUT_DIR"])

        return cls(**kwargs)
