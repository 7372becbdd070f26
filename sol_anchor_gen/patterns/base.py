"""Template generator contract.

A template generator turns a ``GenerationContext`` into the list of files
that make up one scaffold pattern, plus the npm dependency maps the project
manifest needs. Generators only assemble content; writing it to disk is the
workspace generator's job.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from sol_anchor_gen.patterns.options import OptionValue, TemplateOption, resolve_options
from sol_anchor_gen.rendering import TemplateRenderer
from sol_anchor_gen.utils import to_program_name

DEFAULT_PROGRAM_ID = "Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS"

Dependencies = dict[str, str]


@dataclass(frozen=True)
class GeneratedFile:
    """A file to be created, relative to the project root."""

    path: str
    content: str


@dataclass(frozen=True)
class GenerationContext:
    """Resolved inputs for one generation run."""

    project_name: str
    project_path: Path
    options: Mapping[str, OptionValue] = field(default_factory=dict)
    program_id: str = DEFAULT_PROGRAM_ID

    @classmethod
    def build(
        cls,
        project_name: str,
        project_path: str | Path,
        options: Iterable[TemplateOption],
        supplied: Mapping[str, Any] | None = None,
        *,
        program_id: str = DEFAULT_PROGRAM_ID,
    ) -> "GenerationContext":
        """Create a context, coercing *supplied* values and filling defaults."""
        return cls(
            project_name=project_name,
            project_path=Path(project_path).resolve(),
            options=resolve_options(options, supplied),
            program_id=program_id,
        )

    @property
    def program_name(self) -> str:
        return to_program_name(self.project_name)

    def option(self, name: str, default: Any = None) -> Any:
        """Return the raw value of option *name*, or *default* if unset."""
        value = self.options.get(name)
        return default if value is None else value.value


@runtime_checkable
class TemplateGenerator(Protocol):
    """Capability set every scaffold pattern implements."""

    async def generate(self, context: GenerationContext) -> list[GeneratedFile]: ...

    def dependencies(self, context: GenerationContext) -> Dependencies: ...

    def dev_dependencies(self, context: GenerationContext) -> Dependencies: ...


# ---------------------------------------------------------------------------
# Shared Anchor implementation
# ---------------------------------------------------------------------------

ANCHOR_DEPENDENCIES: Dependencies = {
    "@coral-xyz/anchor": "^0.29.0",
    "@solana/web3.js": "^1.87.0",
    "@solana/spl-token": "^0.3.9",
}

# Every template's tsconfig.json declares the mocha and chai types.
ANCHOR_DEV_DEPENDENCIES: Dependencies = {
    "@types/node": "^20.0.0",
    "typescript": "^5.3.0",
    "ts-node": "^10.9.0",
    "chai": "^4.3.0",
    "@types/chai": "^4.3.0",
    "mocha": "^10.2.0",
    "@types/mocha": "^10.0.0",
}


class AnchorTemplateGenerator:
    """Renders an Anchor workspace from the Jinja2 assets of one pattern.

    Subclasses set ``pattern`` (the asset directory under
    ``sol_anchor_gen/templates/``) and ``summary`` (used in Cargo metadata), and
    may extend ``template_vars`` with option-driven values.
    """

    pattern: str = ""
    summary: str = ""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def generate(self, context: GenerationContext) -> list[GeneratedFile]:
        variables = self.template_vars(context)
        name = context.project_name
        layout = [
            (f"{self.pattern}/lib.rs.j2", f"programs/{name}/src/lib.rs"),
            ("shared/Cargo.toml.j2", f"programs/{name}/Cargo.toml"),
            (f"{self.pattern}/test.ts.j2", f"tests/{name}.ts"),
            (f"{self.pattern}/sdk.ts.j2", "app/src/index.ts"),
            (f"{self.pattern}/README.md.j2", "README.md"),
            ("shared/tsconfig.json.j2", "tsconfig.json"),
        ]
        return [
            GeneratedFile(path=path, content=self.renderer.render(template, variables))
            for template, path in layout
        ]

    def dependencies(self, context: GenerationContext) -> Dependencies:
        return dict(ANCHOR_DEPENDENCIES)

    def dev_dependencies(self, context: GenerationContext) -> Dependencies:
        return dict(ANCHOR_DEV_DEPENDENCIES)

    def template_vars(self, context: GenerationContext) -> dict[str, Any]:
        """Build the Jinja2 context shared by every file of the pattern."""
        return {
            "project_name": context.project_name,
            "program_name": context.program_name,
            "program_id": context.program_id,
            "summary": self.summary,
            "options": {key: value.value for key, value in sorted(context.options.items())},
        }
