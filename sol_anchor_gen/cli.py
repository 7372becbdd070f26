"""Command-line interface: ``sol-anchor-gen list | init | new``.

Every template option is exposed on ``new`` as ``--<flag>``; the flags are
built from the registry at parser construction, so registering a template
with new options needs no CLI changes.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from collections.abc import Mapping
from typing import Any, NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sol_anchor_gen.config import Settings
from sol_anchor_gen.errors import ScaffoldError
from sol_anchor_gen.patterns import GenerationContext, TemplateRegistry, create_template_registry
from sol_anchor_gen.patterns.registry import TemplateDescriptor
from sol_anchor_gen.progress import ProgressReporter
from sol_anchor_gen.prompts import prompt_project_name, prompt_template, prompt_template_options
from sol_anchor_gen.rendering import TemplateRenderer
from sol_anchor_gen.scaffolder import WorkspaceConfig, create_workspace_generator
from sol_anchor_gen.utils import (
    VERSION,
    console,
    format_duration,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
)
from sol_anchor_gen.validator import resolve_template, validate_project_name

PROG = "sol-anchor-gen"

GENERIC_HINTS = [
    "Check that the project name is valid",
    "Ensure pnpm is installed: npm install -g pnpm",
    "Make sure the directory does not already exist",
    "Verify template options are correct",
]

USAGE_EXAMPLES = [
    ("Interactive mode", f"{PROG} init"),
    ("Generate specific template", f"{PROG} new my-nft-project --template nft-minting"),
    ("With custom options", f"{PROG} new my-staking --template staking --token-decimals 9"),
]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class CliArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _flag_dest(flag: str) -> str:
    return "opt_" + flag.replace("-", "_")


def build_parser(registry: TemplateRegistry) -> argparse.ArgumentParser:
    parser = CliArgumentParser(
        prog=PROG,
        description="Generate Anchor program scaffolding for Solana development",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n" + "".join(f"  $ {cmd}\n" for _, cmd in USAGE_EXAMPLES),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    subparsers = parser.add_subparsers(
        dest="command", metavar="<command>", parser_class=CliArgumentParser
    )

    subparsers.add_parser("list", help="List all available templates")
    subparsers.add_parser("init", help="Interactively initialize a new Anchor project")

    new = subparsers.add_parser("new", help="Generate a project from a template")
    new.add_argument("project_name", help="Name of the project directory to create")
    new.add_argument(
        "--template", "-t",
        required=True,
        help=f"Template id ({', '.join(registry.ids())})",
    )
    seen: set[str] = set()
    for descriptor in registry:
        for option in descriptor.options:
            if option.flag in seen:
                continue
            seen.add(option.flag)
            new.add_argument(
                f"--{option.flag}",
                dest=_flag_dest(option.flag),
                default=None,
                metavar=option.type.value.upper(),
                help=f"{option.description} [{descriptor.id}]",
            )
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_list(registry: TemplateRegistry, out: Console | None = None) -> int:
    """Print the template table, option details and usage examples."""
    out = out or console
    templates = registry.list_all()
    if not templates:
        out.print("[yellow]No templates available.[/yellow]")
        return 0

    table = Table(title="Available Templates", show_header=True, header_style="bold cyan")
    table.add_column("Template", style="cyan", no_wrap=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Description")
    table.add_column("Options")
    for descriptor in templates:
        flags = "\n".join(f"--{option.flag}" for option in descriptor.options)
        table.add_row(
            descriptor.name,
            descriptor.id,
            descriptor.description,
            escape(flags) if flags else "[dim]None[/dim]",
        )
    out.print(table)
    out.print()

    with_options = [d for d in templates if d.options]
    if with_options:
        out.print("[bold cyan]Template Options:[/bold cyan]")
        out.print()
        for descriptor in with_options:
            out.print(f"[yellow]{escape(descriptor.name)}:[/yellow]")
            for option in descriptor.options:
                out.print(f"  [dim]--{option.flag:<20}[/dim] {escape(option.description)}")
                if option.has_default:
                    out.print(f"    [dim]Default:[/dim] {option.default}")
            out.print()

    out.print("[bold cyan]Usage Examples:[/bold cyan]")
    out.print()
    for caption, command in USAGE_EXAMPLES:
        out.print(f"  [dim]# {caption}[/dim]")
        out.print(f"  $ {command}")
        out.print()
    return 0


def cmd_new(
    project_name: str,
    template_id: str,
    supplied: Mapping[str, Any],
    registry: TemplateRegistry,
    settings: Settings,
    renderer: TemplateRenderer | None = None,
) -> int:
    """Non-interactive generation. Returns the process exit code."""
    print_banner("Generate New Anchor Project")
    progress = ProgressReporter()
    try:
        validate_project_name(project_name, settings.output_dir)
        descriptor = resolve_template(template_id, registry)
        declared = {option.name for option in descriptor.options}
        for name in supplied:
            if name not in declared:
                progress.warning(f'Option "{name}" is not used by the {descriptor.id} template')
        context = GenerationContext.build(
            project_name,
            settings.project_path(project_name),
            descriptor.options,
            {k: v for k, v in supplied.items() if k in declared},
            program_id=settings.anchor.program_id,
        )
    except ScaffoldError as exc:
        progress.display_error_summary(exc.message, exc.suggestions or GENERIC_HINTS)
        return 1

    for option in descriptor.options:
        if option.name not in supplied:
            progress.info(f"Using default {option.name}: {context.options[option.name]}")

    return _generate(descriptor, context, settings, progress, renderer)


def cmd_init(
    registry: TemplateRegistry,
    settings: Settings,
    renderer: TemplateRenderer | None = None,
) -> int:
    """Interactive generation: prompt for name, template and options."""
    print_banner("Initialize New Anchor Project")
    progress = ProgressReporter()
    if not len(registry):
        progress.display_error_summary("No templates available")
        return 1

    project_name = prompt_project_name(parent_dir=settings.output_dir)
    descriptor = prompt_template(registry)
    try:
        options = prompt_template_options(descriptor)
        context = GenerationContext.build(
            project_name,
            settings.project_path(project_name),
            descriptor.options,
            options,
            program_id=settings.anchor.program_id,
        )
    except ScaffoldError as exc:
        progress.display_error_summary(exc.message, exc.suggestions or GENERIC_HINTS)
        return 1
    console.print()
    return _generate(descriptor, context, settings, progress, renderer)


def _generate(
    descriptor: TemplateDescriptor,
    context: GenerationContext,
    settings: Settings,
    progress: ProgressReporter,
    renderer: TemplateRenderer | None,
) -> int:
    summary = {
        "Name": context.project_name,
        "Template": descriptor.name,
        "Path": str(context.project_path),
    }
    for name, value in context.options.items():
        summary[name] = str(value)
    print_summary_table(summary, title="Project Summary")

    generator = create_workspace_generator(settings, renderer=renderer, progress=progress)
    start = time.monotonic()
    try:
        asyncio.run(generator.generate(WorkspaceConfig(template=descriptor, context=context)))
    except ScaffoldError as exc:
        progress.display_error_summary(exc.message, exc.suggestions or GENERIC_HINTS)
        return 1

    progress.display_summary(
        context.project_name,
        [f"cd {context.project_name}", "anchor build", "anchor test"],
    )
    console.print(f"[dim]Completed in {format_duration(time.monotonic() - start)}[/dim]")
    print_success("Happy coding!")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _supplied_options(args: argparse.Namespace, registry: TemplateRegistry) -> dict[str, Any]:
    supplied: dict[str, Any] = {}
    for descriptor in registry:
        for option in descriptor.options:
            value = getattr(args, _flag_dest(option.flag), None)
            if value is not None:
                supplied[option.name] = value
    return supplied


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``sol-anchor-gen`` and ``python -m sol_anchor_gen``."""
    renderer = TemplateRenderer()
    registry = create_template_registry(renderer)
    parser = build_parser(registry)
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    if args.command is None:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env()
        if args.command == "list":
            return cmd_list(registry)
        if args.command == "init":
            return cmd_init(registry, settings, renderer)
        return cmd_new(
            args.project_name,
            args.template,
            _supplied_options(args, registry),
            registry,
            settings,
            renderer,
        )
    except KeyboardInterrupt:
        console.print()
        print_error("Operation cancelled by user")
        return 130
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
