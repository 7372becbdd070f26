"""Interactive prompts for the ``init`` command, built on ``rich.prompt``."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from sol_anchor_gen.errors import InvalidOptionValueError, InvalidProjectNameError
from sol_anchor_gen.patterns.options import (
    OptionType,
    OptionValue,
    TemplateOption,
    coerce_option_value,
)
from sol_anchor_gen.patterns.registry import TemplateDescriptor, TemplateRegistry
from sol_anchor_gen.utils import console as default_console
from sol_anchor_gen.validator import validate_project_name


def prompt_project_name(
    console: Console | None = None,
    parent_dir: str | Path | None = None,
) -> str:
    """Ask for a project name until one passes validation."""
    console = console or default_console
    while True:
        name = Prompt.ask("[cyan]Enter project name[/cyan]", console=console).strip()
        try:
            return validate_project_name(name, parent_dir)
        except InvalidProjectNameError as exc:
            console.print(f"[red]✗[/red] {escape(exc.message)}")


def prompt_template(
    registry: TemplateRegistry,
    console: Console | None = None,
) -> TemplateDescriptor:
    """Show a numbered menu of registered templates and return the choice."""
    console = console or default_console
    templates = registry.list_all()
    if not templates:
        raise ValueError("No templates available")

    console.print("[bold cyan]Select a template:[/bold cyan]")
    for index, descriptor in enumerate(templates, start=1):
        console.print(
            f"  [dim]{index}.[/dim] [bold]{escape(descriptor.name)}[/bold]"
            f" - {escape(descriptor.description)}"
        )

    choice = IntPrompt.ask(
        "[cyan]Template number[/cyan]",
        choices=[str(i) for i in range(1, len(templates) + 1)],
        show_choices=False,
        default=1,
        console=console,
    )
    return templates[choice - 1]


def prompt_option(option: TemplateOption, console: Console | None = None) -> OptionValue:
    """Ask for one option value, re-prompting until it coerces and validates."""
    console = console or default_console
    while True:
        if option.type is OptionType.BOOLEAN:
            raw: object = Confirm.ask(
                option.description,
                default=bool(option.default) if option.has_default else False,
                console=console,
            )
        elif option.has_default:
            raw = Prompt.ask(option.description, default=str(option.default), console=console)
        else:
            raw = Prompt.ask(option.description, console=console)
        try:
            return coerce_option_value(option, raw)
        except InvalidOptionValueError as exc:
            console.print(f"[red]✗[/red] {escape(exc.message)}")


def prompt_template_options(
    descriptor: TemplateDescriptor,
    console: Console | None = None,
) -> dict[str, OptionValue]:
    """Prompt for every option *descriptor* declares, in declaration order."""
    return {option.name: prompt_option(option, console) for option in descriptor.options}
