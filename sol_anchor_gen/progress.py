"""Step-by-step progress reporting for workspace generation.

One step is in progress at a time and is shown with a Rich spinner; when it
finishes a green ``✓`` or red ``✗`` line is printed in its place. The
reporter only observes: nothing here raises into the caller's control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from sol_anchor_gen.utils import console as default_console


class StepStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
    ERROR = "error"


@dataclass
class ProgressStep:
    label: str
    status: StepStatus = StepStatus.PENDING


class ProgressReporter:
    """Spinner-backed reporter for a linear sequence of steps."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console
        self.steps: list[ProgressStep] = []
        self._current: ProgressStep | None = None
        self._status: Status | None = None

    @property
    def current_step(self) -> ProgressStep | None:
        return self._current

    # -- Step lifecycle ----------------------------------------------------

    def start_step(self, label: str) -> None:
        """Begin *label*, completing whichever step is still open."""
        if self._current is not None:
            self.complete_step()
        step = ProgressStep(label=label, status=StepStatus.IN_PROGRESS)
        self.steps.append(step)
        self._current = step
        self._status = self.console.status(f"[cyan]{escape(label)}[/cyan]", spinner="dots")
        self._status.start()

    def complete_step(self, label: str | None = None) -> None:
        """Mark the open step complete. No-op when no step is open."""
        step = self._finish(StepStatus.COMPLETE)
        if step is None:
            return
        self.console.print(f"[green]✓[/green] {escape(label or step.label)}")

    def fail_step(self, message: str) -> None:
        """Mark the open step failed. No-op when no step is open."""
        step = self._finish(StepStatus.ERROR)
        if step is None:
            return
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def _finish(self, status: StepStatus) -> ProgressStep | None:
        step = self._current
        if step is None:
            return None
        if self._status is not None:
            self._status.stop()
            self._status = None
        step.status = status
        self._current = None
        return step

    # -- Messages ----------------------------------------------------------

    def info(self, message: str) -> None:
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def display_summary(self, project_name: str, next_steps: list[str]) -> None:
        """Print the success banner and numbered next steps."""
        self.console.print()
        self.console.print(
            f'[bold green]✓ Success![/bold green] Project "{escape(project_name)}" has been created!'
        )
        self.console.print()
        if next_steps:
            self.console.print("[bold cyan]Next steps:[/bold cyan]")
            for index, step in enumerate(next_steps, start=1):
                self.console.print(f"  [dim]{index}.[/dim] {escape(step)}")
            self.console.print()

    def display_error_summary(self, error: str, suggestions: list[str] | None = None) -> None:
        """Print an error line followed by bulleted remediation hints."""
        self.console.print()
        self.console.print(f"[bold red]✗ Error:[/bold red] {escape(error)}")
        self.console.print()
        if suggestions:
            self.console.print("[bold yellow]Suggestions:[/bold yellow]")
            for suggestion in suggestions:
                self.console.print(f"  [dim]•[/dim] {escape(suggestion)}")
            self.console.print()
