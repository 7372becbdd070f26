"""Exception hierarchy for SolAnchorGen.

Every error the scaffolder raises on purpose derives from ``ScaffoldError``
and carries a list of remediation ``suggestions`` that the CLI prints under
the error message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ScaffoldError(Exception):
    """Base class for all expected scaffolding failures."""

    def __init__(self, message: str, suggestions: list[str] | None = None) -> None:
        self.message = message
        self.suggestions = list(suggestions or [])
        super().__init__(message)


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InvalidProjectNameError(ScaffoldError):
    """Raised when a project name fails the naming rules."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(
            reason,
            suggestions=[
                "Use letters, numbers, hyphens and underscores only",
                "Start the name with a letter",
                "Make sure the directory does not already exist",
            ],
        )


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template identifier is not in the registry."""

    def __init__(self, template_id: str, available: list[str]) -> None:
        self.template_id = template_id
        self.available = list(available)
        listing = ", ".join(self.available) or "(none)"
        super().__init__(
            f'Template "{template_id}" not found. Available templates: {listing}',
            suggestions=[
                f"Available templates: {listing}",
                'Use "sol-anchor-gen list" to see all templates with descriptions',
            ],
        )


class InvalidOptionValueError(ScaffoldError):
    """Raised when an option value fails coercion or its validation predicate."""

    def __init__(self, option_name: str, value: Any, reason: str) -> None:
        self.option_name = option_name
        self.value = value
        self.reason = reason
        super().__init__(
            f'Invalid value {value!r} for option "{option_name}": {reason}',
            suggestions=['Run "sol-anchor-gen list" to see the accepted options'],
        )


class DuplicateTemplateError(ScaffoldError):
    """Raised when a template id is registered twice."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f'Template with id "{template_id}" is already registered')


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class PathCollisionError(ScaffoldError):
    """Raised when the destination directory already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Destination already exists: {self.path}",
            suggestions=[
                "Choose a different project name",
                "Remove or rename the existing directory",
            ],
        )


class FileSystemError(ScaffoldError):
    """Raised when a directory or file operation fails."""

    def __init__(
        self,
        operation: str,
        path: str | Path,
        cause: BaseException | str | None = None,
    ) -> None:
        self.operation = operation
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(
            f"Failed to {operation} at {self.path}{detail}",
            suggestions=["Check that you have write permission in the target directory"],
        )


class PathContainmentError(FileSystemError):
    """Raised when a generated file path would escape the project root."""

    def __init__(self, path: str | Path, root: str | Path) -> None:
        self.root = Path(root)
        super().__init__(
            "write file",
            path,
            cause=f"path resolves outside the project root {self.root}",
        )


class ToolNotInstalledError(ScaffoldError):
    """Raised when the package manager executable cannot be found."""

    def __init__(self, tool: str, instructions: str) -> None:
        self.tool = tool
        self.instructions = instructions
        super().__init__(
            f"{tool} is not installed",
            suggestions=[line.strip() for line in instructions.splitlines() if line.strip()],
        )


class DependencyInstallError(ScaffoldError):
    """Raised when dependency installation fails to spawn or exits non-zero."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.returncode = returncode
        self.cause = cause
        super().__init__(
            message,
            suggestions=[
                "Check the installer output above for details",
                "Ensure pnpm is installed: npm install -g pnpm",
            ],
        )
