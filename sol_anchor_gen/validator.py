"""Input validation for project names and template identifiers.

Option values are validated where they are coerced, in
``sol_anchor_gen.patterns.options``.
"""

from __future__ import annotations

import re
from pathlib import Path

from sol_anchor_gen.errors import InvalidProjectNameError, TemplateNotFoundError
from sol_anchor_gen.patterns.registry import TemplateDescriptor, TemplateRegistry

MAX_PROJECT_NAME_LENGTH = 50

RESERVED_NAMES = frozenset({"node_modules", "test", "dist", "build", ".git"})

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


def validate_project_name(name: str, parent_dir: str | Path | None = None) -> str:
    """Check *name* against the naming rules and return it unchanged.

    Args:
        name: Candidate project name.
        parent_dir: Directory the project would be created in; defaults to
            the current working directory.

    Raises:
        InvalidProjectNameError: With a human-readable reason.
    """
    if not name or not name.strip():
        raise InvalidProjectNameError(name, "Project name cannot be empty")

    if not _NAME_PATTERN.match(name):
        raise InvalidProjectNameError(
            name, "Project name can only contain letters, numbers, hyphens, and underscores"
        )

    if not name[0].isascii() or not name[0].isalpha():
        raise InvalidProjectNameError(name, "Project name must start with a letter")

    if len(name) > MAX_PROJECT_NAME_LENGTH:
        raise InvalidProjectNameError(
            name, f"Project name must be {MAX_PROJECT_NAME_LENGTH} characters or less"
        )

    if name.lower() in RESERVED_NAMES:
        raise InvalidProjectNameError(name, f'Project name "{name}" is reserved and cannot be used')

    parent = Path(parent_dir) if parent_dir is not None else Path.cwd()
    if (parent / name).exists():
        raise InvalidProjectNameError(
            name, f'Directory "{name}" already exists in the current location'
        )

    return name


def resolve_template(template_id: str, registry: TemplateRegistry) -> TemplateDescriptor:
    """Look up *template_id*, raising with the list of registered ids if absent."""
    key = template_id.strip() if template_id else ""
    if key not in registry:
        raise TemplateNotFoundError(template_id, registry.ids())
    return registry.get(key)
