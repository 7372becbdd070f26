"""Catalog of scaffold templates keyed by identifier."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from sol_anchor_gen.errors import DuplicateTemplateError
from sol_anchor_gen.patterns.base import TemplateGenerator
from sol_anchor_gen.patterns.options import TemplateOption


@dataclass(frozen=True)
class TemplateDescriptor:
    """Metadata and generator for one registered template."""

    id: str
    name: str
    description: str
    generator: TemplateGenerator
    options: tuple[TemplateOption, ...] = field(default_factory=tuple)


class TemplateRegistry:
    """Append-only mapping from template id to ``TemplateDescriptor``.

    Iteration and ``list_all`` follow registration order.
    """

    def __init__(self) -> None:
        self._templates: dict[str, TemplateDescriptor] = {}

    def register(self, descriptor: TemplateDescriptor) -> None:
        """Add *descriptor* to the catalog.

        Raises:
            DuplicateTemplateError: If the id is already registered. The
                registry is left unchanged.
        """
        if descriptor.id in self._templates:
            raise DuplicateTemplateError(descriptor.id)
        self._templates[descriptor.id] = descriptor

    def get(self, template_id: str) -> TemplateDescriptor | None:
        """Return the descriptor for *template_id*, or ``None`` if unknown."""
        return self._templates.get(template_id)

    def list_all(self) -> list[TemplateDescriptor]:
        return list(self._templates.values())

    def options_for(self, template_id: str) -> tuple[TemplateOption, ...]:
        """Declared options of *template_id*; empty for unknown ids."""
        descriptor = self._templates.get(template_id)
        return descriptor.options if descriptor else ()

    def ids(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[TemplateDescriptor]:
        return iter(self.list_all())
