"""Template options and their typed values.

Option values arrive loosely typed (strings from command flags, mixed types
from interactive prompts). ``coerce_option_value`` turns each one into an
``OptionValue`` exactly once, using the coercion function registered for the
option's declared ``OptionType``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from sol_anchor_gen.errors import InvalidOptionValueError

Scalar = Union[str, int, float, bool]

_TRUE_WORDS = frozenset({"true", "yes", "y", "1", "on"})
_FALSE_WORDS = frozenset({"false", "no", "n", "0", "off"})


class OptionType(str, Enum):
    """Primitive type tag of a template option."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class TemplateOption:
    """One configurable parameter a template accepts."""

    name: str
    flag: str
    description: str
    type: OptionType
    default: Scalar | None = None
    validate: Callable[[Any], bool] | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class OptionValue:
    """A coerced option value tagged with its type."""

    kind: OptionType
    value: Scalar

    def __str__(self) -> str:
        if self.kind is OptionType.BOOLEAN:
            return "true" if self.value else "false"
        return str(self.value)


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def _coerce_string(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError("must be a string")
    if not raw.strip():
        raise ValueError("cannot be empty")
    return raw


def _coerce_number(raw: Any) -> int | float:
    if isinstance(raw, bool):
        raise ValueError("must be a number")
    if isinstance(raw, (int, float)):
        number = raw
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            raise ValueError("must be a valid number") from None
    else:
        raise ValueError("must be a valid number")

    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number):
            raise ValueError("must be a finite number")
        if number.is_integer():
            return int(number)
    return number


def _coerce_boolean(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError("must be a boolean (true/false)")


_COERCERS: dict[OptionType, Callable[[Any], Scalar]] = {
    OptionType.STRING: _coerce_string,
    OptionType.NUMBER: _coerce_number,
    OptionType.BOOLEAN: _coerce_boolean,
}


def coerce_option_value(option: TemplateOption, raw: Any) -> OptionValue:
    """Coerce *raw* to the option's declared type and run its predicate.

    Raises:
        InvalidOptionValueError: If coercion or validation fails.
    """
    if raw is None:
        raise InvalidOptionValueError(option.name, raw, "value is required")
    try:
        value = _COERCERS[option.type](raw)
    except ValueError as exc:
        raise InvalidOptionValueError(option.name, raw, str(exc)) from exc

    if option.validate is not None and not option.validate(value):
        raise InvalidOptionValueError(option.name, raw, "value is out of range")
    return OptionValue(kind=option.type, value=value)


def resolve_options(
    options: Iterable[TemplateOption],
    supplied: Mapping[str, Any] | None = None,
) -> dict[str, OptionValue]:
    """Build the complete option map for a template.

    Every declared option receives its supplied value or, failing that, its
    registered default. Keys in *supplied* that no option declares are
    ignored. Values that are already an ``OptionValue`` of the declared
    type are kept as-is.
    """
    supplied = supplied or {}
    resolved: dict[str, OptionValue] = {}
    for option in options:
        raw = supplied.get(option.name)
        if isinstance(raw, OptionValue) and raw.kind is option.type:
            resolved[option.name] = raw
            continue
        if raw is None:
            raw = option.default
        resolved[option.name] = coerce_option_value(option, raw)
    return resolved
