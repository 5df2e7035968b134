"""Field contract primitives shared by the spreadsheet importers.

A contract is a tuple of ``FieldSpec`` objects. Each spec names the model
column it feeds, the spreadsheet headers that may carry it, and a normalizer
that turns the raw cell value into something the column accepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, Mapping, Sequence, Tuple

Normalizer = Callable[[object | None], object | None]


def normalize_text(value: object | None) -> str | None:
    """Strip text cells; blank becomes None and numeric cells become their digits."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip() or None


def normalize_integer(value: object | None) -> int | None:
    """Whole numbers only; anything else becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


@dataclass(frozen=True)
class FieldSpec:
    """Metadata describing one importable field."""

    name: str
    description: str = ""
    required: bool = False
    aliases: Tuple[str, ...] = ()
    normalizer: Normalizer | None = normalize_text

    def headers(self) -> Tuple[str, ...]:
        """Return the canonical header plus aliases, highest priority first."""

        return (self.name, *self.aliases)

    def normalize(self, value: object | None) -> object | None:
        return self.normalizer(value) if self.normalizer else value


def normalize_header(header: object | None) -> str:
    """Normalize a header for comparison (case/space/underscore agnostic)."""

    token = str(header if header is not None else "").strip().lstrip("\ufeff").lower()
    for char in (" ", "-", "."):
        token = token.replace(char, "_")
    return token


def build_alias_map(specs: Sequence[FieldSpec]) -> Mapping[str, tuple[str, int]]:
    """Map normalized header tokens to ``(canonical name, priority)``.

    Priority is the header's position in ``FieldSpec.headers()``; lower wins
    when a sheet carries more than one header for the same field.
    """
    mapping: dict[str, tuple[str, int]] = {}
    for spec in specs:
        for priority, header in enumerate(spec.headers()):
            mapping.setdefault(normalize_header(header), (spec.name, priority))
    return mapping


def required_fields(specs: Iterable[FieldSpec]) -> Tuple[str, ...]:
    return tuple(spec.name for spec in specs if spec.required)
