"""Shared types for contrast-check: Palette, ValidationRule, ValidationResult, Report."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


def normalize_role(name: str) -> str:
    """textPrimary / text_primary / 'Text Primary' -> text-primary."""
    s = re.sub(r'([a-z0-9])([A-Z])', r'\1-\2', name.strip())
    s = re.sub(r'[\s_]+', '-', s)
    return s.lower()


class Palette(Mapping[str, Any]):
    """Read-only mapping of role name -> hex colour.

    Keys are normalised to kebab-case on construction, so `textPrimary`,
    `text_primary` and `text-primary` all address the same role. The input
    mapping is copied; mutating it afterwards does not affect the palette.
    """

    def __init__(self, colours: Mapping[str, Any] | None = None):
        copied: dict[str, Any] = {}
        for key, value in (colours or {}).items():
            role = normalize_role(key)
            if role in copied:
                logger.warning('Palette keys collide on role %r; %r overrides the earlier value', role, key)
            copied[role] = value
        self._colours: Mapping[str, Any] = MappingProxyType(copied)

    @classmethod
    def from_mapping(cls, colours: Mapping[str, Any]) -> Palette:
        if isinstance(colours, Palette):
            return colours
        return cls(colours)

    def __getitem__(self, role: str) -> Any:
        return self._colours[normalize_role(role)]

    def __contains__(self, role: object) -> bool:
        return isinstance(role, str) and normalize_role(role) in self._colours

    def __iter__(self) -> Iterator[str]:
        return iter(self._colours)

    def __len__(self) -> int:
        return len(self._colours)

    def __repr__(self) -> str:
        return f'Palette({dict(self._colours)!r})'

    def resolve(self, role: str) -> Any | None:
        """Return the colour for role, or None when the role is missing."""
        return self._colours.get(normalize_role(role))


@dataclass(frozen=True)
class ValidationRule:
    """A foreground/background role pair and the minimum ratio it must reach."""

    name: str
    foreground: str  # role name
    background: str  # role name
    required: float = 4.5


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of evaluating one ValidationRule."""

    name: str
    ratio: float  # full precision, used for the pass comparison
    required: float
    passed: bool
    foreground: str
    background: str
    foreground_color: Any | None = None  # None when the role is missing
    background_color: Any | None = None

    @property
    def display_ratio(self) -> str:
        return f'{self.ratio:.2f}'


@dataclass(frozen=True)
class Report:
    """Ordered results of one validation run."""

    results: tuple[ValidationResult, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        # Vacuously true for an empty rule list
        return all(r.passed for r in self.results)

    @property
    def pass_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def fail_count(self) -> int:
        return len(self.results) - self.pass_count

    @property
    def failures(self) -> list[ValidationResult]:
        return [r for r in self.results if not r.passed]
