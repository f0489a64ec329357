"""Evaluate a list of ValidationRules against a Palette.

Each rule resolves its foreground and background roles, computes the WCAG
contrast ratio, and passes when ratio >= required (a pair exactly at the
threshold passes). A role missing from the palette is treated like an
invalid colour: luminance 0, a logged warning, and a result in the report.
The report always holds one result per rule, in rule order.

Rendering and exit-status decisions are left to the caller.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from contrast_checker.core.contrast import luminance_ratio
from contrast_checker.core.luminance import relative_luminance
from contrast_checker.core.types import Palette, Report, ValidationResult, ValidationRule

logger = logging.getLogger(__name__)

_MISSING = object()


def _lookup(palette: Palette, rule: ValidationRule, role: str) -> tuple[Any, float]:
    """Resolve a role to (colour, luminance). A missing role is (None, 0.0)."""
    colour = palette.get(role, _MISSING)
    if colour is _MISSING:
        logger.warning('Rule %r: role %r not in palette', rule.name, role)
        return None, 0.0
    return colour, relative_luminance(colour)


def evaluate_rule(palette: Palette, rule: ValidationRule) -> ValidationResult:
    fg, fg_lum = _lookup(palette, rule, rule.foreground)
    bg, bg_lum = _lookup(palette, rule, rule.background)
    ratio = luminance_ratio(fg_lum, bg_lum)
    return ValidationResult(
        name=rule.name,
        ratio=ratio,
        required=rule.required,
        passed=ratio >= rule.required,
        foreground=rule.foreground,
        background=rule.background,
        foreground_color=fg,
        background_color=bg,
    )


def evaluate(palette: Mapping[str, Any], rules: Iterable[ValidationRule]) -> Report:
    """Run every rule against the palette and collect the results."""
    palette = Palette.from_mapping(palette)
    results = tuple(evaluate_rule(palette, rule) for rule in rules)
    logger.debug('Evaluated %d rules, %d failing', len(results), sum(1 for r in results if not r.passed))
    return Report(results=results)
