"""Report builder — text and JSON output for contrast-check results."""

import json
from typing import Any

from contrast_checker.core.types import Report, ValidationResult

MISSING = '<missing role>'


def _colour_label(colour: Any) -> str:
    return MISSING if colour is None else str(colour)


def _format_required(required: float) -> str:
    # 4.5 -> '4.5', 3.0 -> '3'
    return f'{required:g}'


def format_text(report: Report, palette_source: str | None = None) -> str:
    """Format report as human-readable text."""
    lines = []
    header = 'contrast-check: validating color contrasts for WCAG AA compliance'
    if palette_source:
        header += f' — {palette_source}'
    lines.append(header)
    lines.append('')

    for result in report.results:
        mark = '✓' if result.passed else '✗'
        lines.append(f'{mark} {result.name}')
        lines.append(
            f'   Contrast: {result.display_ratio}:1 (required: {_format_required(result.required)}:1)'
        )
        fg = _colour_label(result.foreground_color)
        bg = _colour_label(result.background_color)
        lines.append(f'   Colors: {fg} on {bg}')
        lines.append('')

    total = len(report.results)
    lines.append('─' * 50)
    lines.append(f'PASS {report.pass_count}/{total} rules  FAIL {report.fail_count}/{total} rules')
    if report.passed:
        lines.append(f'All color contrasts meet WCAG AA standards. Validated {total} color combinations.')
    else:
        lines.append('WARNING: some color combinations do not meet WCAG AA standards.')
        for result in report.failures:
            lines.append(f'  {result.name}: {result.display_ratio}:1 < {_format_required(result.required)}:1')
        lines.append('This is a non-blocking warning.')
    return '\n'.join(lines)


def _result_obj(result: ValidationResult) -> dict[str, Any]:
    return {
        'name': result.name,
        'ratio': round(result.ratio, 2),
        'required': result.required,
        'pass': result.passed,
        'foreground': result.foreground,
        'background': result.background,
        'foreground_color': result.foreground_color,
        'background_color': result.background_color,
    }


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'rules': [_result_obj(r) for r in report.results],
        'summary': {
            'total': len(report.results),
            'pass': report.pass_count,
            'fail': report.fail_count,
            'passed': report.passed,
        },
    }
    return json.dumps(obj, indent=2)
