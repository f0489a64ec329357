"""WCAG contrast ratio between two colours, and the AA thresholds."""

from typing import Any

from contrast_checker.core.luminance import relative_luminance

AA_NORMAL_TEXT = 4.5
AA_LARGE_TEXT = 3.0  # >= 18pt, or >= 14pt bold


def luminance_ratio(l1: float, l2: float) -> float:
    """(lighter + 0.05) / (darker + 0.05). Order of arguments does not matter."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(foreground: Any, background: Any) -> float:
    return luminance_ratio(relative_luminance(foreground), relative_luminance(background))


def meets_contrast_standard(foreground: Any, background: Any, large_text: bool = False) -> bool:
    required = AA_LARGE_TEXT if large_text else AA_NORMAL_TEXT
    return contrast_ratio(foreground, background) >= required
