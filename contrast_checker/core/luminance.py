"""WCAG relative luminance for sRGB hex colours.

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B

where each channel is normalised to [0, 1] and gamma-expanded:
v / 12.92 when v <= 0.03928, else ((v + 0.055) / 1.055) ** 2.4.

Invalid input (anything but '#RRGGBB') logs a warning and yields 0.0.
It never raises, so one bad palette entry cannot sink a whole run.
"""

import logging
from typing import Any

import numpy as np

from contrast_checker.core.palette import hex_to_rgb

logger = logging.getLogger(__name__)

# Rec. 709 coefficients used by WCAG
WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

LINEAR_THRESHOLD = 0.03928


def _linearize(values: np.ndarray) -> np.ndarray:
    v = values / 255.0
    return np.where(v <= LINEAR_THRESHOLD, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)


def linearize_channel(value: int) -> float:
    """Gamma-expand a single 0-255 channel value."""
    return float(_linearize(np.array([value], dtype=float))[0])


def relative_luminance(color: Any) -> float:
    """Relative luminance in [0, 1]. Returns 0.0 (with a warning) for invalid colours."""
    rgb = hex_to_rgb(color)
    if rgb is None:
        logger.warning('Invalid hex color: %s', color)
        return 0.0
    return float(np.dot(WEIGHTS, _linearize(np.array(rgb, dtype=float))))
