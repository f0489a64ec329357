"""Hex colour parsing, role-name normalisation and palette loading.

Palettes are plain JSON objects mapping a role name to a `#RRGGBB` string,
e.g. the colours.json a design-token build exports:

    {"bg": "#0B0B0F", "textPrimary": "#FFFFFF", "primary": "#FF7A00"}

Role names are normalised to kebab-case so camelCase token keys and
kebab-case rule definitions resolve against each other.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from contrast_checker.core.types import Palette

HEX_PATTERN = re.compile(r'#[0-9a-fA-F]{6}')

# Bundled dark theme. primary, success and danger are known to fall short of
# 4.5:1 behind white text.
DEFAULT_PALETTE: dict[str, str] = {
    'bg': '#0B0B0F',
    'card': '#151518',
    'surface': '#1C1C1E',
    'text-primary': '#FFFFFF',
    'text-secondary': '#9CA3AF',
    'line': '#2A2A2E',
    'primary': '#FF7A00',
    'primary-muted': '#FFB366',
    'success': '#34C759',
    'danger': '#FF3B30',
    'white': '#FFFFFF',
    'black': '#000000',
}


class PaletteError(ValueError):
    """A palette file could not be read or has the wrong shape."""


def is_valid_hex(color: Any) -> bool:
    return isinstance(color, str) and HEX_PATTERN.fullmatch(color) is not None


def hex_to_rgb(color: Any) -> tuple[int, int, int] | None:
    """Parse '#RRGGBB' into an (r, g, b) tuple. Returns None for anything else."""
    if not is_valid_hex(color):
        return None
    value = int(color[1:], 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def default_palette() -> Palette:
    return Palette(DEFAULT_PALETTE)


def load_palette(path: str | Path) -> Palette:
    """Load a palette JSON file. Bad colour values are kept and fail later, not here."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except FileNotFoundError as e:
        raise PaletteError(f'palette file not found: {path}') from e
    except OSError as e:
        raise PaletteError(f'palette file cannot be read: {path} ({e.strerror or e})') from e
    except UnicodeDecodeError as e:
        raise PaletteError(f'palette file is not valid UTF-8: {path}') from e
    except json.JSONDecodeError as e:
        raise PaletteError(f'palette file is not valid JSON: {path} ({e})') from e

    if not isinstance(data, dict):
        raise PaletteError(f'palette file must contain a JSON object: {path}')
    return Palette(data)
