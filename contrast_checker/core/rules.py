"""Default WCAG AA rule set and JSON rule-file loading.

A rules file is a JSON list, evaluated in order:

    [
      {"name": "Primary text on background", "fg": "text-primary", "bg": "bg", "required": 4.5},
      {"name": "White text on primary", "foreground": "white", "background": "primary"}
    ]

`required` defaults to 4.5 (AA, normal text).
"""

import json
from pathlib import Path

from contrast_checker.core.contrast import AA_NORMAL_TEXT
from contrast_checker.core.types import ValidationRule

DEFAULT_RULES: tuple[ValidationRule, ...] = (
    ValidationRule('Primary text on background', 'text-primary', 'bg', AA_NORMAL_TEXT),
    ValidationRule('Secondary text on background', 'text-secondary', 'bg', AA_NORMAL_TEXT),
    ValidationRule('Primary text on card', 'text-primary', 'card', AA_NORMAL_TEXT),
    ValidationRule('Primary text on surface', 'text-primary', 'surface', AA_NORMAL_TEXT),
    ValidationRule('White text on primary', 'white', 'primary', AA_NORMAL_TEXT),
    ValidationRule('White text on danger', 'white', 'danger', AA_NORMAL_TEXT),
    ValidationRule('White text on success', 'white', 'success', AA_NORMAL_TEXT),
)


class RulesError(ValueError):
    """A rules file could not be read or has the wrong shape."""


def _pick(entry: dict, *keys: str) -> str | None:
    for key in keys:
        if key in entry:
            return entry[key]
    return None


def parse_rules(data: object) -> tuple[ValidationRule, ...]:
    """Build rules from already-decoded JSON."""
    if not isinstance(data, list):
        raise RulesError('rules must be a JSON list')

    rules = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise RulesError(f'rule #{i} must be a JSON object')
        fg = _pick(entry, 'fg', 'foreground')
        bg = _pick(entry, 'bg', 'background')
        if not isinstance(fg, str) or not isinstance(bg, str):
            raise RulesError(f'rule #{i} needs string "fg" and "bg" roles')
        name = entry.get('name') or f'{fg} on {bg}'
        required = entry.get('required', AA_NORMAL_TEXT)
        if isinstance(required, bool) or not isinstance(required, (int, float)):
            raise RulesError(f'rule {name!r}: "required" must be a number')
        rules.append(ValidationRule(str(name), fg, bg, float(required)))
    return tuple(rules)


def load_rules(path: str | Path) -> tuple[ValidationRule, ...]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except FileNotFoundError as e:
        raise RulesError(f'rules file not found: {path}') from e
    except OSError as e:
        raise RulesError(f'rules file cannot be read: {path} ({e.strerror or e})') from e
    except UnicodeDecodeError as e:
        raise RulesError(f'rules file is not valid UTF-8: {path}') from e
    except json.JSONDecodeError as e:
        raise RulesError(f'rules file is not valid JSON: {path} ({e})') from e
    return parse_rules(data)
