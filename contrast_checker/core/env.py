"""Environment-backed settings for contrast-check.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  CONTRAST_PALETTE   path to a palette JSON file
  CONTRAST_RULES     path to a rules JSON file
  CONTRAST_STRICT    exit 1 when any rule fails (1/true/yes/on)
"""

import os
from pathlib import Path

PALETTE_VAR = 'CONTRAST_PALETTE'
RULES_VAR = 'CONTRAST_RULES'
STRICT_VAR = 'CONTRAST_STRICT'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        if (current / '.env').is_file():
            return current / '.env'
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists() or current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value / KEY="value" lines. Comments and malformed lines are skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def env_path(name: str) -> str | None:
    value = os.environ.get(name, '').strip()
    return value or None
