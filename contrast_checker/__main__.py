"""contrast-check — WCAG contrast validation for a UI colour palette.

Usage: uv run contrast-check <command> [options]

Commands:
  validate   Check every foreground/background rule against the palette.
  ratio      Print the contrast ratio for a single pair of colours.
  roles      List the roles and colours in a palette.

Contrast failures are reported as a non-blocking warning: `validate` exits 0
even when rules fail, so CI keeps going. Pass --strict (or set
CONTRAST_STRICT=1) to exit 1 instead.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-check looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

from contrast_checker.core.contrast import AA_LARGE_TEXT, AA_NORMAL_TEXT, contrast_ratio
from contrast_checker.core.env import PALETTE_VAR, RULES_VAR, STRICT_VAR, env_flag, env_path, load_env
from contrast_checker.core.palette import PaletteError, default_palette, load_palette
from contrast_checker.core.report import format_json, format_text
from contrast_checker.core.rules import DEFAULT_RULES, RulesError, load_rules
from contrast_checker.core.types import Palette, ValidationRule
from contrast_checker.core.validator import evaluate

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  contrast-check validate\n'
        '  contrast-check validate --palette src/ui/colors.json --json\n'
        '  contrast-check validate --palette colors.json --rules rules.json --strict\n'
        "  contrast-check ratio '#FFFFFF' '#FF7A00'\n"
        "  contrast-check ratio '#666666' '#CCCCCC' --large-text\n"
        '  contrast-check roles --palette colors.json\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        f'  {PALETTE_VAR}  palette JSON path (default: bundled palette)\n'
        f'  {RULES_VAR}    rules JSON path (default: built-in AA rules)\n'
        f'  {STRICT_VAR}   1/true: exit 1 when any rule fails\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-check',
        description='WCAG contrast validation for a UI colour palette.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('validate', help='Check every rule against the palette')
    p.add_argument('-p', '--palette', help=f'Palette JSON file (env: {PALETTE_VAR})')
    p.add_argument('-r', '--rules', help=f'Rules JSON file (env: {RULES_VAR})')
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument(
        '-s',
        '--strict',
        action='store_true',
        default=None,
        help=f'Exit 1 if any rule fails (env: {STRICT_VAR}). Default is a non-blocking warning.',
    )

    p = sub.add_parser('ratio', help='Contrast ratio for one foreground/background pair')
    p.add_argument('foreground', help='Foreground colour, #RRGGBB')
    p.add_argument('background', help='Background colour, #RRGGBB')
    p.add_argument(
        '-l',
        '--large-text',
        action='store_true',
        help=f'Use the large-text threshold ({AA_LARGE_TEXT:g}:1 instead of {AA_NORMAL_TEXT:g}:1)',
    )

    p = sub.add_parser('roles', help='List palette roles and colours')
    p.add_argument('-p', '--palette', help=f'Palette JSON file (env: {PALETTE_VAR})')

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='contrast-check: %(levelname)s: %(message)s',
        stream=sys.stderr,
    )


def _load_palette(args: argparse.Namespace) -> tuple[Palette, str]:
    """Palette from --palette, then $CONTRAST_PALETTE, then the bundled default."""
    path = args.palette or env_path(PALETTE_VAR)
    if path:
        return load_palette(path), path
    return default_palette(), 'bundled palette'


def _load_rules(args: argparse.Namespace) -> tuple[ValidationRule, ...]:
    path = args.rules or env_path(RULES_VAR)
    if path:
        return load_rules(path)
    return DEFAULT_RULES


def _validate(args: argparse.Namespace) -> int:
    palette, source = _load_palette(args)
    rules = _load_rules(args)
    report = evaluate(palette, rules)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report, palette_source=source))

    strict = args.strict if args.strict is not None else env_flag(STRICT_VAR)
    if strict and not report.passed:
        print(f'contrast-check: {report.fail_count} rule(s) below threshold (strict mode)', file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK


def _ratio(args: argparse.Namespace) -> int:
    ratio = contrast_ratio(args.foreground, args.background)
    required = AA_LARGE_TEXT if args.large_text else AA_NORMAL_TEXT
    verdict = 'PASS' if ratio >= required else 'FAIL'
    kind = 'large text' if args.large_text else 'normal text'
    print(f'{args.foreground} on {args.background}: {ratio:.2f}:1  AA {kind} ({required:g}:1) {verdict}')
    return EXIT_OK


def _roles(args: argparse.Namespace) -> int:
    palette, source = _load_palette(args)
    print(f'{source} ({len(palette)} roles)')
    for role in palette:
        print(f'  {role:<16} {palette[role]}')
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    # Load .env before anything else — OS env vars always win
    env_path_loaded = load_env(env_file=args.env_file)
    if env_path_loaded:
        print(f'contrast-check: loaded {env_path_loaded}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    handlers = {'validate': _validate, 'ratio': _ratio, 'roles': _roles}
    try:
        return handlers[args.command](args)
    except (PaletteError, RulesError) as e:
        print(f'contrast-check: error: {e}', file=sys.stderr)
        return EXIT_USAGE


if __name__ == '__main__':
    sys.exit(main())
