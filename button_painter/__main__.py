"""button-painter: Solid and ghost button utilities from a colour theme.

Usage: button-painter <command> [class names...] [options]

Commands are auto-discovered from button_painter/commands/.
Each command module's docstring is its documentation.
Run `button-painter help <command>` for full module docs.

Theme:
  --theme PATH, else $BUTTON_PAINTER_THEME, else the built-in Tailwind palette.
  A theme file is JSON: {"colors": {...}} or a bare colours mapping.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, button-painter looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from button_painter import registry
from button_painter.core.env import load_env, theme_path
from button_painter.core.scan import scan_file
from button_painter.core.theme import Theme, ThemeError, load_theme


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'button_painter.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  button-painter css button-blue-500 button-ghost-red-300\n'
        "  button-painter css 'button-[#0ea5e9]' 'button-ghost-[rgb(15,23,42)]'\n"
        '  button-painter css --input index.html --theme theme.json --json\n'
        '  button-painter autocomplete --prefix button-ghost-\n'
        '  button-painter audit --theme theme.json --fail-on-mismatch\n'
        '  button-painter swatch button-blue-500 button-ghost-rose-300 -o buttons.png\n'
        '  button-painter help css\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  BUTTON_PAINTER_THEME  default theme JSON path\n'
    )
    parser = argparse.ArgumentParser(
        prog='button-painter',
        description='Solid and ghost button utilities from a colour theme.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command_name', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('candidates', nargs='*', metavar='CLASS', help='Class names to resolve')
        p.add_argument('-t', '--theme', help='Theme JSON file (default: $BUTTON_PAINTER_THEME or Tailwind)')
        p.add_argument('-i', '--input', help='Scan class names out of this file (HTML, templates)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-v', '--verbose', action='store_true', help='Report unmatched class names on stderr')
        p.add_argument('-o', '--output', help='Output PNG for swatch (default: button-swatch.png)')
        p.add_argument('-p', '--prefix', help='Only list autocomplete suggestions with this prefix')
        p.add_argument(
            '--fail-on-unmatched',
            action='store_true',
            help='Exit 1 if any class name matched no rule (CI gating)',
        )
        p.add_argument(
            '--fail-on-mismatch',
            action='store_true',
            help='Exit 1 if any shade text colour disagrees with luminance (audit)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<14} {_short_help(name, cmd.help)}')
        print('\nRun: button-painter help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _load_theme(args: argparse.Namespace) -> Theme:
    """Theme from --theme / $BUTTON_PAINTER_THEME, or the Tailwind palette."""
    path = theme_path(args.theme)
    if path is None:
        return Theme.tailwind()
    if not os.path.isfile(path):
        print(f'Error: theme not found: {path}', file=sys.stderr)
        sys.exit(1)
    try:
        return load_theme(path)
    except ThemeError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


def _load_candidates(args: argparse.Namespace) -> list[str]:
    """Positional class names, then any scanned from --input."""
    candidates = list(args.candidates)
    if args.input:
        if not os.path.isfile(args.input):
            print(f'Error: input not found: {args.input}', file=sys.stderr)
            sys.exit(1)
        try:
            scanned = scan_file(args.input)
        except UnicodeDecodeError as e:
            print(f'Error: input is not valid UTF-8: {args.input} (byte {e.start})', file=sys.stderr)
            sys.exit(1)
        except OSError as e:
            print(f'Error: cannot read input: {args.input} ({e.strerror or e})', file=sys.stderr)
            sys.exit(1)
        candidates.extend(c for c in scanned if c not in candidates)
    return candidates


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'button-painter: loaded {env_path}', file=sys.stderr)

    if not args.command_name:
        parser.print_help()
        sys.exit(1)

    if args.command_name == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    theme = _load_theme(args)
    candidates = _load_candidates(args)

    cmd = registry.get(args.command_name)
    status = cmd.execute(theme, candidates, args)
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
