"""CLI Argument Parsing"""

import argparse
import argcomplete

from pair import __version__
from pair.config import ConfigError, load_registry

DOC_TYPES = ['markdown', 'md', 'rest', 'yaml']


def alias_completer(prefix, parsed_args, **kwargs):
    """Complete identifiers with the aliases from the co-author config."""
    try:
        registry = load_registry(getattr(parsed_args, 'config', None))
    except ConfigError:
        return []
    return [alias for alias in registry.aliases if alias.startswith(prefix)]


def _command(sub, commands, name: str, help: str, aliases=()) -> argparse.ArgumentParser:
    # `command` always holds the canonical name, even when an alias was typed
    parser = sub.add_parser(name, aliases=list(aliases), help=help, description=help)
    parser.set_defaults(command=name)
    commands[name] = parser
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pair',
        description='Manage Git commit co-authors',
        epilog='Example: pair add jane john (adds Co-authored-by trailers to your commit template)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-c', '--config', type=str, metavar='PATH', default=None,
                        help='Co-author config file (default: ./.pair.json if present, else ~/.pair.json)')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    parser.add_argument('--debug', action='store_true', help='Show debug logging on stderr')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    sub = parser.add_subparsers(dest='typed_command', metavar='COMMAND')
    commands = {}

    _command(sub, commands, 'list', 'List all available co-authors', aliases=['ls'])
    _command(sub, commands, 'show', 'Show currently active co-authors', aliases=['s'])

    add = _command(sub, commands, 'add', 'Add co-authors to Git commits by alias or index', aliases=['a'])
    add.add_argument('identifiers', nargs='+', metavar='ALIAS|INDEX',
                     help='Alias or list index (see `pair list`)').completer = alias_completer

    remove = _command(sub, commands, 'remove', 'Remove a co-author from Git commits by alias or index', aliases=['rm'])
    remove.add_argument('identifier', metavar='ALIAS|INDEX',
                        help='Alias, or index in the active list (see `pair show`)').completer = alias_completer

    _command(sub, commands, 'clear', 'Clear all active co-authors')
    _command(sub, commands, 'init', 'Initialize a new config file with sample co-authors', aliases=['i'])

    select = _command(sub, commands, 'select', 'Interactively select co-authors using fuzzy finder')
    select.add_argument('-m', '--multiple', action='store_true', help='Enable multiple selection mode')

    unselect = _command(sub, commands, 'unselect', 'Interactively remove co-authors using fuzzy finder', aliases=['us'])
    unselect.add_argument('-m', '--multiple', action='store_true', help='Enable multiple selection mode')

    docs = _command(sub, commands, 'docs', 'Generate documentation')
    docs.add_argument('-o', '--output-dir', type=str, default='doc', metavar='DIR',
                      help='Directory to output documentation (default: ./doc)')
    docs.add_argument('-t', '--type', type=str.lower, default='markdown', metavar='TYPE',
                      help=f'Documentation type: {", ".join(DOC_TYPES)}')

    parser.subcommands = commands
    return parser


def parse_args(argv=None, parser: argparse.ArgumentParser | None = None) -> argparse.Namespace:
    parser = parser or build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
