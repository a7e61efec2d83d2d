"""CLI Utility Functions"""

import argparse
import os
import sys
from pathlib import Path

import argcomplete
import yaml

from pair import PairError
from pair.config import SETTINGS_DIR
from pair.output import bold, dim


class DocsError(PairError):
    """Raised when documentation cannot be generated."""
    pass


def _markdown_page(name: str, parser: argparse.ArgumentParser, links: list[str]) -> str:
    lines = [f"## {name}", "", parser.description or "", "", "### Synopsis", "", "```", parser.format_help().rstrip(), "```"]
    if links:
        lines += ["", "### See also", ""]
        lines += [f"* [{link}]({link.replace(' ', '_')}.md)" for link in links]
    return '\n'.join(lines) + '\n'


def _rest_page(name: str, parser: argparse.ArgumentParser, links: list[str]) -> str:
    lines = [f".. _{name.replace(' ', '_')}:", "", name, "-" * len(name), "", parser.description or "", "",
             "Synopsis", "~~~~~~~~", "", ".. code-block:: text", ""]
    lines += [f"    {line}".rstrip() for line in parser.format_help().rstrip().split('\n')]
    if links:
        lines += ["", "See also", "~~~~~~~~", ""]
        lines += [f"* :ref:`{link.replace(' ', '_')}`" for link in links]
    return '\n'.join(lines) + '\n'


def _option_entry(action: argparse.Action) -> dict:
    longs = [s for s in action.option_strings if s.startswith('--')]
    shorts = [s for s in action.option_strings if not s.startswith('--')]
    entry = {'name': (longs or shorts)[0].lstrip('-')}
    if longs and shorts:
        entry['shorthand'] = shorts[0].lstrip('-')
    if action.default not in (None, argparse.SUPPRESS):
        entry['default_value'] = str(action.default).lower() if isinstance(action.default, bool) else str(action.default)
    entry['usage'] = action.help or ''
    return entry


def _yaml_page(name: str, parser: argparse.ArgumentParser, links: list[str]) -> str:
    page = {
        'name': name,
        'synopsis': parser.description or '',
        'usage': parser.format_usage().strip().removeprefix('usage: '),
    }
    arguments = [
        {'name': action.metavar or action.dest, 'usage': action.help or ''}
        for action in parser._actions
        if not action.option_strings and not isinstance(action, argparse._SubParsersAction)
    ]
    if arguments:
        page['arguments'] = arguments
    options = [_option_entry(action) for action in parser._actions if action.option_strings]
    if options:
        page['options'] = options
    if links:
        page['see_also'] = links
    return yaml.dump(page, default_flow_style=False, sort_keys=False, allow_unicode=True)


DOC_FORMATS = {
    'markdown': (_markdown_page, '.md'),
    'md': (_markdown_page, '.md'),
    'rest': (_rest_page, '.rst'),
    'yaml': (_yaml_page, '.yaml'),
}


def generate_docs(parser: argparse.ArgumentParser, output_dir: str | Path, doc_type: str = 'markdown') -> list[Path]:
    """Write one page for the root command and one per subcommand.

    Returns the paths written, root page first.
    """
    if doc_type.lower() not in DOC_FORMATS:
        raise DocsError(f"unknown documentation type: {doc_type} (supported: markdown, rest, yaml)")
    render, suffix = DOC_FORMATS[doc_type.lower()]

    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DocsError(f"failed to create output directory: {e}")

    root = parser.prog
    subcommands = getattr(parser, 'subcommands', {})
    pages = {root: (parser, [f"{root} {name}" for name in subcommands])}
    for name, subparser in subcommands.items():
        pages[f"{root} {name}"] = (subparser, [root])

    written = []
    for name, (page_parser, links) in pages.items():
        path = output_dir / f"{name.replace(' ', '_')}{suffix}"
        try:
            path.write_text(render(name, page_parser, links), encoding='utf-8')
        except OSError as e:
            raise DocsError(f"failed to write {path}: {e}")
        written.append(path)
    return written


# rc file each shell reads, and how it loads a script
SHELL_RC = {
    'bash': ('~/.bashrc', 'source {}'),
    'zsh': ('~/.zshrc', 'source {}'),
    'fish': ('~/.config/fish/config.fish', 'source {}'),
    'tcsh': ('~/.tcshrc', 'source {}'),
    'powershell': ('$PROFILE', '. {}'),
}


def detect_shell() -> str:
    if sys.platform == 'win32':
        return 'powershell'
    name = Path(os.environ.get('SHELL', '')).name
    return name if name in SHELL_RC else 'bash'


def run_install_completion(settings_dir: str | Path | None = None, shell: str | None = None) -> int:
    """Write the argcomplete hook for pair next to the settings file.

    Completes subcommands and, for add / remove, the aliases from the
    co-author config. The user still has to source the script from their
    shell's rc file; we print the line rather than editing it.
    """
    shell = shell or detect_shell()
    if shell not in SHELL_RC:
        raise PairError(f"unsupported shell for completion: {shell} (supported: {', '.join(SHELL_RC)})")

    target_dir = Path(settings_dir or SETTINGS_DIR).expanduser()
    script = target_dir / f"completion.{shell}"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        script.write_text(argcomplete.shellcode(['pair'], shell=shell), encoding='utf-8')
    except OSError as e:
        raise PairError(f"failed to write completion script {script}: {e}")

    rc_file, load_line = SHELL_RC[shell]
    print(f"\n{bold('Tab Completion Setup')}\n")
    print(f"Wrote {shell} completion script to {dim(str(script))}\n")
    print(f"Add this line to {dim(rc_file)}:\n")
    print(f"  {load_line.format(script)}\n")
    print(f"{dim('After setup, press TAB to complete commands and co-author aliases.')}")
    return 0
