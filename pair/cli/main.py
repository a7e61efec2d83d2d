"""CLI Main Entry Point"""

import sys
from pathlib import Path

from pair import PairError
from pair.config import Settings, get_config_path, load_settings
from pair.git import GitConfig
from pair.log import configure_logging, get_logger
from pair.output import dim, print_error, print_success, set_colors
from pair.picker import SelectionCancelled

from pair.cli.args import build_parser, parse_args
from pair.cli.commands import (
    Context,
    run_add,
    run_clear,
    run_init,
    run_list,
    run_remove,
    run_select,
    run_show,
    run_unselect,
)
from pair.cli.utils import generate_docs, run_install_completion

log = get_logger(__name__)

# Same status a shell reports for Ctrl-C
EXIT_CANCELLED = 130


def _apply_overrides(args, settings: Settings) -> Settings:
    """Precedence: CLI flags > environment variables > settings file"""
    if args.no_color:
        settings.no_color = True
    if args.debug:
        settings.debug = True
    return settings


def _dispatch(args, ctx: Context, parser) -> int:
    command = args.command
    if command == 'list':
        return run_list(ctx)
    if command == 'show':
        return run_show(ctx)
    if command == 'add':
        return run_add(ctx, args.identifiers)
    if command == 'remove':
        return run_remove(ctx, args.identifier)
    if command == 'clear':
        return run_clear(ctx)
    if command == 'init':
        return run_init(ctx)
    if command == 'select':
        return run_select(ctx, multiple=args.multiple)
    if command == 'unselect':
        return run_unselect(ctx, multiple=args.multiple)
    if command == 'docs':
        written = generate_docs(parser, args.output_dir, args.type)
        print_success(f"Wrote {len(written)} documentation files to {args.output_dir}")
        return 0
    parser.print_help()
    return 1


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parse_args(argv, parser)

    if args.install_completion:
        try:
            return run_install_completion()
        except PairError as e:
            print_error(str(e))
            return 1

    settings = _apply_overrides(args, load_settings())
    set_colors(not settings.no_color)
    configure_logging(debug=settings.debug, colors=not settings.no_color)

    config_path = Path(args.config).expanduser() if args.config else get_config_path()
    ctx = Context(settings=settings, config_path=config_path, git=GitConfig())
    log.debug("starting", command=getattr(args, 'command', None), config=str(config_path),
              template=str(settings.resolved_template_path))

    if getattr(args, 'command', None) is None:
        parser.print_help()
        return 1

    try:
        return _dispatch(args, ctx, parser)
    except SelectionCancelled:
        print(dim("Selection cancelled."))
        return EXIT_CANCELLED
    except PairError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        return EXIT_CANCELLED


if __name__ == '__main__':
    sys.exit(main())
