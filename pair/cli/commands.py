"""CLI Commands"""

from dataclasses import dataclass, field
from pathlib import Path

from pair import coauthors
from pair.coauthors import CoAuthor, ChangeResult, NoticeKind, Registry
from pair.config import ConfigError, Settings, load_registry, write_sample_config
from pair.git import GitConfig, get_current_template, parse_active, write_template
from pair.log import get_logger
from pair.output import info, print_error, print_success, print_warning, render_coauthor_table
from pair.picker import pick

log = get_logger(__name__)


@dataclass
class Context:
    """Everything a command needs, built once per invocation."""
    settings: Settings
    config_path: Path
    git: GitConfig = field(default_factory=GitConfig)

    def registry(self) -> Registry:
        return load_registry(self.config_path)

    def template_path(self) -> str:
        return get_current_template(self.git)

    def active(self) -> list[CoAuthor]:
        return parse_active(self.template_path())

    def save(self, active: list[CoAuthor]) -> Path:
        return write_template(active, self.settings.resolved_template_path, self.git)


def _report(result: ChangeResult) -> None:
    """Print what changed first, then the warnings collected on the way."""
    for notice in result.notices:
        if not notice.is_warning:
            print(notice.message)
    for notice in result.warnings:
        print_warning(notice.message)


def run_list(ctx: Context) -> int:
    """List all co-authors from the config."""
    registry = ctx.registry()
    if len(registry) == 0:
        print("No co-authors found in config. Use 'pair init' to create a sample config.")
        return 0
    render_coauthor_table("Available co-authors:", registry)
    return 0


def run_show(ctx: Context) -> int:
    """Show the co-authors in the current commit template."""
    template_path = ctx.template_path()
    if not template_path:
        print("No commit template is currently set. No active co-authors.")
        return 0

    active = parse_active(template_path)
    if not active:
        print("No active co-authors found.")
        return 0

    # Aliases are only decoration here
    try:
        registry = ctx.registry()
    except ConfigError as e:
        print_warning(f"Could not load config for aliases: {e}")
        registry = Registry()

    render_coauthor_table("Active co-authors:", active, registry.alias_for)
    return 0


def run_add(ctx: Context, identifiers: list[str]) -> int:
    registry = ctx.registry()
    identity = ctx.git.identity()
    active = ctx.active()

    result = coauthors.add(registry, active, identifiers, identity)
    _report(result)

    if not result.changed:
        print_error("No co-authors were added")
        return 1

    ctx.save(result.active)
    return 0


def run_remove(ctx: Context, identifier: str) -> int:
    registry = ctx.registry()
    active = ctx.active()

    result = coauthors.remove(registry, active, identifier)
    ctx.save(result.active)
    removed = result.notices[0].coauthor
    print_success(f"Removed co-author: {removed.trailer}")
    return 0


def run_clear(ctx: Context) -> int:
    ctx.save(coauthors.clear().active)
    print_success("All co-authors have been cleared")
    return 0


def run_init(ctx: Context) -> int:
    """Write a sample co-author config."""
    if not write_sample_config(ctx.config_path):
        print_warning(f"Config file already exists at {ctx.config_path}. Use --config to specify a different path.")
        return 0

    print_success(f"Created sample config file at {ctx.config_path}")
    print("You can now use aliases to add co-authors, e.g.:")
    print(f"  {info('pair add john')}")
    print(f"  {info('pair add jane')}")
    print("Or use interactive selection with:")
    print(f"  {info('pair select')}")
    return 0


def run_select(ctx: Context, multiple: bool = False) -> int:
    """Pick co-authors to add with the fuzzy finder."""
    registry = ctx.registry()
    if len(registry) == 0:
        print_error("No co-authors found in config")
        return 1

    identity = ctx.git.identity()
    active = ctx.active()
    candidates = coauthors.available_candidates(registry, active, identity)
    if not candidates:
        print_error("All co-authors are already active")
        return 1

    prompt = "Select co-authors to add (TAB to select multiple):" if multiple else "Select co-author:"
    chosen = pick(candidates, coauthors.selection_label, prompt, multi=multiple)
    if not chosen:
        print_error("No co-authors selected")
        return 1

    result = coauthors.add_coauthors(active, chosen, identity)
    _report(result)
    if not result.changed:
        print_error("No co-authors were added")
        return 1

    ctx.save(result.active)
    print_success(f"Added {result.count(NoticeKind.ADDED)} co-author(s) to your commit template")
    return 0


def run_unselect(ctx: Context, multiple: bool = False) -> int:
    """Pick active co-authors to remove with the fuzzy finder."""
    active = ctx.active()
    if not active:
        print_error("No active co-authors found")
        return 1

    prompt = "Select co-authors to remove (TAB to select multiple):" if multiple else "Select co-author to remove:"
    chosen = pick(active, coauthors.active_label, prompt, multi=multiple)
    if not chosen:
        print_error("No co-authors selected for removal")
        return 1

    result = coauthors.remove_coauthors(active, chosen)
    _report(result)
    ctx.save(result.active)
    print_success(f"Removed {result.count(NoticeKind.REMOVED)} co-author(s) from your commit template")
    return 0

