"""Git Operations Package"""

from pair.git.config import GitConfig, GitConfigError, Identity
from pair.git.template import (
    TemplateIOError,
    get_current_template,
    parse_active,
    parse_trailer,
    render_template,
    write_template,
)

__all__ = [
    "GitConfig",
    "GitConfigError",
    "Identity",
    "TemplateIOError",
    "get_current_template",
    "parse_active",
    "parse_trailer",
    "render_template",
    "write_template",
]
