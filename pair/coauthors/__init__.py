"""Co-author Registry and Resolution Engine Package"""

from pair.coauthors.models import (
    Alias,
    CoAuthor,
    ConfigError,
    Identifier,
    Index,
    NotFoundError,
    Registry,
    parse_identifier,
)
from pair.coauthors.engine import (
    ChangeResult,
    Notice,
    NoticeKind,
    active_label,
    add,
    add_coauthors,
    available_candidates,
    clear,
    remove,
    remove_coauthors,
    selection_label,
)

__all__ = [
    "Alias",
    "CoAuthor",
    "ConfigError",
    "Identifier",
    "Index",
    "NotFoundError",
    "Registry",
    "parse_identifier",
    "ChangeResult",
    "Notice",
    "NoticeKind",
    "active_label",
    "add",
    "add_coauthors",
    "available_candidates",
    "clear",
    "remove",
    "remove_coauthors",
    "selection_label",
]
