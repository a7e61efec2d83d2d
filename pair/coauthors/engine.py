"""Resolution & Diff Engine

Pure functions that turn (registry, active set, request) into a new active
set plus the notices to show the user. Nothing here touches git or the
filesystem; the CLI writes the result through the template writer.

Unresolvable identifiers abort a whole `add` batch before anything is
written. Duplicate and self entries are soft: they produce a notice and the
rest of the batch goes ahead.
"""

from dataclasses import dataclass, field
from enum import Enum

from pair.coauthors.models import CoAuthor, Identifier, Index, NotFoundError, Registry, parse_identifier
from pair.git.config import Identity
from pair.log import get_logger

log = get_logger(__name__)


class NoticeKind(Enum):
    ADDED = "added"
    REMOVED = "removed"
    ALREADY_ACTIVE = "already_active"
    SELF_REFERENCE = "self_reference"


NOTICE_TEMPLATES = {
    NoticeKind.ADDED: "Adding co-author: {}",
    NoticeKind.REMOVED: "Removing co-author: {}",
    NoticeKind.ALREADY_ACTIVE: "Co-author already active: {}",
    NoticeKind.SELF_REFERENCE: "Cannot add yourself as a co-author: {}",
}


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    coauthor: CoAuthor

    @property
    def message(self) -> str:
        return NOTICE_TEMPLATES[self.kind].format(self.coauthor.trailer)

    @property
    def is_warning(self) -> bool:
        return self.kind in (NoticeKind.ALREADY_ACTIVE, NoticeKind.SELF_REFERENCE)


@dataclass
class ChangeResult:
    """New active set and what happened on the way there."""
    active: list[CoAuthor]
    notices: list[Notice] = field(default_factory=list)
    changed: bool = False

    @property
    def warnings(self) -> list[Notice]:
        return [n for n in self.notices if n.is_warning]

    def count(self, kind: NoticeKind) -> int:
        return sum(1 for n in self.notices if n.kind == kind)


def is_active(coauthor: CoAuthor, active: list[CoAuthor]) -> bool:
    return any(coauthor.same_person(a) for a in active)


def selection_label(coauthor: CoAuthor) -> str:
    """Label for a registry entry in the picker."""
    return f"{coauthor.name} ({coauthor.alias or ''}) <{coauthor.email}>"


def active_label(coauthor: CoAuthor) -> str:
    """Label for an active entry in the picker; aliases aren't known there."""
    return coauthor.trailer


def resolve_all(registry: Registry, identifiers: list[str]) -> list[CoAuthor]:
    """Resolve every identifier or fail on the first that doesn't resolve."""
    resolved = []
    for raw in identifiers:
        try:
            resolved.append(registry.resolve(parse_identifier(raw)))
        except NotFoundError as e:
            raise NotFoundError(f"error with '{raw}': {e}")
    return resolved


def add_coauthors(active: list[CoAuthor], candidates: list[CoAuthor], identity: Identity) -> ChangeResult:
    """Append candidates to the active set, skipping self and duplicates."""
    new_active = list(active)
    notices = []
    for candidate in candidates:
        if identity.matches(candidate.name, candidate.email):
            notices.append(Notice(NoticeKind.SELF_REFERENCE, candidate))
            continue
        if is_active(candidate, new_active):
            notices.append(Notice(NoticeKind.ALREADY_ACTIVE, candidate))
            continue
        new_active.append(candidate)
        notices.append(Notice(NoticeKind.ADDED, candidate))

    result = ChangeResult(active=new_active, notices=notices)
    result.changed = result.count(NoticeKind.ADDED) > 0
    log.debug("add computed", requested=len(candidates), added=result.count(NoticeKind.ADDED))
    return result


def add(registry: Registry, active: list[CoAuthor], identifiers: list[str], identity: Identity) -> ChangeResult:
    return add_coauthors(active, resolve_all(registry, identifiers), identity)


def find_active_index(registry: Registry, active: list[CoAuthor], identifier: Identifier) -> int:
    """Position in the active set that *identifier* refers to.

    An index is first taken as a position in the active set; when it is out
    of range (or the identifier is an alias) it is resolved against the
    registry and matched by email.
    """
    if not active:
        raise NotFoundError("no active co-authors to remove")

    if isinstance(identifier, Index) and 0 <= identifier.value < len(active):
        return identifier.value

    coauthor = registry.resolve(identifier)
    for i, candidate in enumerate(active):
        if candidate.same_person(coauthor):
            return i
    raise NotFoundError(f"co-author '{coauthor.name}' is not currently active")


def remove(registry: Registry, active: list[CoAuthor], identifier: str | Identifier) -> ChangeResult:
    """Remove exactly one entry from the active set."""
    if isinstance(identifier, str):
        identifier = parse_identifier(identifier)
    index = find_active_index(registry, active, identifier)
    removed = active[index]
    new_active = active[:index] + active[index + 1:]
    return ChangeResult(active=new_active, notices=[Notice(NoticeKind.REMOVED, removed)], changed=True)


def remove_coauthors(active: list[CoAuthor], chosen: list[CoAuthor]) -> ChangeResult:
    """Drop every active entry matching one of *chosen*, keeping order."""
    new_active = []
    notices = []
    for coauthor in active:
        if is_active(coauthor, chosen):
            notices.append(Notice(NoticeKind.REMOVED, coauthor))
        else:
            new_active.append(coauthor)
    return ChangeResult(active=new_active, notices=notices, changed=bool(notices))


def clear() -> ChangeResult:
    """Empty active set. Always a change, so the template is always rewritten."""
    return ChangeResult(active=[], changed=True)


def available_candidates(registry: Registry, active: list[CoAuthor], identity: Identity) -> list[CoAuthor]:
    """Registry entries that can still be added, in registry order."""
    return [
        c for c in registry
        if not identity.matches(c.name, c.email) and not is_active(c, active)
    ]
