"""Interactive fuzzy picker built on fzf (via iterfzf)."""

from typing import Callable

from iterfzf import iterfzf

from pair import PairError
from pair.coauthors.models import CoAuthor
from pair.log import get_logger

log = get_logger(__name__)


class SelectionCancelled(PairError):
    """Raised when the user aborts the picker (Esc / Ctrl-C)."""
    pass


class PickerError(PairError):
    """Raised when fzf itself fails."""
    pass


def pick(
    items: list[CoAuthor],
    label: Callable[[CoAuthor], str],
    prompt: str,
    multi: bool = False,
) -> list[CoAuthor]:
    """Let the user choose from *items*, returned in the order chosen.

    An empty list means nothing was chosen; aborting raises
    SelectionCancelled.
    """
    by_label = {}
    for item in items:
        by_label.setdefault(label(item), item)

    # Multi mode reports "no match" as [] rather than None, so single mode
    # runs through it too and keeps the first entry.
    try:
        chosen = iterfzf(list(by_label), multi=True, prompt=f"{prompt} ")
    except KeyboardInterrupt:
        raise SelectionCancelled("selection cancelled")

    if chosen is None:
        raise PickerError("fuzzy finder failed")
    if isinstance(chosen, str):
        chosen = [chosen]
    if not multi:
        chosen = chosen[:1]

    log.debug("picker returned", chosen=len(chosen), offered=len(by_label))
    return [by_label[text] for text in chosen if text in by_label]
