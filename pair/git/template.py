"""Commit Template - read and write the co-author section of the git commit template."""

import os
import tempfile
from pathlib import Path

from pair import PairError, TEMPLATE_MARKER, TRAILER_PREFIX
from pair.coauthors.models import CoAuthor
from pair.git.config import GitConfig
from pair.log import get_logger

log = get_logger(__name__)

TEMPLATE_KEY = 'commit.template'


class TemplateIOError(PairError):
    """Raised when the template file cannot be read or written."""
    pass


def get_current_template(git: GitConfig) -> str:
    """Path git currently uses as commit template, '' when none is set."""
    path = git.get(TEMPLATE_KEY)
    if path.startswith('~'):
        path = os.path.expanduser(path)
    return path


def parse_trailer(line: str) -> CoAuthor | None:
    """Parse one `Co-authored-by: Name <email>` line, None if it isn't one."""
    line = line.strip()
    if not line.startswith(TRAILER_PREFIX):
        return None
    info = line[len(TRAILER_PREFIX):].strip()
    parts = info.split('<')
    if len(parts) != 2:
        return None
    name = parts[0].strip()
    email = parts[1].strip().removesuffix('>').strip()
    return CoAuthor(name=name, email=email)


def parse_active(template_path: str | Path) -> list[CoAuthor]:
    """Extract the active co-authors from a template file, in file order.

    Lines that look like trailers but don't have the `Name <email>` shape are
    skipped; the template may contain content we didn't write.
    """
    if not template_path:
        return []
    try:
        with open(template_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise TemplateIOError(f"could not read commit template {template_path}: {e}")

    active = []
    for line in text.split('\n'):
        coauthor = parse_trailer(line)
        if coauthor is not None:
            active.append(coauthor)
    log.debug("parsed commit template", path=str(template_path), active=len(active))
    return active


def render_template(active: list[CoAuthor]) -> str:
    # Two blank lines leave room for the subject and body
    lines = ["", "", TEMPLATE_MARKER]
    lines.extend(f"{TRAILER_PREFIX} {c.trailer}" for c in active)
    return '\n'.join(lines) + '\n'


def write_template(active: list[CoAuthor], path: str | Path, git: GitConfig) -> Path:
    """Rewrite the template at *path* and point `commit.template` at it.

    The whole file is replaced on every call, so *path* must stay the same
    between runs. The new content goes to a sibling temp file first and is
    renamed over *path*, so readers never see a half-written template.
    """
    path = Path(path).expanduser().resolve()
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=path.parent,
                                         prefix=f'.{path.name}.', delete=False) as f:
            tmp_name = f.name
            f.write(render_template(active))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise TemplateIOError(f"failed to write template file {path}: {e}")
    log.debug("wrote commit template", path=str(path), active=len(active))

    git.set_global(TEMPLATE_KEY, str(path))
    return path
