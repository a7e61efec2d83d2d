"""Shared fixtures: an in-memory git config and a co-author config on disk."""

import json

import pytest

from pair.config import Settings
from pair.git import GitConfig
from pair.cli.commands import Context


JANE_JOHN = {
    "coauthors": {
        "jane": {"name": "Jane Doe", "email": "jane@x.com"},
        "john": {"name": "John Doe", "email": "john@x.com"},
    }
}


class FakeGit(GitConfig):
    """GitConfig backed by a dict instead of the git binary."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.global_writes = []

    def get(self, key: str) -> str:
        return self.values.get(key, "")

    def set_global(self, key: str, value: str) -> None:
        self.values[key] = value
        self.global_writes.append((key, value))


@pytest.fixture
def fake_git():
    return FakeGit({"user.name": "Alice", "user.email": "alice@x.com"})


@pytest.fixture
def write_config(tmp_path):
    """Return a function that writes a co-author config and returns its path."""
    def _write(data=JANE_JOHN, name=".pair.json"):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path
    return _write


@pytest.fixture
def ctx(tmp_path, fake_git, write_config):
    """Command context with jane/john configured and nothing active."""
    settings = Settings(template_path=str(tmp_path / "templates" / "git_commit_template"))
    return Context(settings=settings, config_path=write_config(), git=fake_git)
