"""Git Config - read and write git configuration values."""

import subprocess
from dataclasses import dataclass

from pair import PairError
from pair.log import get_logger

log = get_logger(__name__)

# `git config --get` exits with 1 when the key is not set
KEY_NOT_SET = 1


class GitConfigError(PairError):
    """Raised when git config cannot be read or written."""
    pass


@dataclass(frozen=True)
class Identity:
    """The operator's own git identity (user.name / user.email)."""
    name: str = ""
    email: str = ""

    def matches(self, name: str, email: str) -> bool:
        """Case-insensitive match on either field. Empty fields never match."""
        if self.email and email and self.email.casefold() == email.casefold():
            return True
        if self.name and name and self.name.casefold() == name.casefold():
            return True
        return False


class GitConfig:
    """Thin wrapper over `git config`."""

    def _run_git(self, *args: str) -> subprocess.CompletedProcess:
        log.debug("running git", args=args)
        try:
            return subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitConfigError("Git is not installed or not in PATH")

    def get(self, key: str) -> str:
        """Return the value of *key*, or '' when it is not set."""
        result = self._run_git('config', '--get', key)
        if result.returncode == KEY_NOT_SET:
            return ""
        if result.returncode != 0:
            raise GitConfigError(f"failed to read git config {key}: {result.stderr.strip()}")
        return result.stdout.strip()

    def set_global(self, key: str, value: str) -> None:
        result = self._run_git('config', '--global', key, value)
        if result.returncode != 0:
            raise GitConfigError(f"failed to set git config {key}: {result.stderr.strip()}")
        log.debug("git config updated", key=key, value=value)

    def identity(self) -> Identity:
        return Identity(name=self.get('user.name'), email=self.get('user.email'))
