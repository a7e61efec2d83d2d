"""Co-author data model and the alias registry loaded from the JSON config."""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from pair import PairError
from pair.log import get_logger

log = get_logger(__name__)

INDEX_PATTERN = re.compile(r'-?\d+')


class ConfigError(PairError):
    """Raised when the co-author config is missing, malformed or invalid."""
    pass


class NotFoundError(PairError):
    """Raised when an identifier does not resolve to a co-author."""
    pass


@dataclass(frozen=True)
class CoAuthor:
    """A name/email identity that can be credited on a commit."""
    name: str
    email: str
    alias: Optional[str] = None

    def validate(self) -> None:
        if not self.name:
            raise ValueError("name cannot be empty")
        if not self.email:
            raise ValueError("email cannot be empty")
        if '@' not in self.email:
            raise ValueError("email must contain '@' character")

    @property
    def key(self) -> str:
        """Identity used for set membership: the email, case-insensitive."""
        return self.email.casefold()

    def same_person(self, other: 'CoAuthor') -> bool:
        return self.key == other.key

    @property
    def trailer(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class Index:
    """Identifier given as a 0-based position."""
    value: int


@dataclass(frozen=True)
class Alias:
    """Identifier given as a config alias."""
    name: str


Identifier = Index | Alias


def parse_identifier(text: str) -> Identifier:
    """Classify user input once: integer-looking strings are indexes."""
    if INDEX_PATTERN.fullmatch(text):
        return Index(int(text))
    return Alias(text)


@dataclass
class Registry:
    """Co-authors from the config file, in declaration order."""
    coauthors: list[CoAuthor] = field(default_factory=list)
    source: Optional[Path] = None

    def __post_init__(self):
        self._by_alias = {c.alias: c for c in self.coauthors if c.alias}

    def __len__(self) -> int:
        return len(self.coauthors)

    def __iter__(self) -> Iterator[CoAuthor]:
        return iter(self.coauthors)

    @property
    def aliases(self) -> list[str]:
        return list(self._by_alias)

    @classmethod
    def from_dict(cls, data: dict, source: Optional[Path] = None) -> 'Registry':
        """Build a registry from a parsed config document.

        Key order of the ``coauthors`` object is kept, so index 0 is always
        the first alias declared in the file.
        """
        if not isinstance(data, dict) or not isinstance(data.get('coauthors'), dict):
            raise ConfigError("config must contain a 'coauthors' object")

        coauthors = []
        for alias, details in data['coauthors'].items():
            if not isinstance(details, dict):
                raise ConfigError(f"invalid co-author '{alias}': expected an object with name and email")
            coauthor = CoAuthor(
                name=str(details.get('name') or '').strip(),
                email=str(details.get('email') or '').strip(),
                alias=alias,
            )
            try:
                coauthor.validate()
            except ValueError as e:
                raise ConfigError(f"invalid co-author '{alias}': {e}")
            coauthors.append(coauthor)

        return cls(coauthors=coauthors, source=source)

    @classmethod
    def load(cls, path: Path) -> 'Registry':
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigError(f"could not read config file {path}: file not found (run 'pair init' to create one)")
        except OSError as e:
            raise ConfigError(f"could not read config file {path}: {e}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"could not parse config file {path}: {e}")

        registry = cls.from_dict(data, source=path)
        log.debug("registry loaded", path=str(path), coauthors=len(registry))
        return registry

    def resolve(self, identifier: str | Identifier) -> CoAuthor:
        if isinstance(identifier, str):
            identifier = parse_identifier(identifier)

        if isinstance(identifier, Index):
            if 0 <= identifier.value < len(self.coauthors):
                return self.coauthors[identifier.value]
            raise NotFoundError(f"invalid co-author index: {identifier.value}")

        coauthor = self._by_alias.get(identifier.name)
        if coauthor is None:
            raise NotFoundError(f"no co-author found with alias '{identifier.name}'")
        return coauthor

    def alias_for(self, coauthor: CoAuthor) -> str:
        """Alias of the configured co-author with the same email, or ''."""
        for candidate in self.coauthors:
            if candidate.same_person(coauthor):
                return candidate.alias or ''
        return ''
