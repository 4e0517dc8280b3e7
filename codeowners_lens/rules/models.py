"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Rule:
    line_number: int
    pattern: str
    owners: tuple[str, ...]

    @classmethod
    def from_tokens(cls, line_number: int, tokens: list[str]) -> Rule:
        return cls(line_number=line_number, pattern=tokens[0], owners=tuple(tokens[1:]))

    def without_owner_prefix(self, prefix: str) -> Rule:
        return replace(self, owners=tuple(owner.removeprefix(prefix) for owner in self.owners))


@dataclass(frozen=True)
class RuleFileHandle:
    file: Path
    base_dir_path: str


@dataclass(frozen=True)
class RuleMatched:
    rule: Rule


@dataclass(frozen=True)
class NoRuleFileFound:
    pass


@dataclass(frozen=True)
class NoMatchInRuleFile:
    pass


FileCodeOwnerState = Union[RuleMatched, NoRuleFileFound, NoMatchInRuleFile]
