"""Compile CODEOWNERS patterns into matchable globs.

CODEOWNERS patterns follow gitignore syntax relative to the directory the
rule file governs, so compilation is delegated to :mod:`pathspec`. Negation
is not part of CODEOWNERS; a ``!`` pattern simply never matches.

Gitignore lets a matched directory cover everything beneath it. CODEOWNERS
keeps that for ``docs/`` and ``apps/web``, but ``*`` must not cross ``/``:
``docs/*`` owns ``docs/a.md`` and not ``docs/build/a.md``. Such patterns also
compile the ``pattern/`` directory form, and a path it accepts lies below a
matched directory rather than matching itself.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import PurePath

import pathspec

from codeowners_lens.rules.models import Rule
from codeowners_lens.utils import relative_posix

logger = logging.getLogger(__name__)

WILDCARD_CHARS = frozenset("*?[")


@dataclass(frozen=True)
class CompiledGlob:
    rule: Rule = field(compare=False)
    base_dir_path: str
    spec: pathspec.PathSpec | None = field(compare=False, repr=False)
    owner_prefix: str = field(default="", compare=False)
    # Set for file-level patterns: matches paths lying under a matched directory.
    below_spec: pathspec.PathSpec | None = field(default=None, compare=False, repr=False)
    pattern: str = field(init=False)
    owners: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", self.rule.pattern)
        object.__setattr__(self, "owners", self.rule.owners)

    @property
    def is_valid(self) -> bool:
        return self.spec is not None


def covers_descendants(pattern: str) -> bool:
    """Whether a match on a directory extends to everything beneath it."""
    if pattern.endswith("/"):
        return True
    _, separator, last = pattern.rpartition("/")
    if not separator:
        return True
    return last == "**" or not (WILDCARD_CHARS & set(last))


class GlobMatcher:
    def compile(self, rule: Rule, base_dir_path: str, owner_prefix: str = "") -> CompiledGlob:
        spec = self._compile_pattern(rule.pattern)
        below_spec = None
        if spec is not None and not covers_descendants(rule.pattern):
            below_spec = self._compile_pattern(f"{rule.pattern}/")
        return CompiledGlob(
            rule=rule,
            base_dir_path=base_dir_path,
            spec=spec,
            owner_prefix=owner_prefix,
            below_spec=below_spec,
        )

    def matches(self, glob: CompiledGlob, path: str | PurePath) -> bool:
        if glob.spec is None:
            return False
        relative = relative_posix(path, glob.base_dir_path)
        if not relative or relative == ".":
            return False
        if not glob.spec.match_file(relative):
            return False
        return glob.below_spec is None or not glob.below_spec.match_file(relative)

    @staticmethod
    def _compile_pattern(pattern: str) -> pathspec.PathSpec | None:
        if pattern.startswith("!"):
            logger.debug("Negated pattern %r is not supported in CODEOWNERS", pattern)
            return None
        try:
            return pathspec.GitIgnoreSpec.from_lines([pattern])
        except (ValueError, re.error) as exc:
            logger.debug("Cannot compile pattern %r: %s", pattern, exc)
            return None
