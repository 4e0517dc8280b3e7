"""Ordered storage of compiled globs per rule file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path, PurePath

from codeowners_lens.globs.matcher import CompiledGlob, GlobMatcher
from codeowners_lens.rules.models import Rule, RuleFileHandle


class ResolutionTable:
    """Rule files and their globs in rule-file line order.

    Lookups walk handles from the shallowest base directory to the deepest, so
    a rule file nested inside the project overrides the root file for the paths
    it covers. Within a handle the last matching line wins.
    """

    def __init__(self, matcher: GlobMatcher) -> None:
        self._matcher = matcher
        self._globs: dict[RuleFileHandle, list[CompiledGlob]] = {}

    def put(
        self,
        handle: RuleFileHandle,
        rules: Iterable[Rule],
        base_dir_path: str,
        owner_prefix: str = "",
    ) -> None:
        globs = self._globs.setdefault(handle, [])
        for rule in rules:
            glob = self._matcher.compile(rule, base_dir_path, owner_prefix)
            if glob in globs:
                globs.remove(glob)
            globs.append(glob)

    def lookup(self, path: str | PurePath) -> CompiledGlob | None:
        for glob in reversed(self.globs()):
            if self._matcher.matches(glob, path):
                return glob
        return None

    def reverse_lookup(self, rule: Rule) -> Path | None:
        for handle, globs in self._globs.items():
            if any(glob.rule == rule for glob in globs):
                return handle.file
        return None

    def clear(self) -> None:
        self._globs.clear()

    def has_handle_for(self, base_dir_path: str | None) -> bool:
        return any(handle.base_dir_path == base_dir_path for handle in self._globs)

    def is_empty(self) -> bool:
        return not self._globs

    def handles(self) -> list[RuleFileHandle]:
        return sorted(self._globs, key=lambda handle: len(PurePath(handle.base_dir_path).parts))

    def globs(self) -> list[CompiledGlob]:
        return [glob for handle in self.handles() for glob in self._globs[handle]]

    def globs_for(self, handle: RuleFileHandle) -> list[CompiledGlob]:
        return list(self._globs.get(handle, []))
