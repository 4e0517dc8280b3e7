"""Resolve the CODEOWNERS rule that applies to a file."""

from __future__ import annotations

import logging
from pathlib import Path

from codeowners_lens.files import FilesHelper
from codeowners_lens.globs.matcher import GlobMatcher
from codeowners_lens.rules.models import (
    FileCodeOwnerState,
    NoMatchInRuleFile,
    NoRuleFileFound,
    Rule,
    RuleFileHandle,
    RuleMatched,
)
from codeowners_lens.rules.parser import read_rule_file
from codeowners_lens.rules.prefix import collapse_owner_prefix, restore_owner
from codeowners_lens.table import ResolutionTable

logger = logging.getLogger(__name__)


def _normalize_dir(path: str) -> str:
    return str(Path(path))


class CodeOwnerService:
    """One instance per project session.

    Rule files are loaded lazily: the first lookup for a base directory reads
    its CODEOWNERS file, so :meth:`get_file_code_owner_state` mutates state.
    Call :meth:`ensure_loaded` first when a side-effect-free read is needed.
    Not thread-safe.
    """

    def __init__(self, matcher: GlobMatcher, files_helper: FilesHelper) -> None:
        self._files_helper = files_helper
        self._table = ResolutionTable(matcher)
        self._owner_prefix = ""

    @property
    def owner_prefix(self) -> str:
        return self._owner_prefix

    @property
    def table(self) -> ResolutionTable:
        return self._table

    def get_file_code_owner_state(self, project_base_dir: str, file_path: str) -> FileCodeOwnerState:
        project_base_dir = _normalize_dir(project_base_dir)
        if self._table.has_handle_for(project_base_dir):
            rule = self._match_rule_for_file(file_path)
            if rule is not None:
                return RuleMatched(rule)
        else:
            self._update_code_owner_rules(project_base_dir)

        base_dir_for_file = self._files_helper.get_base_dir(project_base_dir, file_path)
        if self._table.has_handle_for(base_dir_for_file):
            rule = self._match_rule_for_file(file_path)
            if rule is not None:
                return RuleMatched(rule)
        else:
            self._update_code_owner_rules(base_dir_for_file)

        if self._table.is_empty():
            return NoRuleFileFound()

        rule = self._match_rule_for_file(file_path)
        if rule is None:
            return NoMatchInRuleFile()
        return RuleMatched(rule)

    def ensure_loaded(self, project_base_dir: str, file_path: str) -> None:
        project_base_dir = _normalize_dir(project_base_dir)
        if not self._table.has_handle_for(project_base_dir):
            self._update_code_owner_rules(project_base_dir)
        base_dir_for_file = self._files_helper.get_base_dir(project_base_dir, file_path)
        if not self._table.has_handle_for(base_dir_for_file):
            self._update_code_owner_rules(base_dir_for_file)

    def get_true_code_owner(self, code_owner_label: str) -> str:
        return restore_owner(self._owner_prefix, code_owner_label)

    def get_true_owners(self, rule: Rule) -> list[str]:
        for glob in self._table.globs():
            if glob.rule == rule:
                return [restore_owner(glob.owner_prefix, owner) for owner in rule.owners]
        return [self.get_true_code_owner(owner) for owner in rule.owners]

    def refresh_code_owner_rules(self, project_base_dir: str | None) -> None:
        self._table.clear()
        self._update_code_owner_rules(project_base_dir)

    def get_code_owner_file_for_rule(self, rule: Rule) -> Path | None:
        return self._table.reverse_lookup(rule)

    def list_rules(self) -> list[tuple[RuleFileHandle, Rule]]:
        return [
            (handle, glob.rule)
            for handle in self._table.handles()
            for glob in self._table.globs_for(handle)
        ]

    def _match_rule_for_file(self, file_path: str) -> Rule | None:
        glob = self._table.lookup(file_path)
        return glob.rule if glob is not None else None

    def _update_code_owner_rules(self, base_dir_path: str | None) -> None:
        if base_dir_path is None:
            return
        base_dir_path = _normalize_dir(base_dir_path)
        code_owner_file = self._files_helper.find_code_owners_file(base_dir_path)
        if code_owner_file is None:
            logger.debug("No CODEOWNERS file under %s", base_dir_path)
            return

        rules = read_rule_file(code_owner_file)
        if rules is None:
            return
        prefix, rules = collapse_owner_prefix(rules)
        self._owner_prefix = prefix
        logger.debug(
            "Loaded %d rules from %s (owner prefix %r)", len(rules), code_owner_file, prefix
        )

        handle = RuleFileHandle(file=code_owner_file, base_dir_path=base_dir_path)
        self._table.put(handle, rules, base_dir_path, owner_prefix=prefix)
