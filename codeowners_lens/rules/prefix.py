"""Shared owner prefix detection.

Owners in a CODEOWNERS file usually share an organisation segment
(``@org/team-a``, ``@org/team-b``). The prefix is stripped for compact
display and restored on demand with :func:`restore_owner`.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from codeowners_lens.rules.models import Rule


def find_common_owner_prefix(rules: Iterable[Rule]) -> str:
    owners = [owner for rule in rules for owner in rule.owners]
    if not owners:
        return ""
    common = os.path.commonprefix(owners)
    # Only whole path segments are stripped.
    last_slash = common.rfind("/")
    if last_slash == -1:
        return ""
    return common[: last_slash + 1]


def collapse_owner_prefix(rules: Iterable[Rule]) -> tuple[str, list[Rule]]:
    rules = list(rules)
    prefix = find_common_owner_prefix(rules)
    if not prefix.strip():
        return prefix, rules
    return prefix, [rule.without_owner_prefix(prefix) for rule in rules]


def restore_owner(prefix: str, label: str) -> str:
    return prefix + label
