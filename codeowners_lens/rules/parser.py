"""Parse CODEOWNERS rule files into ordered rules."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from codeowners_lens.rules.models import Rule

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def parse_rule_line(index: int, line: str) -> Rule | None:
    tokens = [token for token in _WHITESPACE_RE.split(line) if token]
    if len(tokens) < 2:
        return None
    return Rule.from_tokens(index, tokens)


def parse_rules(text: str) -> list[Rule]:
    rules: list[Rule] = []
    for index, line in enumerate(text.splitlines()):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        rule = parse_rule_line(index, line)
        if rule is None:
            logger.debug("Skipping malformed rule on line %d: %r", index, line)
            continue
        rules.append(rule)
    return rules


def read_rule_file(path: Path) -> list[Rule] | None:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Cannot read rule file %s: %s", path, exc)
        return None
    return parse_rules(text)
