from codeowners_lens.constants import EMPTY_OWNER, NO_RULE_FILE_LABEL
from codeowners_lens.rules.models import FileCodeOwnerState, NoRuleFileFound, RuleMatched


def owner_label(state: FileCodeOwnerState) -> str:
    """Short label for a status line: first owner plus a count of the rest."""
    if isinstance(state, NoRuleFileFound):
        return NO_RULE_FILE_LABEL
    if not isinstance(state, RuleMatched) or not state.rule.owners:
        return EMPTY_OWNER

    first, *rest = state.rule.owners
    if rest:
        return f"{first} +{len(rest)}"
    return first
