from rich.console import Console

from codeowners_lens.models import OwnerRow, RuleRow
from codeowners_lens.tui.enums import UIStyle
from codeowners_lens.tui.sections import UISection
from codeowners_lens.tui.tables import OwnerTable, RulesTable
from codeowners_lens.utils import compact_home_path


class OwnersConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_owners(self, rows: list[OwnerRow], owner_prefix: str) -> None:
        self.console.print(
            UISection.wrap(
                "ownership overview",
                OwnerTable.summary_block(rows, owner_prefix=owner_prefix),
                style=UIStyle.BLUE.value,
            )
        )
        if not rows:
            self.console.print(
                UISection.note("owners", "No paths given.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "owners",
                OwnerTable.owners_table(rows),
                style=UIStyle.CYAN.value,
            )
        )

    def render_rules(self, rows: list[RuleRow]) -> None:
        if not rows:
            self.console.print(
                UISection.note(
                    "rules",
                    "No CODEOWNERS rules found.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(
            UISection.wrap(
                "rules",
                RulesTable.rules_table(rows),
                style=UIStyle.BLUE.value,
            )
        )

    def render_missing_rule_file(self, project_dir: str, candidates: tuple[str, ...]) -> None:
        looked_in = "\n".join(f"- {candidate}" for candidate in candidates)
        self.console.print(
            UISection.note(
                "missing",
                f"No CODEOWNERS file found for {compact_home_path(project_dir)}.\n{looked_in}",
                style=UIStyle.RED.value,
            )
        )
