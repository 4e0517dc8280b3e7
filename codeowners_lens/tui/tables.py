from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from codeowners_lens.models import OwnerRow, RuleRow
from codeowners_lens.tui.enums import OWNER_STATUS_STYLE, UIStyle
from codeowners_lens.utils import compact_home_path


class OwnerTable:
    @staticmethod
    def summary_block(rows: list[OwnerRow], owner_prefix: str):
        counts = Counter(row.status.value for row in rows)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Paths", str(len(rows)))
        table.add_row("Statuses", "  ".join(chips))
        table.add_row("Owner prefix", escape(owner_prefix) or "(none)")
        return table

    @staticmethod
    def owners_table(rows: list[OwnerRow]) -> Table:
        table = Table(
            Column(header="Path", overflow="ellipsis", max_width=58),
            Column(header="Owner", width=24),
            Column(header="All owners", overflow="fold"),
            Column(header="Rule", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            style = OWNER_STATUS_STYLE.get(row.status, UIStyle.WHITE.value)
            rule = ""
            if row.pattern is not None:
                rule = escape(f"{row.pattern} (line {row.line_number + 1})")
            table.add_row(
                escape(compact_home_path(row.path)),
                f"[{style}]{escape(row.label)}[/{style}]",
                escape(", ".join(row.owners)),
                rule,
            )
        return table


class RulesTable:
    @staticmethod
    def rules_table(rows: list[RuleRow]) -> Table:
        table = Table(
            Column(header="File", overflow="ellipsis", max_width=42),
            Column(header="Line", width=6, justify="right"),
            Column(header="Pattern", overflow="fold"),
            Column(header="Owners", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            table.add_row(
                escape(compact_home_path(row.rule_file)),
                str(row.line_number + 1),
                escape(row.pattern),
                escape(", ".join(row.owners)),
            )
        return table
