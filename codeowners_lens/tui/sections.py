from rich.console import RenderableType
from rich.panel import Panel

from codeowners_lens.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(
            body,
            title=title,
            title_align="left",
            border_style=style,
            padding=(0, 1),
        )

    @staticmethod
    def note(title: str, body: str, style: str = UIStyle.DIM.value) -> Panel:
        return UISection.wrap(title, body, style=style)
