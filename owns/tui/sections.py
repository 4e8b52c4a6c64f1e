from pathlib import Path
from typing import Optional

from rich.console import RenderableType
from rich.panel import Panel

from owns.rules.models import Rule
from owns.tui.enums import UIStyle


class UISection:
    """Panels shown on stderr around the plain owner list."""

    @staticmethod
    def _panel(title: str, body: RenderableType, style: str, codeowners: Optional[Path]) -> Panel:
        subtitle = str(codeowners) if codeowners is not None else None
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def ownership(body: RenderableType, rule: Optional[Rule], codeowners: Optional[Path] = None) -> Panel:
        if rule is None:
            style = UIStyle.DIM.value
        elif rule.is_unowned:
            style = UIStyle.YELLOW.value
        else:
            style = UIStyle.GREEN.value
        return UISection._panel("ownership", body, style, codeowners)

    @staticmethod
    def invalid_patterns(body: RenderableType, codeowners: Path) -> Panel:
        return UISection._panel("invalid patterns", body, UIStyle.RED.value, codeowners)

    @staticmethod
    def notice(body: str) -> Panel:
        return UISection._panel("ownership", body, UIStyle.DIM.value, None)
