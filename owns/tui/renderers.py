from pathlib import Path, PurePath
from typing import Optional

from rich.console import Console

from owns.rules.models import Diagnostic, Rule
from owns.tui.sections import UISection
from owns.tui.tables import DiagnosticTable, MatchTable


class OwnsConsoleUI:
    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def render_owners(self, owners: Optional[tuple[str, ...]]) -> None:
        if not owners:
            return
        for owner in owners:
            # Plain output so the result can be piped.
            self.console.print(owner, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def render_explain(self, path: PurePath, codeowners: Path, rule: Optional[Rule]) -> None:
        self.err_console.print(
            UISection.ownership(MatchTable.explain_block(path, codeowners, rule), rule)
        )

    def render_no_codeowners(self, path: Path) -> None:
        self.err_console.print(UISection.notice(f"No CODEOWNERS file found for {path}"))

    def render_diagnostics(self, codeowners: Path, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            return
        self.err_console.print(
            UISection.invalid_patterns(DiagnosticTable.diagnostics_table(list(diagnostics)), codeowners)
        )
