from pathlib import Path, PurePath
from typing import Optional

from rich.markup import escape
from rich.table import Column, Table

from owns.rules.models import Diagnostic, Rule
from owns.tui.enums import UIStyle


class MatchTable:
    @staticmethod
    def explain_block(path: PurePath, codeowners: Path, rule: Optional[Rule]):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Path", escape(path.as_posix()))
        table.add_row("CODEOWNERS", escape(str(codeowners)))
        if rule is None:
            table.add_row("Rule", f"[{UIStyle.DIM.value}]no matching rule[/{UIStyle.DIM.value}]")
            return table

        table.add_row("Line", str(rule.line_number))
        table.add_row("Pattern", escape(rule.source))
        table.add_row("Glob", escape(rule.glob))
        if rule.is_unowned:
            owners = f"[{UIStyle.YELLOW.value}](unowned)[/{UIStyle.YELLOW.value}]"
        else:
            owners = escape(" ".join(rule.owners))
        table.add_row("Owners", owners)
        return table


class DiagnosticTable:
    @staticmethod
    def diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
        table = Table(
            Column(header="Line", width=6, justify="right"),
            Column(header="Pattern", overflow="ellipsis", max_width=48),
            Column(header="Error", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for item in diagnostics:
            table.add_row(str(item.line_number), escape(item.pattern), escape(item.message))
        return table
