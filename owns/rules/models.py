"""Ownership rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

from pathspec.pattern import Pattern


def as_match_path(path: str | PurePath) -> str:
    """Return *path* as the POSIX string the compiled globs are matched against."""
    text = path.as_posix() if isinstance(path, PurePath) else str(path)
    while text.startswith("./"):
        text = text[2:]
    return text.lstrip("/")


@dataclass(frozen=True)
class Rule:
    source: str
    glob: str
    owners: tuple[str, ...]
    line_number: int
    pattern: Pattern = field(repr=False, compare=False)

    def matches(self, path: str | PurePath) -> bool:
        return self.pattern.match_file(as_match_path(path)) is not None

    @property
    def is_unowned(self) -> bool:
        return not self.owners


@dataclass(frozen=True)
class Diagnostic:
    line_number: int
    pattern: str
    message: str

    def __str__(self) -> str:
        return (
            f"Invalid CODEOWNERS pattern '{self.pattern}' "
            f"on line {self.line_number}: {self.message}"
        )


@dataclass(frozen=True)
class CompileResult:
    rules: tuple[Rule, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    def is_valid(self) -> bool:
        return not self.diagnostics
