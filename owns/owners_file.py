"""Load a CODEOWNERS file from disk and answer lookups relative to its root."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Optional

from owns.constants import NESTED_ROOT_DIRNAMES
from owns.errors import MissingOwnersFileError, UnreadableOwnersFileError
from owns.rules.compiler import compile_rules
from owns.rules.models import Diagnostic, Rule
from owns.rules.ruleset import RuleSet


def owners_root(path: Path) -> Path:
    directory = path.parent
    if directory.name in NESTED_ROOT_DIRNAMES:
        return directory.parent
    return directory


class OwnersFile:
    def __init__(
        self, path: Path, ruleset: RuleSet, diagnostics: tuple[Diagnostic, ...] = ()
    ) -> None:
        self._path = path
        self._ruleset = ruleset
        self._diagnostics = diagnostics

    @classmethod
    def parse(cls, path: Path, text: str) -> "OwnersFile":
        result = compile_rules(text.splitlines())
        return cls(path, RuleSet.load(result.rules), result.diagnostics)

    @classmethod
    def load(cls, path: Path) -> "OwnersFile":
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise MissingOwnersFileError(path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise UnreadableOwnersFileError(path, str(exc)) from exc
        return cls.parse(path, text)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def root(self) -> Path:
        return owners_root(self._path)

    @property
    def ruleset(self) -> RuleSet:
        return self._ruleset

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self._diagnostics

    def relative_path(self, path: str | PurePath) -> PurePath:
        candidate = PurePath(path)
        if not candidate.is_absolute():
            return candidate
        try:
            return candidate.relative_to(self.root)
        except ValueError:
            return candidate

    def rule_for(self, path: str | PurePath) -> Optional[Rule]:
        return self._ruleset.rule_for(self.relative_path(path))

    def owner_for(self, path: str | PurePath) -> Optional[tuple[str, ...]]:
        return self._ruleset.owner_for(self.relative_path(path))
