"""Precedence-ordered rule lookup for one CODEOWNERS file."""

from __future__ import annotations

from pathlib import PurePath
from typing import Iterable, Iterator, Optional

from owns.rules.models import Rule, as_match_path


class RuleSet:
    """Immutable rules in precedence order.

    Index 0 holds the highest-precedence rule, which is the one declared last
    in the file. Reversing once on load lets a first-match scan implement
    "last matching rule wins".
    """

    __slots__ = ("_rules",)

    def __init__(self, rules_in_precedence_order: Iterable[Rule] = ()) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules_in_precedence_order)

    @classmethod
    def load(cls, rules_in_file_order: Iterable[Rule]) -> "RuleSet":
        return cls(reversed(tuple(rules_in_file_order)))

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(rules={len(self._rules)})"

    def rule_for(self, path: str | PurePath) -> Optional[Rule]:
        target = as_match_path(path)
        for rule in self._rules:
            if rule.pattern.match_file(target) is not None:
                return rule
        return None

    def owner_for(self, path: str | PurePath) -> Optional[tuple[str, ...]]:
        """Owners of *path*; ``()`` when unowned, ``None`` when no rule matches."""
        rule = self.rule_for(path)
        if rule is None:
            return None
        return rule.owners
