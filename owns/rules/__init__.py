from owns.rules.compiler import compile_line, compile_rules, normalize_pattern
from owns.rules.models import CompileResult, Diagnostic, Rule
from owns.rules.ruleset import RuleSet

__all__ = [
    "CompileResult",
    "Diagnostic",
    "Rule",
    "RuleSet",
    "compile_line",
    "compile_rules",
    "normalize_pattern",
]
