"""Compile CODEOWNERS lines into ownership rules."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from pathspec.pattern import RegexPattern
from pathspec.patterns.gitignore import GitIgnorePatternError
from pathspec.patterns.gitignore.spec import _DIR_MARK_OPT, GitIgnoreSpecPattern

from owns.constants import COMMENT_PREFIX
from owns.errors import PatternError
from owns.rules.models import CompileResult, Diagnostic, Rule

logger = logging.getLogger(__name__)


def normalize_pattern(token: str) -> str:
    """Translate a CODEOWNERS pattern token into a root-relative glob.

    Tokens that do not start with ``*`` or ``/`` are unanchored and match at any
    depth, so they get a ``**/`` prefix. A leading ``/`` only anchors the pattern
    to the root and is dropped, and a trailing ``/`` is expanded to ``/**`` so a
    directory pattern covers everything beneath it.
    """
    if token.startswith("*") or token.startswith("/"):
        prefixed = token
    else:
        prefixed = f"**/{token}"

    normalized = prefixed[1:] if prefixed.startswith("/") else prefixed
    if normalized.endswith("/"):
        normalized += "**"
    return normalized


def compile_glob(glob: str) -> RegexPattern:
    """Compile a root-relative glob into a whole-path matcher.

    Separators in the path must line up with separators in the glob except
    where ``**`` spans them, so a name does not also match the paths beneath
    it the way a gitignore pattern would.
    """
    if any("**" in segment and segment != "**" for segment in glob.split("/")):
        raise PatternError(glob, "recursive wildcards must form a single path component")

    # The glob is already root-relative; the leading slash stops pathspec from
    # floating single-segment patterns to every depth.
    try:
        pattern = GitIgnoreSpecPattern(f"/{glob}")
    except GitIgnorePatternError as exc:
        raise PatternError(glob, str(exc.__cause__ or exc)) from exc

    if pattern.include is None:
        # pathspec discards unterminated ranges and empty patterns silently.
        raise PatternError(glob, "pattern cannot match any path")

    regex = pattern.regex.pattern
    if regex.endswith(_DIR_MARK_OPT):
        # Drop gitignore's optional "/<anything>" tail so only the path itself matches.
        regex = regex[: -len(_DIR_MARK_OPT)] + "$"
    return RegexPattern(re.compile(regex), include=True)


def compile_line(line: str, line_number: int) -> Optional[Rule]:
    """Compile one raw line; returns None for blank lines and comments."""
    text = line.strip()
    if not text or text.startswith(COMMENT_PREFIX):
        return None

    token, *owners = text.split()
    glob = normalize_pattern(token)
    return Rule(
        source=token,
        glob=glob,
        owners=tuple(owners),
        line_number=line_number,
        pattern=compile_glob(glob),
    )


def compile_rules(lines: Iterable[str]) -> CompileResult:
    """Compile lines in file order, collecting a diagnostic per invalid pattern."""
    rules: list[Rule] = []
    diagnostics: list[Diagnostic] = []

    for line_number, line in enumerate(lines, start=1):
        try:
            rule = compile_line(line, line_number)
        except PatternError as exc:
            diagnostic = Diagnostic(
                line_number=line_number, pattern=exc.pattern, message=exc.detail
            )
            logger.warning("%s", diagnostic)
            diagnostics.append(diagnostic)
            continue
        if rule is not None:
            rules.append(rule)

    return CompileResult(rules=tuple(rules), diagnostics=tuple(diagnostics))
