"""Tests for the CODEOWNERS line compiler."""

import logging

import pytest

from owns.errors import PatternError
from owns.rules.compiler import compile_line, compile_rules, normalize_pattern


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("foo.txt", "**/foo.txt"),
        ("/foo.txt", "foo.txt"),
        ("docs/", "**/docs/**"),
        ("/docs/", "docs/**"),
        ("src/lib", "**/src/lib"),
        ("*", "*"),
        ("*.go", "*.go"),
        ("**/vendor", "**/vendor"),
        ("/", ""),
    ],
)
def test_normalize_pattern(token: str, expected: str) -> None:
    assert normalize_pattern(token) == expected


def test_blank_and_comment_lines_produce_no_rule() -> None:
    assert compile_line("", 1) is None
    assert compile_line("   \t  ", 2) is None
    assert compile_line("# owners of everything", 3) is None
    assert compile_line("    # indented comment", 4) is None


def test_owners_are_kept_verbatim_and_in_order() -> None:
    rule = compile_line("  *.py\t@b  @a   dev@example.com @b  ", 7)
    assert rule is not None
    assert rule.source == "*.py"
    assert rule.owners == ("@b", "@a", "dev@example.com", "@b")
    assert rule.line_number == 7


def test_pattern_without_owners_is_still_a_rule() -> None:
    rule = compile_line("*.secret", 1)
    assert rule is not None
    assert rule.owners == ()
    assert rule.is_unowned
    assert rule.matches("key.secret")


def test_unanchored_pattern_matches_at_any_depth() -> None:
    rule = compile_line("foo.txt @a", 1)
    assert rule.matches("foo.txt")
    assert rule.matches("a/b/foo.txt")
    assert not rule.matches("a/b/foo.txt.bak")


def test_anchored_pattern_matches_only_at_root() -> None:
    rule = compile_line("/foo.txt @a", 1)
    assert rule.matches("foo.txt")
    assert not rule.matches("a/foo.txt")


def test_directory_pattern_matches_everything_beneath() -> None:
    rule = compile_line("docs/ @docs", 1)
    assert rule.glob == "**/docs/**"
    assert rule.matches("docs/readme.md")
    assert rule.matches("docs/sub/readme.md")
    assert rule.matches("site/docs/index.md")
    assert not rule.matches("documentation/readme.md")


def test_anchored_directory_pattern() -> None:
    rule = compile_line("/docs/ @docs", 1)
    assert rule.matches("docs/readme.md")
    assert not rule.matches("site/docs/index.md")


def test_star_stays_within_one_segment() -> None:
    rule = compile_line("*.go @go", 1)
    assert rule.glob == "*.go"
    assert rule.matches("main.go")
    assert not rule.matches("cmd/main.go")


def test_lone_star_matches_root_level_paths_only() -> None:
    rule = compile_line("* @everyone", 1)
    assert rule.glob == "*"
    assert rule.matches("README.md")
    assert not rule.matches("a/b/c.txt")


def test_double_star_matches_every_path() -> None:
    rule = compile_line("** @everyone", 1)
    assert rule.matches("README.md")
    assert rule.matches("a/b/c.txt")


def test_globstar_spans_segments() -> None:
    rule = compile_line("/src/**/test_*.py @qa", 1)
    assert rule.matches("src/test_a.py")
    assert rule.matches("src/pkg/sub/test_b.py")
    assert not rule.matches("lib/test_a.py")


def test_question_mark_matches_one_character() -> None:
    rule = compile_line("/file?.txt @a", 1)
    assert rule.matches("file1.txt")
    assert not rule.matches("file10.txt")
    assert not rule.matches("file.txt")


def test_name_without_trailing_slash_does_not_match_descendants() -> None:
    rule = compile_line("/build @ci", 1)
    assert rule.matches("build")
    assert not rule.matches("build/out.o")
    assert not rule.matches("build/out/app.o")


@pytest.mark.parametrize(
    ("line", "path"),
    [
        ("vendor @v", "x/vendor/lib.go"),
        ("**/vendor @v", "x/vendor/lib.go"),
        ("/src/*.py @py", "src/pkg/mod.py"),
        ("docs/*.md @docs", "docs/guide/intro.md"),
        ("/a?c @a", "a/c"),
    ],
)
def test_separators_must_line_up(line: str, path: str) -> None:
    assert not compile_line(line, 1).matches(path)


def test_unanchored_name_matches_the_name_at_any_depth() -> None:
    rule = compile_line("vendor @v", 1)
    assert rule.matches("vendor")
    assert rule.matches("x/vendor")
    assert rule.matches("x/y/vendor")


@pytest.mark.parametrize(
    "line",
    [
        "lib/[unterminated @a",
        "trailing\\ @a",
        "/",
        "/src/foo** @a",
        "*** @a",
        "a/**b/c @a",
    ],
)
def test_malformed_pattern_raises(line: str) -> None:
    with pytest.raises(PatternError):
        compile_line(line, 1)


def test_compile_rules_collects_diagnostics_and_continues(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="owns.rules.compiler")
    lines = [
        "# header",
        "*.py @py",
        "lib/[oops @lib",
        "",
        "/docs/ @docs",
        "bad\\ @bad",
    ]

    result = compile_rules(lines)

    assert [rule.source for rule in result.rules] == ["*.py", "/docs/"]
    assert [rule.line_number for rule in result.rules] == [2, 5]
    assert not result.is_valid()
    assert [item.line_number for item in result.diagnostics] == [3, 6]
    assert result.diagnostics[0].pattern == "**/lib/[oops"
    assert "line 3" in caplog.text
    assert "**/lib/[oops" in caplog.text


def test_compile_rules_on_comments_only() -> None:
    result = compile_rules(["# a", "", "   ", "\t# b"])
    assert result.rules == ()
    assert result.is_valid()


def test_misplaced_globstar_is_reported() -> None:
    result = compile_rules(["*.py @py", "/src/foo** @a"])
    assert [rule.source for rule in result.rules] == ["*.py"]
    assert result.diagnostics[0].pattern == "src/foo**"
    assert "single path component" in result.diagnostics[0].message
