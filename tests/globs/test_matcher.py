"""Tests for CODEOWNERS glob compilation and matching."""

import pytest

from codeowners_lens.globs.matcher import GlobMatcher, covers_descendants
from codeowners_lens.rules.models import Rule

BASE = "/repo"


def _matches(pattern: str, path: str, base: str = BASE) -> bool:
    matcher = GlobMatcher()
    glob = matcher.compile(Rule(line_number=0, pattern=pattern, owners=("@team",)), base)
    return matcher.matches(glob, path)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/repo/docs/readme.md", True),
        ("/repo/docs/guide/intro.md", True),
        ("/repo/sub/docs/readme.md", False),
        ("/repo/docs.md", False),
    ],
)
def test_anchored_directory_pattern(path: str, expected: bool) -> None:
    assert _matches("/docs/", path) is expected


def test_unanchored_directory_pattern_matches_at_any_depth() -> None:
    assert _matches("docs/", "/repo/docs/readme.md")
    assert _matches("docs/", "/repo/sub/docs/readme.md")


def test_extension_pattern_matches_at_any_depth() -> None:
    assert _matches("*.md", "/repo/file.md")
    assert _matches("*.md", "/repo/any/depth/file.md")
    assert not _matches("*.md", "/repo/file.md.txt")


def test_star_does_not_cross_separator() -> None:
    assert _matches("docs/*", "/repo/docs/getting-started.md")
    assert not _matches("docs/*", "/repo/docs/build/troubleshooting.md")
    assert not _matches("docs/*.md", "/repo/docs/build/troubleshooting.md")
    assert not _matches("docs/?", "/repo/docs/a/b.md")


def test_anchored_star_matches_top_level_only() -> None:
    assert _matches("/*", "/repo/Makefile")
    assert not _matches("/*", "/repo/src/main.py")


def test_directory_star_pattern_covers_subdirectory_contents() -> None:
    assert _matches("docs/*/", "/repo/docs/build/troubleshooting.md")
    assert not _matches("docs/*/", "/repo/docs/getting-started.md")


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("docs/", True),
        ("apps/web", True),
        ("docs/**", True),
        ("*", True),
        ("*.md", True),
        ("docs/*", False),
        ("/*", False),
        ("src/*.py", False),
        ("lib/file[0-9]", False),
    ],
)
def test_covers_descendants(pattern: str, expected: bool) -> None:
    assert covers_descendants(pattern) is expected


def test_double_star_crosses_separators() -> None:
    assert _matches("docs/**/*.md", "/repo/docs/a/b/c.md")
    assert _matches("**/logs", "/repo/deep/logs/app.log")
    assert _matches("docs/**", "/repo/docs/a/b.md")


def test_pattern_with_inner_separator_is_relative_to_base() -> None:
    assert _matches("apps/web", "/repo/apps/web/index.ts")
    assert not _matches("apps/web", "/repo/packages/apps/web/index.ts")


def test_question_mark_matches_one_character() -> None:
    assert _matches("?.go", "/repo/a.go")
    assert not _matches("?.go", "/repo/ab.go")
    assert not _matches("src?main.go", "/repo/src/main.go")


def test_character_class() -> None:
    assert _matches("file[0-9].txt", "/repo/file7.txt")
    assert not _matches("file[0-9].txt", "/repo/filex.txt")
    assert _matches("[ab].py", "/repo/pkg/b.py")


def test_leading_slash_file_pattern() -> None:
    assert _matches("/Makefile", "/repo/Makefile")
    assert not _matches("/Makefile", "/repo/sub/Makefile")


def test_wildcard_matches_everything_under_base() -> None:
    assert _matches("*", "/repo/src/main.py")


def test_path_outside_base_never_matches() -> None:
    assert not _matches("*", "/elsewhere/src/main.py")
    assert not _matches("*", "/repository/main.py")
    assert not _matches("*", "/repo")


def test_parent_segments_cannot_escape_base() -> None:
    assert not _matches("*", "/repo/../etc/passwd")
    assert not _matches("*", "/repo/src/../../etc/passwd")
    assert _matches("*.py", "/repo/src/../main.py")


def test_negated_pattern_never_matches() -> None:
    matcher = GlobMatcher()
    glob = matcher.compile(Rule(0, "!*.md", ("@team",)), BASE)
    assert not glob.is_valid
    assert not matcher.matches(glob, "/repo/readme.md")


def test_unparsable_pattern_is_inert() -> None:
    matcher = GlobMatcher()
    glob = matcher.compile(Rule(0, "src\\", ("@team",)), BASE)
    assert not glob.is_valid
    assert not matcher.matches(glob, "/repo/src/main.py")
    assert not matcher.matches(glob, "/repo/src\\")


def test_equality_uses_base_pattern_and_owners() -> None:
    matcher = GlobMatcher()
    first = matcher.compile(Rule(1, "*.go", ("@go",)), BASE)
    second = matcher.compile(Rule(7, "*.go", ("@go",)), BASE)
    other_base = matcher.compile(Rule(1, "*.go", ("@go",)), "/other")
    other_owner = matcher.compile(Rule(1, "*.go", ("@rust",)), BASE)

    assert first == second
    assert hash(first) == hash(second)
    assert first != other_base
    assert first != other_owner
