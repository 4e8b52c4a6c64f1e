from typing import Final


CODEOWNERS_FILENAME: Final[str] = "CODEOWNERS"
GIT_DIRNAME: Final[str] = ".git"

# Checked in order; the first existing file wins.
CODEOWNERS_DIRNAMES: Final[tuple[str, ...]] = (
    ".github",
    "docs",
    "",
)

# A CODEOWNERS file inside one of these directories is rooted one level higher.
NESTED_ROOT_DIRNAMES: Final[tuple[str, ...]] = (
    ".github",
    "docs",
)

COMMENT_PREFIX: Final[str] = "#"
