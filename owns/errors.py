from pathlib import Path


class OwnsAppError(Exception):
    """Base user-facing application error."""


class OwnersFileError(OwnsAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingOwnersFileError(OwnersFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="CODEOWNERS file not found")


class UnreadableOwnersFileError(OwnersFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read CODEOWNERS file ({detail})")


class TargetNotFoundError(OwnsAppError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File does not exist: {path}")


class NotInRepositoryError(OwnsAppError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File is not in a git repository: {path}")


class PatternError(ValueError):
    """A CODEOWNERS pattern that cannot be compiled into a glob."""

    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid CODEOWNERS pattern '{pattern}': {detail}")
