"""Resolve CODEOWNERS ownership for files in a repository."""

__version__ = "0.1.0"
