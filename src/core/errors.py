"""Errors raised by the core and adapters."""

from __future__ import annotations


class MalformedMetadata(ValueError):
    """Commit metadata is missing a required identity field or is unparsable."""


class GitCommandError(RuntimeError):
    """A mandatory git command failed while collecting commit metadata."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.command = args
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"{' '.join(args)} failed: {detail}")
