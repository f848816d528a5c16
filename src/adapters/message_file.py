"""Commit message file adapter.

Implements the core MessageStorePort over the file git passes to the
commit-msg hook. Newline translation is disabled so CRLF messages survive, and
bytes that are not UTF-8 (git's i18n.commitEncoding) pass through unchanged.
"""

from __future__ import annotations

import os


class MessageFile:
    """Thin file wrapper that satisfies the MessageStorePort contract."""

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def read(self) -> str:
        if not os.path.exists(self._path):
            raise FileNotFoundError(f"Commit message file not found: {self._path}")
        with open(self._path, "r", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()

    def write(self, text: str) -> None:
        with open(self._path, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(text)
