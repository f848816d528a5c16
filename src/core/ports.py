"""Ports (interfaces) used by the core processor.

Ports define the minimal contracts for metadata and message storage adapters
so that the core can be reused outside a git hook.
"""

from __future__ import annotations

from typing import Protocol

from core.models import CommitMetadata


class MetadataPort(Protocol):
    """Source of the commit metadata hashed into a Change-Id."""

    def load(self) -> CommitMetadata:
        ...


class MessageStorePort(Protocol):
    """Where the draft commit message is read from and written back to."""

    def read(self) -> str:
        ...

    def write(self, text: str) -> None:
        ...
