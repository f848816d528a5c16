"""Core configuration dataclasses.

We keep config parsing outside the core, but this dataclass defines the
shape the core expects so the app layer can build it from settings and git.
"""

from __future__ import annotations

from dataclasses import dataclass

HASH_STRATEGIES = ("git-object", "plain")


@dataclass(frozen=True)
class HookConfig:
    """Settings for the Change-Id processor."""

    enabled: bool = True
    comment_char: str = "#"
    hash_strategy: str = "git-object"

    def __post_init__(self) -> None:
        if self.hash_strategy not in HASH_STRATEGIES:
            raise ValueError(f"Unsupported hash strategy: {self.hash_strategy}")
        if len(self.comment_char) != 1:
            raise ValueError(f"Comment char must be a single character: {self.comment_char!r}")
