"""Git metadata adapter.

Implements the core MetadataPort by asking the git plumbing in the current
repository for the staged tree, HEAD and the configured identities.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional

from core.errors import GitCommandError
from core.idents import parse_ident
from core.models import CommitMetadata

LOGGER = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class GitMetadataSource:
    """Collects commit metadata with short-lived git subprocesses."""

    def __init__(self, cwd: Optional[str] = None, runner: Runner = subprocess.run) -> None:
        self._cwd = cwd
        self._runner = runner

    def _git(self, *args: str, required: bool = True) -> Optional[str]:
        command = ["git", *args]
        result = self._runner(command, capture_output=True, text=True, cwd=self._cwd)
        if result.returncode != 0:
            if required:
                raise GitCommandError(command, result.returncode, result.stderr or "")
            LOGGER.debug("%s exited with %s", " ".join(command), result.returncode)
            return None
        return result.stdout.strip()

    def load(self) -> CommitMetadata:
        """Return tree, first parent, author and committer for the pending commit."""

        tree_id = self._git("write-tree")
        # Root commits have no HEAD yet.
        parent_id = self._git("rev-parse", "--verify", "-q", "HEAD^0", required=False) or None
        author = parse_ident(self._git("var", "GIT_AUTHOR_IDENT") or "")
        committer = parse_ident(self._git("var", "GIT_COMMITTER_IDENT") or "")
        return CommitMetadata(
            tree_id=tree_id or "",
            parent_id=parent_id,
            author=author,
            committer=committer,
        )

    def comment_char(self) -> str:
        """Return git's core.commentChar, defaulting to `#`."""

        value = self._git("config", "--get", "core.commentChar", required=False)
        if not value or value == "auto":
            return "#"
        return value[0]

    def create_change_id_enabled(self) -> bool:
        """Return False only when gerrit.createChangeId is explicitly false."""

        value = self._git("config", "--bool", "--get", "gerrit.createChangeId", required=False)
        return value != "false"
