"""Change-Id computation (core domain).

The id is the SHA-1 of a synthetic commit built from the caller's metadata
and the message body. Footers never take part, so adding or removing a
Signed-off-by line does not change the id of an otherwise identical commit.
"""

from __future__ import annotations

import hashlib
from typing import Sequence

from core.idents import format_ident
from core.models import ChangeId, CommitMetadata, Paragraph


def canonical_message(body_paragraphs: Sequence[Paragraph]) -> str:
    """Return the body as `git stripspace` would leave it."""

    if not body_paragraphs:
        return ""
    text = "\n\n".join("\n".join(line.rstrip() for line in lines) for lines in body_paragraphs)
    return text + "\n"


def build_commit_payload(metadata: CommitMetadata, body_paragraphs: Sequence[Paragraph]) -> str:
    """Serialize the synthetic commit used only as hash input."""

    metadata.validate()
    headers = [f"tree {metadata.tree_id}"]
    if metadata.parent_id:
        headers.append(f"parent {metadata.parent_id}")
    headers.append(f"author {format_ident(metadata.author)}")
    headers.append(f"committer {format_ident(metadata.committer)}")
    return "\n".join(headers) + "\n\n" + canonical_message(body_paragraphs)


def hash_payload(payload: str, strategy: str) -> str:
    """Return the hex digest of the payload for the given strategy."""

    # surrogateescape keeps non-UTF-8 message bytes as they were on disk.
    data = payload.encode("utf-8", "surrogateescape")
    if strategy == "git-object":
        # Same bytes `git hash-object -t commit --stdin` would hash.
        data = b"commit " + str(len(data)).encode("ascii") + b"\0" + data
    elif strategy != "plain":
        raise ValueError(f"Unsupported hash strategy: {strategy}")
    return hashlib.sha1(data).hexdigest()


def compute(
    metadata: CommitMetadata,
    body_paragraphs: Sequence[Paragraph],
    strategy: str = "git-object",
) -> ChangeId:
    """Derive the Change-Id for a commit; raises MalformedMetadata."""

    payload = build_commit_payload(metadata, body_paragraphs)
    return ChangeId(f"I{hash_payload(payload, strategy)}")
