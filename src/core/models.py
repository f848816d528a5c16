"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to git plumbing or any particular way of obtaining commit metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Optional, Tuple

from core.errors import MalformedMetadata

CHANGE_ID_KEY = "Change-Id"
CHANGE_ID_RE = re.compile(r"^I[0-9a-f]{40}$")

Paragraph = Tuple[str, ...]


class FooterKind(Enum):
    """Footer categories that influence where the Change-Id is placed."""

    CHANGE_ID = "change-id"
    SIGNED_OFF_BY = "signed-off-by"
    BUG_OR_ISSUE = "bug-or-issue"
    OTHER = "other"


class ContinuationKind(Enum):
    """Ways a line can continue the footer entry above it."""

    INDENTED = "indented"
    BRACKETED = "bracketed"


class TransformStatus(Enum):
    INSERTED = "inserted"
    ALREADY_TAGGED = "already-tagged"
    EMPTY = "empty"
    DISABLED = "disabled"


def footer_kind_for_key(key: str) -> FooterKind:
    """Classify a footer key; only Change-Id is compared case-sensitively."""

    if key == CHANGE_ID_KEY:
        return FooterKind.CHANGE_ID
    lowered = key.lower()
    if lowered == "signed-off-by":
        return FooterKind.SIGNED_OFF_BY
    if lowered in ("bug", "issue"):
        return FooterKind.BUG_OR_ISSUE
    return FooterKind.OTHER


@dataclass(frozen=True)
class ChangeId:
    """An `I` followed by 40 lowercase hex digits."""

    value: str

    def __post_init__(self) -> None:
        if not CHANGE_ID_RE.match(self.value):
            raise ValueError(f"Invalid Change-Id: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonIdent:
    """Author or committer identity as git records it."""

    name: str
    email: str
    timestamp: int
    tz_offset: int = 0


@dataclass(frozen=True)
class CommitMetadata:
    """Commit inputs supplied by the caller; never derived by the core."""

    tree_id: str
    parent_id: Optional[str]
    author: Optional[PersonIdent]
    committer: Optional[PersonIdent]

    def validate(self) -> None:
        """Raise MalformedMetadata when a required field is missing."""

        if not self.tree_id:
            raise MalformedMetadata("Missing tree id")
        for role, ident in (("author", self.author), ("committer", self.committer)):
            if ident is None:
                raise MalformedMetadata(f"Missing {role} identity")
            if not ident.name:
                raise MalformedMetadata(f"Missing {role} name")
            if not ident.email:
                raise MalformedMetadata(f"Missing {role} email")
            if isinstance(ident.timestamp, bool) or not isinstance(ident.timestamp, int):
                raise MalformedMetadata(f"Invalid {role} timestamp: {ident.timestamp!r}")


@dataclass(frozen=True)
class FooterEntry:
    """One trailer, with any continuation lines that belong to it."""

    key: str
    value: str
    continuations: Tuple[str, ...] = ()
    separator: str = ": "

    @property
    def kind(self) -> FooterKind:
        return footer_kind_for_key(self.key)

    def lines(self) -> Tuple[str, ...]:
        return (f"{self.key}{self.separator}{self.value}",) + self.continuations


@dataclass(frozen=True)
class FooterBlock:
    """Ordered footer entries from the final paragraph of a message."""

    entries: Tuple[FooterEntry, ...]

    @property
    def has_change_id(self) -> bool:
        return any(entry.kind is FooterKind.CHANGE_ID for entry in self.entries)

    def insert(self, index: int, entry: FooterEntry) -> "FooterBlock":
        entries = list(self.entries)
        entries.insert(index, entry)
        return FooterBlock(entries=tuple(entries))

    def lines(self) -> Tuple[str, ...]:
        result: Tuple[str, ...] = ()
        for entry in self.entries:
            result += entry.lines()
        return result


@dataclass(frozen=True)
class ParsedMessage:
    """A commit message split into paragraphs, scaffolding removed.

    Paragraph lines carry no terminators; `newline` and `trailing_newline`
    remember how the input was terminated so rendering can restore it.
    """

    paragraphs: Tuple[Paragraph, ...]
    newline: str = "\n"
    trailing_newline: bool = True
    has_footer_block: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs

    def render(self, paragraphs: Optional[Tuple[Paragraph, ...]] = None) -> str:
        """Join paragraphs with single blank lines using the input's newline."""

        chosen = self.paragraphs if paragraphs is None else paragraphs
        separator = self.newline * 2
        text = separator.join(self.newline.join(lines) for lines in chosen)
        if text and self.trailing_newline:
            text += self.newline
        return text


@dataclass(frozen=True)
class TransformResult:
    """Outcome of one hook invocation."""

    status: TransformStatus
    text: str
    change_id: Optional[ChangeId] = field(default=None)

    @property
    def changed(self) -> bool:
        return self.status is TransformStatus.INSERTED
