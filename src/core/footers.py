"""Footer block recognition (core domain).

Only the final paragraph of a message can be a footer block, and only when
every line in it is either a `Key: value` trailer or a continuation of the
trailer above it. Line-level checks are plain predicates; the block scan
composes them without any backtracking.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from core.models import ContinuationKind, FooterBlock, FooterEntry, Paragraph

TRAILER_RE = re.compile(r"^([A-Za-z][A-Za-z0-9-]*)(:\s)(.*)$", re.DOTALL)


def trailer_key(line: str) -> Optional[str]:
    """Return the trailer key if the line starts a footer entry.

    The colon must be followed by whitespace, so `http://example.com/` and a
    bare `FakeLine:` are not trailers.
    """

    match = TRAILER_RE.match(line)
    if not match:
        return None
    return match.group(1)


def continuation_kind(line: str) -> Optional[ContinuationKind]:
    """Return how the line continues the previous entry, if it does."""

    if line[:1].isspace():
        return ContinuationKind.INDENTED
    if line.startswith("["):
        return ContinuationKind.BRACKETED
    return None


def _entry_from_match(match: "re.Match[str]") -> FooterEntry:
    return FooterEntry(key=match.group(1), separator=match.group(2), value=match.group(3))


def segment_footer(lines: Sequence[str]) -> Optional[FooterBlock]:
    """Group trailer lines with their continuations.

    Returns None as soon as a line is neither a trailer nor a continuation of
    one; a single prose line disqualifies the whole paragraph.
    """

    entries: List[FooterEntry] = []
    for line in lines:
        match = TRAILER_RE.match(line)
        if match:
            entries.append(_entry_from_match(match))
            continue
        if entries and continuation_kind(line) is not None:
            last = entries[-1]
            entries[-1] = FooterEntry(
                key=last.key,
                value=last.value,
                continuations=last.continuations + (line,),
                separator=last.separator,
            )
            continue
        return None
    if not entries:
        return None
    return FooterBlock(entries=tuple(entries))


def is_footer_block(paragraphs: Sequence[Paragraph]) -> bool:
    """Return True when the last paragraph qualifies as a footer block."""

    # The subject paragraph is never a footer, even if it reads `fix: thing`.
    if len(paragraphs) < 2:
        return False
    return segment_footer(paragraphs[-1]) is not None


def classify(paragraphs: Sequence[Paragraph]) -> Tuple[Tuple[Paragraph, ...], Optional[FooterBlock]]:
    """Split paragraphs into body text and an optional footer block."""

    body = tuple(paragraphs)
    if len(body) < 2:
        return body, None
    block = segment_footer(body[-1])
    if block is None:
        return body, None
    return body[:-1], block
