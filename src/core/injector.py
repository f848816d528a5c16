"""Change-Id footer insertion (core domain)."""

from __future__ import annotations

from typing import Optional, Sequence

from core.models import (
    CHANGE_ID_KEY,
    ChangeId,
    FooterBlock,
    FooterEntry,
    FooterKind,
    Paragraph,
    ParsedMessage,
)


def insertion_index(block: FooterBlock) -> int:
    """Return where the Change-Id entry goes in an existing block.

    It follows a leading run of Bug/Issue entries, otherwise it comes first.
    Bug/Issue entries later in the block do not move it.
    """

    index = 0
    while index < len(block.entries) and block.entries[index].kind is FooterKind.BUG_OR_ISSUE:
        index += 1
    return index


def inject(
    parsed: ParsedMessage,
    body_paragraphs: Sequence[Paragraph],
    footer_block: Optional[FooterBlock],
    change_id: ChangeId,
) -> str:
    """Render the message with a Change-Id footer added."""

    entry = FooterEntry(key=CHANGE_ID_KEY, value=str(change_id))
    if footer_block is None:
        footer_block = FooterBlock(entries=(entry,))
    else:
        footer_block = footer_block.insert(insertion_index(footer_block), entry)
    paragraphs = tuple(body_paragraphs) + (footer_block.lines(),)
    return parsed.render(paragraphs)
