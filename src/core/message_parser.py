"""Commit message parsing (core domain).

Interactive commit tools append comments, a scissors line or a full
`commit -v` diff below the real message. That scaffolding is removed here so
paragraph and footer analysis only ever sees message content.
"""

from __future__ import annotations

from typing import List, Tuple

from core.footers import is_footer_block
from core.models import Paragraph, ParsedMessage

DIFF_PREFIX = "diff --git "
SCISSORS_SUFFIX = " ------------------------ >8 ------------------------"


def detect_newline(raw_text: str) -> str:
    return "\r\n" if "\r\n" in raw_text else "\n"


def _split_lines(raw_text: str, newline: str) -> List[Tuple[str, bool]]:
    """Return (line, terminated) pairs with terminators removed."""

    pieces = raw_text.split("\n")
    result: List[Tuple[str, bool]] = []
    for index, piece in enumerate(pieces):
        terminated = index < len(pieces) - 1
        if not terminated and piece == "":
            break
        if newline == "\r\n" and terminated and piece.endswith("\r"):
            piece = piece[:-1]
        result.append((piece, terminated))
    return result


def strip_scaffolding(raw_text: str, comment_char: str = "#") -> List[Tuple[str, bool]]:
    """Drop comment lines and cut at the scissors line or a diff preview."""

    newline = detect_newline(raw_text)
    scissors = comment_char + SCISSORS_SUFFIX
    kept: List[Tuple[str, bool]] = []
    for line, terminated in _split_lines(raw_text, newline):
        if line.startswith(DIFF_PREFIX) or line == scissors:
            break
        if line.startswith(comment_char):
            continue
        kept.append((line, terminated))
    return kept


def split_paragraphs(lines: List[str]) -> Tuple[Paragraph, ...]:
    """Group lines into paragraphs; whitespace-only lines are boundaries."""

    paragraphs: List[Paragraph] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
            continue
        if current:
            paragraphs.append(tuple(current))
            current = []
    if current:
        paragraphs.append(tuple(current))
    return tuple(paragraphs)


def parse(raw_text: str, comment_char: str = "#") -> ParsedMessage:
    """Normalize raw commit message text into a ParsedMessage."""

    newline = detect_newline(raw_text)
    kept = strip_scaffolding(raw_text, comment_char)
    paragraphs = split_paragraphs([line for line, _ in kept])

    trailing_newline = True
    for line, terminated in reversed(kept):
        if line.strip():
            trailing_newline = terminated
            break

    return ParsedMessage(
        paragraphs=paragraphs,
        newline=newline,
        trailing_newline=trailing_newline,
        has_footer_block=is_footer_block(paragraphs),
    )
