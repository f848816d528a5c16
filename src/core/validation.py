"""Change-Id validation for messages that should already be tagged."""

from __future__ import annotations

import re
from typing import List

from core.footers import classify
from core.message_parser import split_paragraphs, strip_scaffolding
from core.models import CHANGE_ID_KEY

CHANGE_ID_LINE_RE = re.compile(r"^Change-Id: I[0-9a-f]{40}$")


def check_change_id(raw_text: str, comment_char: str = "#") -> List[str]:
    """Return a list of problems with the message's Change-Id (empty if valid)."""

    lines = [line for line, _ in strip_scaffolding(raw_text, comment_char)]
    candidates = [line for line in lines if line.strip().startswith(f"{CHANGE_ID_KEY}:")]
    if not candidates:
        return ["Missing Change-Id line in commit message."]

    problems: List[str] = []
    if len(candidates) > 1:
        problems.append("Multiple Change-Id lines found.")

    for line in candidates:
        if line != line.strip():
            problems.append("Change-Id line contains leading or trailing whitespace.")
        elif not CHANGE_ID_LINE_RE.match(line):
            problems.append(f"Invalid Change-Id format: {line}")

    _, footer_block = classify(split_paragraphs(lines))
    if footer_block is None or not footer_block.has_change_id:
        problems.append("Change-Id is not part of the final footer block.")
    return problems
