"""Helpers for working with git identity lines."""

from __future__ import annotations

import re

from core.errors import MalformedMetadata
from core.models import PersonIdent

IDENT_RE = re.compile(r"^(?P<name>.*?) ?<(?P<email>[^<>]*)> (?P<timestamp>-?\d+) (?P<tz>[+-]\d{4})$")
TZ_RE = re.compile(r"^([+-])(\d{2})(\d{2})$")


def format_timezone(tz_offset: int) -> str:
    """Render an offset in minutes the way git does, e.g. -0700."""

    sign = "-" if tz_offset < 0 else "+"
    hours, minutes = divmod(abs(tz_offset), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def parse_timezone(raw: str) -> int:
    """Parse a git offset such as +0530 into minutes."""

    match = TZ_RE.match(raw.strip())
    if not match:
        raise MalformedMetadata(f"Invalid timezone offset: {raw!r}")
    sign, hours, minutes = match.groups()
    total = int(hours) * 60 + int(minutes)
    return -total if sign == "-" else total


def format_ident(ident: PersonIdent) -> str:
    """Return `Name <email> timestamp tz` as used in commit headers."""

    return f"{ident.name} <{ident.email}> {ident.timestamp} {format_timezone(ident.tz_offset)}"


def parse_ident(raw: str) -> PersonIdent:
    """Parse `git var GIT_AUTHOR_IDENT` style output into a PersonIdent."""

    match = IDENT_RE.match(raw.strip())
    if not match:
        raise MalformedMetadata(f"Unparsable identity: {raw.strip()!r}")
    name = match.group("name").strip()
    email = match.group("email").strip()
    if not name or not email:
        raise MalformedMetadata(f"Identity is missing a name or email: {raw.strip()!r}")
    return PersonIdent(
        name=name,
        email=email,
        timestamp=int(match.group("timestamp")),
        tz_offset=parse_timezone(match.group("tz")),
    )
