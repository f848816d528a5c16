from __future__ import annotations

from core.validation import check_change_id

VALID = "Change-Id: I7fc3876fee63c766a2063df97fbe04a2dddd8d7c"
OTHER = "Change-Id: I3251906b99dda598a58a6346d8126237ee1ea800"


def test_valid_message_has_no_problems() -> None:
    assert check_change_id(f"a\n\nBug: 42\n{VALID}\nSigned-off-by: A <a@x>\n") == []


def test_scaffolding_is_ignored() -> None:
    raw = f"a\n\n{VALID}\n\n# Please enter the commit message\ndiff --git a/x b/x\n{OTHER}\n"
    assert check_change_id(raw) == []


def test_missing_change_id() -> None:
    assert check_change_id("a\n\nSigned-off-by: A <a@x>\n") == ["Missing Change-Id line in commit message."]


def test_multiple_change_ids() -> None:
    problems = check_change_id(f"a\n\n{VALID}\n{OTHER}\n")
    assert problems == ["Multiple Change-Id lines found."]


def test_whitespace_around_change_id() -> None:
    problems = check_change_id(f"a\n\n{VALID} \n")
    assert "Change-Id line contains leading or trailing whitespace." in problems


def test_invalid_format() -> None:
    problems = check_change_id("a\n\nChange-Id: Ideadbeef\n")
    assert problems == ["Invalid Change-Id format: Change-Id: Ideadbeef"]


def test_change_id_outside_footer_block() -> None:
    problems = check_change_id(f"a\n\n{VALID}\n\nmore text\n")
    assert problems == ["Change-Id is not part of the final footer block."]
