from __future__ import annotations

import subprocess
from typing import Optional

import pytest

from adapters.git_metadata import GitMetadataSource
from core.errors import GitCommandError, MalformedMetadata

TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"
HEAD = "9f9f0c6ab0c1a6a4b1d3c1d8e1e5f1a2b3c4d5e6"
AUTHOR = "J. Author <ja@example.com> 1250379778 -0330"
COMMITTER = "J. Committer <jc@example.com> 1250379779 +0100"


class FakeRunner:
    def __init__(self, responses: dict[tuple[str, ...], tuple[int, str]]) -> None:
        self._responses = responses
        self.calls: list[list[str]] = []

    def __call__(self, command, capture_output=True, text=True, cwd: Optional[str] = None):
        self.calls.append(command)
        returncode, stdout = self._responses.get(tuple(command[1:]), (1, ""))
        stderr = "" if returncode == 0 else "fatal: not available\n"
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr=stderr)


def _responses(**overrides: tuple[int, str]) -> dict[tuple[str, ...], tuple[int, str]]:
    responses = {
        ("write-tree",): (0, f"{TREE}\n"),
        ("rev-parse", "--verify", "-q", "HEAD^0"): (0, f"{HEAD}\n"),
        ("var", "GIT_AUTHOR_IDENT"): (0, f"{AUTHOR}\n"),
        ("var", "GIT_COMMITTER_IDENT"): (0, f"{COMMITTER}\n"),
    }
    for key, value in overrides.items():
        responses[_KEYS[key]] = value
    return responses


_KEYS = {
    "tree": ("write-tree",),
    "head": ("rev-parse", "--verify", "-q", "HEAD^0"),
    "author": ("var", "GIT_AUTHOR_IDENT"),
    "comment_char": ("config", "--get", "core.commentChar"),
    "create": ("config", "--bool", "--get", "gerrit.createChangeId"),
}


def test_load_collects_metadata() -> None:
    source = GitMetadataSource(runner=FakeRunner(_responses()))
    metadata = source.load()
    assert metadata.tree_id == TREE
    assert metadata.parent_id == HEAD
    assert metadata.author is not None
    assert metadata.author.name == "J. Author"
    assert metadata.author.tz_offset == -210
    assert metadata.committer is not None
    assert metadata.committer.timestamp == 1250379779
    assert metadata.committer.tz_offset == 60


def test_root_commit_has_no_parent() -> None:
    source = GitMetadataSource(runner=FakeRunner(_responses(head=(1, ""))))
    assert source.load().parent_id is None


def test_failing_write_tree_raises() -> None:
    source = GitMetadataSource(runner=FakeRunner(_responses(tree=(128, ""))))
    with pytest.raises(GitCommandError) as excinfo:
        source.load()
    assert excinfo.value.command == ["git", "write-tree"]
    assert "fatal: not available" in str(excinfo.value)


def test_unparsable_identity_is_malformed() -> None:
    source = GitMetadataSource(runner=FakeRunner(_responses(author=(0, "nobody\n"))))
    with pytest.raises(MalformedMetadata):
        source.load()


def test_runner_receives_cwd() -> None:
    seen: list[Optional[str]] = []

    def runner(command, capture_output=True, text=True, cwd=None):
        seen.append(cwd)
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    GitMetadataSource(cwd="/tmp/repo", runner=runner).comment_char()
    assert seen == ["/tmp/repo"]


def test_comment_char_defaults() -> None:
    assert GitMetadataSource(runner=FakeRunner(_responses())).comment_char() == "#"
    auto = FakeRunner(_responses(comment_char=(0, "auto\n")))
    assert GitMetadataSource(runner=auto).comment_char() == "#"
    custom = FakeRunner(_responses(comment_char=(0, ";\n")))
    assert GitMetadataSource(runner=custom).comment_char() == ";"


def test_create_change_id_setting() -> None:
    assert GitMetadataSource(runner=FakeRunner(_responses())).create_change_id_enabled()
    enabled = FakeRunner(_responses(create=(0, "true\n")))
    assert GitMetadataSource(runner=enabled).create_change_id_enabled()
    disabled = FakeRunner(_responses(create=(0, "false\n")))
    assert not GitMetadataSource(runner=disabled).create_change_id_enabled()
