"""Application entry point for the Change-Id commit-msg hook."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import settings
from adapters.git_metadata import GitMetadataSource
from adapters.message_file import MessageFile
from core.config import HookConfig
from core.errors import GitCommandError, MalformedMetadata
from core.ports import MessageStorePort
from core.processor import ChangeIdProcessor
from core.validation import check_change_id

DEFAULT_REDACT_PATTERNS = ["GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"]


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", False):
        return []
    values = []
    for name in redact_cfg.get("patterns", DEFAULT_REDACT_PATTERNS):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    """Send hook logs to stderr and, optionally, a rotating file under .git."""

    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    formatter = _RedactingFormatter(
        _collect_redaction_values(config),
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # git shows the hook's stderr to the committer.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", ".git/changeid-hook.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path,
                maxBytes=int(file_cfg.get("max_bytes", 1024 * 1024)),
                backupCount=int(file_cfg.get("backup_count", 3)),
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers)


def build_config(git: GitMetadataSource) -> HookConfig:
    """Merge settings with the repository's git config."""

    return HookConfig(
        enabled=settings.ENABLED and git.create_change_id_enabled(),
        comment_char=settings.COMMENT_CHAR or git.comment_char(),
        hash_strategy=settings.HASH_STRATEGY,
    )


def _check(store: MessageStorePort, config: HookConfig) -> int:
    problems = check_change_id(store.read(), config.comment_char)
    for problem in problems:
        print(problem, file=sys.stderr)
    return 1 if problems else 0


def run(
    message_path: str,
    check: bool = False,
    git: Optional[GitMetadataSource] = None,
    store: Optional[MessageStorePort] = None,
) -> int:
    """Tag (or check) the message file; returns the process exit status."""

    logger = logging.getLogger(__name__)
    git = git or GitMetadataSource()
    store = store or MessageFile(message_path)

    try:
        config = build_config(git)
        if check:
            return _check(store, config)

        result = ChangeIdProcessor(git, config).handle(store.read())
    except (MalformedMetadata, GitCommandError, FileNotFoundError, ValueError) as error:
        # Abort the commit; the message file is left as git wrote it.
        logger.error("Cannot add Change-Id: %s", error)
        print(f"commit-msg: {error}", file=sys.stderr)
        return 1

    if result.changed:
        store.write(result.text)
        logger.info("Wrote %s to %s", result.change_id, message_path)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="changeid-hook",
        description="Add a Change-Id footer to a commit message file.",
    )
    parser.add_argument("message_file", help="Path of the commit message file git passes to the hook")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the existing Change-Id instead of adding one",
    )

    args = parser.parse_args(argv)
    _configure_logging()
    return run(args.message_file, check=args.check)


if __name__ == "__main__":
    sys.exit(main())
