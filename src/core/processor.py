"""Core Change-Id processing pipeline.

This module is integration-agnostic. It only relies on a metadata port,
enabling other callers than the git hook without changes here.
"""

from __future__ import annotations

import logging
from typing import Optional

from core import change_id as change_id_computer
from core.config import HookConfig
from core.footers import classify
from core.injector import inject
from core.message_parser import parse
from core.models import CommitMetadata, TransformResult, TransformStatus
from core.ports import MetadataPort

LOGGER = logging.getLogger(__name__)


class StaticMetadataSource:
    """Metadata port over values the caller already has."""

    def __init__(self, metadata: CommitMetadata) -> None:
        self._metadata = metadata

    def load(self) -> CommitMetadata:
        return self._metadata


class ChangeIdProcessor:
    """Orchestrates parsing, classification, id computation, and injection."""

    def __init__(self, metadata_source: MetadataPort, config: Optional[HookConfig] = None) -> None:
        self._metadata_source = metadata_source
        self._config = config or HookConfig()

    def handle(self, raw_text: str) -> TransformResult:
        """Return the message with a Change-Id, or the input untouched."""

        if not self._config.enabled:
            LOGGER.info("Change-Id creation disabled, leaving message untouched")
            return TransformResult(status=TransformStatus.DISABLED, text=raw_text)

        parsed = parse(raw_text, self._config.comment_char)
        if parsed.is_empty:
            LOGGER.info("Empty message, nothing to tag")
            return TransformResult(status=TransformStatus.EMPTY, text=raw_text)

        body, footer_block = classify(parsed.paragraphs)
        if footer_block is not None and footer_block.has_change_id:
            LOGGER.info("Message already carries a Change-Id")
            return TransformResult(status=TransformStatus.ALREADY_TAGGED, text=raw_text)

        # Metadata is only fetched once we know an id is needed; a failure
        # here aborts before any text is produced.
        metadata = self._metadata_source.load()
        new_id = change_id_computer.compute(metadata, body, self._config.hash_strategy)
        text = inject(parsed, body, footer_block, new_id)
        LOGGER.info("Inserted %s", new_id)
        return TransformResult(status=TransformStatus.INSERTED, text=text, change_id=new_id)


def insert_change_id(
    raw_text: str,
    metadata: CommitMetadata,
    config: Optional[HookConfig] = None,
) -> str:
    """Convenience wrapper returning only the transformed text."""

    return ChangeIdProcessor(StaticMetadataSource(metadata), config).handle(raw_text).text
