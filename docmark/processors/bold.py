"""
Bold run merging.

Consolidates consecutive runs marked bold into a single ``Strong`` node.
Markdown emphasis uses a symmetric delimiter, so a span that opens or
closes on whitespace does not render, and a span whose punctuation edge
touches a word character of its neighbour is not recognised as emphasis.
Whitespace is moved outside the span; the other case cancels the merge.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import replace
from typing import ClassVar

from docmark.core.document import Link, Run, Strong, Text
from docmark.processors.base import ProcessResult, Processor

logger = logging.getLogger(__name__)

_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")


def _is_alphanumeric(char: str) -> bool:
    return bool(char) and _ALPHANUMERIC.match(char) is not None


def is_bold_run(node: Run) -> bool:
    """Check whether a run counts as bold content."""
    if isinstance(node, Text):
        # Whitespace-only runs never open or extend a bold span
        return node.is_bold and node.value.strip() != ""
    if isinstance(node, Link):
        return node.is_bold
    return False


def _ends_alphanumeric(node: Run | None) -> bool:
    return isinstance(node, Text) and _is_alphanumeric(node.value[-1:])


def _starts_alphanumeric(node: Run | None) -> bool:
    return isinstance(node, Text) and _is_alphanumeric(node.value[:1])


def _starts_non_alphanumeric(node: Run) -> bool:
    return isinstance(node, Text) and node.value != "" and not _is_alphanumeric(node.value[0])


def _ends_non_alphanumeric(node: Run) -> bool:
    return isinstance(node, Text) and node.value != "" and not _is_alphanumeric(node.value[-1])


def merge_bold_runs(
    runs: list[Run],
    previous: Run | None = None,
    following: Run | None = None,
) -> list[Run]:
    """
    Wrap consecutive bold runs in a Strong node, fixing up its boundaries.

    Args:
        runs: The buffered bold runs, in order.
        previous: The sibling immediately before the first run.
        following: The sibling immediately after the last run.

    Returns:
        The nodes to emit in place of ``runs``. When the span would be
        invalid Markdown, ``runs`` is returned unchanged.
    """
    if not runs:
        return []

    children = list(runs)
    before: list[Run] = []
    after: list[Run] = []

    first = children[0]
    if isinstance(first, Text) and first.value.startswith(" "):
        stripped = first.value.lstrip()
        before.append(Text(value=first.value[: len(first.value) - len(stripped)]))
        children[0] = replace(first, value=stripped)
    elif _ends_alphanumeric(previous) and _starts_non_alphanumeric(first):
        logger.debug("Cancelled bold merge at leading boundary: %r", first)
        return list(runs)

    last = children[-1]
    if isinstance(last, Text) and last.value.endswith(" "):
        stripped = last.value.rstrip()
        after.append(Text(value=last.value[len(stripped) :]))
        children[-1] = replace(last, value=stripped)
    elif _starts_alphanumeric(following) and _ends_non_alphanumeric(last):
        logger.debug("Cancelled bold merge at trailing boundary: %r", last)
        return list(runs)

    return [*before, Strong(children=children), *after]


class BoldProcessor(Processor[Run]):
    """
    Accumulates consecutive bold runs into a single ``Strong`` node.

    Must be followed by a stage that emits the non-bold runs, since the
    flush result lets the triggering run continue down the pipeline.
    """

    PROCESSOR_NAME: ClassVar[str] = "bold"

    def __init__(self) -> None:
        self._buffer: list[Run] = []
        self._previous: Run | None = None

    def process_node(self, node: Run, index: int, nodes: Sequence[Run]) -> ProcessResult[Run] | None:
        if is_bold_run(node):
            if not self._buffer:
                self._previous = nodes[index - 1] if index > 0 else None
            self._buffer.append(node)
            return ProcessResult.consume()

        if self._buffer:
            return ProcessResult.emit_and_continue(*self._flush(following=node))

        return None

    def end(self, output: Sequence[Run]) -> ProcessResult[Run] | None:
        if self._buffer:
            return ProcessResult.emit_and_continue(*self._flush(following=None))
        return None

    def _flush(self, following: Run | None) -> list[Run]:
        runs, previous = self._buffer, self._previous
        self._buffer = []
        self._previous = None
        return merge_bold_runs(runs, previous=previous, following=following)
