"""
Element mapping.

Mappers turn raw WordprocessingML body elements one-to-one into
intermediate nodes. They do no cross-element work such as gathering list
paragraphs; that is left to the processors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import ClassVar

from lxml import etree

from docmark.core.document import Node

logger = logging.getLogger(__name__)


class Mapper(ABC):
    """Maps one kind of raw element to a node."""

    MAPPER_NAME: ClassVar[str] = "base"

    @abstractmethod
    def map_element(self, element: etree._Element) -> Node | None:
        """
        Map a raw element.

        Returns:
            The mapped node, or None if this mapper does not handle the
            element or the element maps to nothing.
        """


def map_elements(elements: Iterable[etree._Element], mappers: Sequence[Mapper]) -> list[Node]:
    """
    Map raw elements to nodes, keeping document order.

    The first mapper that returns a node wins. Elements no mapper handles
    are dropped.
    """
    mapped: list[Node] = []
    counts: dict[str, int] = {}
    dropped = 0

    for element in elements:
        for mapper in mappers:
            node = mapper.map_element(element)
            if node is not None:
                mapped.append(node)
                counts[mapper.MAPPER_NAME] = counts.get(mapper.MAPPER_NAME, 0) + 1
                break
        else:
            dropped += 1

    logger.debug("Mapped %d elements %s, dropped %d", len(mapped), counts, dropped)
    return mapped
