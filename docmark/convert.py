"""
End-to-end conversion.

Data flow::

    .docx → LoaderRegistry.load_elements() → raw body elements
        → map_elements() → intermediate paragraphs
        → process_nodes() → Root → exporter
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lxml import etree

from docmark.config import ConversionConfig
from docmark.core.document import Node, Root
from docmark.exporters import ExporterRegistry
from docmark.loaders import LoaderRegistry
from docmark.mappers import Mapper, ParagraphMapper, map_elements
from docmark.processors import (
    HeadingProcessor,
    ListProcessor,
    PassthroughProcessor,
    PhrasingProcessor,
    Processor,
    process_nodes,
)

logger = logging.getLogger(__name__)


def default_mappers(config: ConversionConfig) -> list[Mapper]:
    return [ParagraphMapper(merge_bold=config.merge_bold)]


def default_processors(config: ConversionConfig) -> list[Processor[Node]]:
    """
    Build fresh pipeline stages for one document.

    Inline processing comes first so that paragraphs gathered into lists
    or promoted to headings are merged as well.
    """
    processors: list[Processor[Node]] = []
    if config.merge_bold:
        processors.append(PhrasingProcessor())
    processors.extend(
        [
            ListProcessor(list_style_name=config.list_style_name),
            HeadingProcessor(strategy=config.heading_strategy),
            PassthroughProcessor(),
        ]
    )
    return processors


def convert_elements(
    elements: Iterable[etree._Element], config: ConversionConfig | None = None
) -> Root:
    """Map raw body elements and run the pipeline over them."""
    cfg = config or ConversionConfig()
    nodes = map_elements(elements, default_mappers(cfg))
    return Root(children=process_nodes(nodes, default_processors(cfg)))


def convert_file(path: Path, config: ConversionConfig | None = None) -> Root:
    """
    Convert a document file into a semantic tree.

    Raises:
        LoaderError: If the file cannot be loaded
        PipelineError: If a pipeline stage fails
    """
    elements = LoaderRegistry.load_elements(path)
    root = convert_elements(elements, config)
    logger.info("Converted %s into %d blocks", path.name, len(root.children))
    return root


def render(root: Root, config: ConversionConfig | None = None) -> str:
    """Serialize a tree with the configured exporter."""
    cfg = config or ConversionConfig()
    exporter = ExporterRegistry.require_exporter(cfg.output_format, **cfg.exporter_options())
    return exporter.render(root)
