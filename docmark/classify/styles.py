"""
Paragraph style classification.

Source documents rarely mark headings semantically, so paragraphs are
grouped by their formatting signature and each group is scored on how
title-like, heading-like and body-like it looks. The highest scoring groups
are designated as the body, level-1 and level-2 styles.

Scoring rules (per cluster, compared against every other cluster):

=====================================  =====  =======  =========
Rule                                   title  heading  paragraph
=====================================  =====  =======  =========
largest font size                        +1      +1
smallest font size                                          +1
bold / not bold                          +1      +1      +1 (not)
underlined / not underlined              +1      +1      +1 (not)
centered / not centered                  +1      +1      +1 (not)
most matches                                                +2
exactly one match                        +1
fewest matches                                   +1
total first-run word count below 10      +1      +1
=====================================  =====  =======  =========
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from docmark.core.document import Paragraph, ParagraphSignature, Text

logger = logging.getLogger(__name__)

CENTER_JUSTIFICATION = "center"
SHORT_TEXT_WORD_LIMIT = 10


@dataclass
class StyleCluster:
    """
    Paragraphs sharing the same formatting signature.

    Attributes:
        signature: The shared font size, bold, underline and justification.
            None for the empty sentinel cluster.
        matches: Member paragraphs in document order.
    """

    signature: ParagraphSignature | None
    matches: list[Paragraph] = field(default_factory=list)

    @classmethod
    def empty(cls) -> StyleCluster:
        """Sentinel used when no cluster qualifies for a role."""
        return cls(signature=None, matches=[])

    @property
    def is_empty(self) -> bool:
        return self.signature is None

    @property
    def font_size(self) -> int | None:
        return self.signature.font_size if self.signature else None

    @property
    def is_bold(self) -> bool:
        return bool(self.signature and self.signature.is_bold)

    @property
    def is_underlined(self) -> bool:
        return bool(self.signature and self.signature.is_underlined)

    @property
    def justify_class(self) -> str | None:
        return self.signature.justify_class if self.signature else None

    def contains(self, paragraph: Paragraph) -> bool:
        """Check membership by identity, not by value."""
        return any(match is paragraph for match in self.matches)

    def first_run_word_count(self) -> int:
        """Sum of the word counts of each member's leading text run."""
        total = 0
        for paragraph in self.matches:
            if not paragraph.children:
                continue
            child = paragraph.children[0]
            if isinstance(child, Text) and child.value:
                total += len(child.value.split(" "))
        return total

    def to_dict(self) -> dict[str, Any]:
        return {
            "signature": self.signature.to_dict() if self.signature else None,
            "match_count": len(self.matches),
        }


@dataclass
class ScoredCluster:
    """A cluster with its role scores."""

    cluster: StyleCluster
    title_score: int = 0
    heading_score: int = 0
    paragraph_score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "cluster": self.cluster.to_dict(),
            "title_score": self.title_score,
            "heading_score": self.heading_score,
            "paragraph_score": self.paragraph_score,
        }


@dataclass
class StylePrediction:
    """The designated body, level-1 and level-2 clusters."""

    paragraph_style: StyleCluster = field(default_factory=StyleCluster.empty)
    h1_style: StyleCluster = field(default_factory=StyleCluster.empty)
    h2_style: StyleCluster = field(default_factory=StyleCluster.empty)

    def heading_depth(self, paragraph: Paragraph) -> int | None:
        """Return 1 or 2 if the paragraph belongs to a heading cluster."""
        if self.h1_style.contains(paragraph):
            return 1
        if self.h2_style.contains(paragraph):
            return 2
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "paragraph_style": self.paragraph_style.to_dict(),
            "h1_style": self.h1_style.to_dict(),
            "h2_style": self.h2_style.to_dict(),
        }


def _pick_best(
    candidates: list[ScoredCluster], score: Callable[[ScoredCluster], int]
) -> ScoredCluster | None:
    """Return the first candidate with the maximum score."""
    best: ScoredCluster | None = None
    for candidate in candidates:
        if best is None or score(candidate) > score(best):
            best = candidate
    return best


class StyleClassifier:
    """
    Predicts which paragraph clusters are titles, headings and body text.

    Stateless: every call works only on its arguments.
    """

    @staticmethod
    def cluster(paragraphs: Iterable[Paragraph]) -> list[StyleCluster]:
        """
        Group paragraphs by font size, bold, underline and justification.

        Paragraphs without a signature are skipped. Clusters keep the order
        in which their first member appears.
        """
        clusters: dict[tuple[Any, ...], StyleCluster] = {}

        for paragraph in paragraphs:
            signature = paragraph.signature
            if signature is None:
                continue

            key = signature.cluster_key()
            cluster = clusters.get(key)
            if cluster is None:
                font_size, is_bold, is_underlined, justify_class = key
                cluster = StyleCluster(
                    signature=ParagraphSignature(
                        font_size=font_size,
                        is_bold=is_bold,
                        is_underlined=is_underlined,
                        justify_class=justify_class,
                    )
                )
                clusters[key] = cluster
            cluster.matches.append(paragraph)

        return list(clusters.values())

    @staticmethod
    def score(clusters: list[StyleCluster]) -> list[ScoredCluster]:
        """Score every cluster against all the others."""
        scored: list[ScoredCluster] = []

        for cluster in clusters:
            others = [other for other in clusters if other is not cluster]
            result = ScoredCluster(cluster=cluster)
            size = cluster.font_size
            count = len(cluster.matches)

            # Largest font size suggests a title or heading
            if size and all(not o.font_size or o.font_size < size for o in others):
                result.title_score += 1
                result.heading_score += 1

            # Smallest font size suggests body text
            if size and all(not o.font_size or o.font_size > size for o in others):
                result.paragraph_score += 1

            for flag in (
                cluster.is_bold,
                cluster.is_underlined,
                cluster.justify_class == CENTER_JUSTIFICATION,
            ):
                if flag:
                    result.title_score += 1
                    result.heading_score += 1
                else:
                    result.paragraph_score += 1

            if all(len(o.matches) < count for o in others):
                result.paragraph_score += 2

            if count == 1:
                result.title_score += 1

            if all(len(o.matches) > count for o in others):
                result.heading_score += 1

            if cluster.first_run_word_count() < SHORT_TEXT_WORD_LIMIT:
                result.title_score += 1
                result.heading_score += 1

            scored.append(result)

        return scored

    @classmethod
    def classify(cls, paragraphs: Iterable[Paragraph]) -> StylePrediction:
        """Cluster, score and select in one call."""
        return cls.select(cls.score(cls.cluster(paragraphs)))

    @staticmethod
    def select(scored: list[ScoredCluster]) -> StylePrediction:
        """
        Select the body, level-1 and level-2 clusters.

        1. Body: highest paragraph score.
        2. Level 1: among the rest with paragraph score >= heading score,
           highest title score.
        3. Level 2: among those left with title score >= heading score,
           highest heading score.

        Ties go to the earliest cluster. A role with no candidates gets the
        empty sentinel cluster.
        """
        prediction = StylePrediction()

        paragraph_best = _pick_best(scored, lambda s: s.paragraph_score)
        if paragraph_best is None:
            logger.debug("No formatted paragraphs to classify")
            return prediction
        prediction.paragraph_style = paragraph_best.cluster

        candidates = [
            s for s in scored
            if s is not paragraph_best and s.paragraph_score >= s.heading_score
        ]
        h1_best = _pick_best(candidates, lambda s: s.title_score)
        if h1_best is not None:
            prediction.h1_style = h1_best.cluster

        candidates = [
            s for s in candidates
            if s is not h1_best and s.title_score >= s.heading_score
        ]
        h2_best = _pick_best(candidates, lambda s: s.heading_score)
        if h2_best is not None:
            prediction.h2_style = h2_best.cluster

        logger.debug(
            "Classified %d clusters: body=%s h1=%s h2=%s",
            len(scored),
            prediction.paragraph_style.to_dict(),
            prediction.h1_style.to_dict(),
            prediction.h2_style.to_dict(),
        )
        return prediction
