"""Formatting-based style classification."""

from docmark.classify.styles import (
    ScoredCluster,
    StyleClassifier,
    StyleCluster,
    StylePrediction,
)

__all__ = [
    "ScoredCluster",
    "StyleClassifier",
    "StyleCluster",
    "StylePrediction",
]
