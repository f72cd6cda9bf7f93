"""Текстовые слои OSD."""

from frame_classifier.overlay.layers.backend import BackendLayer
from frame_classifier.overlay.layers.base import TextLayer
from frame_classifier.overlay.layers.build import BuildLayer
from frame_classifier.overlay.layers.label import LabelLayer
from frame_classifier.overlay.layers.resolution import ResolutionLayer
from frame_classifier.overlay.layers.runtime import RuntimeLayer

__all__ = [
    "TextLayer",
    "LabelLayer",
    "RuntimeLayer",
    "BuildLayer",
    "BackendLayer",
    "ResolutionLayer",
]
