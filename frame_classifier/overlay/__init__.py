"""OSD (On-Screen Display) система для наложения текста на кадры."""

from frame_classifier.overlay.base import Layer, OverlayRenderer
from frame_classifier.overlay.cv_renderer import CvOverlayRenderer
from frame_classifier.overlay.plugins import (
    available_layers,
    build_renderer,
    create_layers,
    register_layer,
)

__all__ = [
    "Layer",
    "OverlayRenderer",
    "CvOverlayRenderer",
    "available_layers",
    "build_renderer",
    "create_layers",
    "register_layer",
]
