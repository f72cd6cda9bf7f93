"""Слой с вычислительным бэкендом (CPU/GPU)."""

import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.layers.base import TextLayer
from frame_classifier.overlay.plugins import register_layer


@register_layer("backend")
class BackendLayer(TextLayer):
    def __init__(self, enabled: bool = True, position: tuple[int, int] = (300, -10), **kwargs) -> None:
        super().__init__(enabled, position=position, **kwargs)

    def text(self, frame: np.ndarray, annotation: FrameAnnotation) -> str:
        return annotation.backend.tag
