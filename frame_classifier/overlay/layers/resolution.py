"""Слой с разрешением кадра."""

import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.layers.base import TextLayer
from frame_classifier.overlay.plugins import register_layer


@register_layer("resolution")
class ResolutionLayer(TextLayer):
    """Разрешение текущего кадра "ШxВ", правый нижний угол."""

    def __init__(self, enabled: bool = True, position: tuple[int, int] = (-80, -10), **kwargs) -> None:
        super().__init__(enabled, position=position, **kwargs)

    def text(self, frame: np.ndarray, annotation: FrameAnnotation) -> str:
        height, width = frame.shape[:2]
        return f"{width}x{height}"
