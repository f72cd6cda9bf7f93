"""Слой с типом сборки (debug/release)."""

import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.layers.base import TextLayer
from frame_classifier.overlay.plugins import register_layer


@register_layer("build")
class BuildLayer(TextLayer):
    def __init__(self, enabled: bool = True, position: tuple[int, int] = (180, -10), **kwargs) -> None:
        super().__init__(enabled, position=position, **kwargs)

    def text(self, frame: np.ndarray, annotation: FrameAnnotation) -> str:
        return annotation.build
