"""Слой с предсказанной меткой класса."""

import cv2
import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.layers.base import RED, TextLayer
from frame_classifier.overlay.plugins import register_layer


@register_layer("label")
class LabelLayer(TextLayer):
    """
    Слой с меткой класса в левом верхнем углу.

    При show_confidence=True к метке добавляется вероятность.
    """

    def __init__(
        self,
        enabled: bool = True,
        position: tuple[int, int] = (10, 20),
        font_scale: float = 1.0,
        color: tuple[int, int, int] = RED,
        show_confidence: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(
            enabled,
            position=position,
            font=cv2.FONT_HERSHEY_COMPLEX_SMALL,
            font_scale=font_scale,
            color=color,
            **kwargs,
        )
        self.show_confidence = show_confidence

    def text(self, frame: np.ndarray, annotation: FrameAnnotation) -> str:
        if self.show_confidence:
            return f"{annotation.label} ({annotation.confidence:.2f})"
        return annotation.label
