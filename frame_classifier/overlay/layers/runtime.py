"""Слой со временем инференса."""

import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.layers.base import TextLayer
from frame_classifier.overlay.plugins import register_layer


def format_runtime(elapsed_s: float) -> str:
    # Шесть знаков, затем отбрасываются последние три (без округления)
    return f"run time: {elapsed_s:.6f}"[:-3]


@register_layer("runtime")
class RuntimeLayer(TextLayer):
    """Время вызова классификатора в секундах, левый нижний угол."""

    def __init__(self, enabled: bool = True, position: tuple[int, int] = (10, -10), **kwargs) -> None:
        super().__init__(enabled, position=position, **kwargs)

    def text(self, frame: np.ndarray, annotation: FrameAnnotation) -> str:
        return format_runtime(annotation.elapsed_s)
