"""OpenCV рендерер для OSD."""

import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.base import Layer


class CvOverlayRenderer:
    """
    Рендерер OSD на основе OpenCV.

    Управляет отрисовкой всех слоёв на кадре.
    """

    def __init__(self, layers: list[Layer]) -> None:
        # Сортируем слои по приоритету (меньше = рисуется раньше)
        self.layers = sorted(layers, key=lambda layer: layer.priority)

    def draw(self, frame: np.ndarray, annotation: FrameAnnotation) -> None:
        """
        Отрисовать все активные слои на кадре.

        Args:
            frame: Кадр в формате BGR, модифицируется на месте
            annotation: Данные для надписей
        """
        for layer in self.layers:
            if layer.enabled:
                layer.render(frame, annotation)
