"""Общая основа текстовых слоёв."""

from abc import abstractmethod

import cv2
import numpy as np

from frame_classifier.messages import FrameAnnotation
from frame_classifier.overlay.base import Layer

GREEN = (0, 255, 0)
RED = (0, 0, 255)


class TextLayer(Layer):
    """
    Слой с одной строкой текста в фиксированной позиции.

    Отрицательные координаты отсчитываются от правого/нижнего края кадра:
    (-80, -10) - на 80 пикселей левее правого края и на 10 выше нижнего.
    Позиции не зависят от длины текста.
    """

    def __init__(
        self,
        enabled: bool = True,
        position: tuple[int, int] = (10, -10),
        font: int = cv2.FONT_HERSHEY_PLAIN,
        font_scale: float = 1.1,
        color: tuple[int, int, int] = GREEN,
        thickness: int = 1,
        outline_color: tuple[int, int, int] | None = None,
        outline_thickness: int = 3,
        priority: int = Layer.PRIORITY_HUD,
    ) -> None:
        """
        Инициализация текстового слоя.

        Args:
            enabled: Включён ли слой
            position: Позиция левого нижнего угла текста (x, y)
            font: Шрифт OpenCV (cv2.FONT_*)
            font_scale: Размер шрифта
            color: Цвет текста (BGR)
            thickness: Толщина текста
            outline_color: Цвет обводки (BGR), None - без обводки
            outline_thickness: Толщина обводки
            priority: Приоритет отрисовки
        """
        super().__init__(enabled, priority=priority)
        self.position = tuple(position)
        self.font = font
        self.font_scale = font_scale
        self.color = tuple(color)
        self.thickness = thickness
        self.outline_color = tuple(outline_color) if outline_color is not None else None
        self.outline_thickness = outline_thickness

    @abstractmethod
    def text(self, frame: np.ndarray, annotation: FrameAnnotation) -> str:
        """Текст надписи для текущего кадра."""
        ...

    def origin(self, frame: np.ndarray) -> tuple[int, int]:
        """Абсолютная позиция текста на кадре."""
        height, width = frame.shape[:2]
        x, y = self.position
        return (x if x >= 0 else width + x, y if y >= 0 else height + y)

    def render(self, frame: np.ndarray, annotation: FrameAnnotation) -> None:
        text = self.text(frame, annotation)
        if not text:
            return
        origin = self.origin(frame)

        if self.outline_color is not None:
            cv2.putText(
                frame,
                text,
                origin,
                self.font,
                self.font_scale,
                self.outline_color,
                self.outline_thickness,
                cv2.LINE_AA,
            )

        cv2.putText(
            frame,
            text,
            origin,
            self.font,
            self.font_scale,
            self.color,
            self.thickness,
            cv2.LINE_AA,
        )
