"""Источники кадров: камера или видеофайл через OpenCV."""

import logging
from abc import ABC, abstractmethod

import cv2
import numpy as np

from frame_classifier.errors import SourceOpenError

logger = logging.getLogger(__name__)


class FrameSource(ABC):
    """
    Базовый класс источника кадров.

    read() возвращает None, когда источник больше не отдаёт кадры.
    """

    @abstractmethod
    def read(self) -> np.ndarray | None:
        ...

    @abstractmethod
    def release(self) -> None:
        ...

    @property
    def width(self) -> int:
        return 0

    @property
    def height(self) -> int:
        return 0

    @property
    def fps(self) -> float:
        return 0.0


class CvFrameSource(FrameSource):
    """Источник кадров на основе cv2.VideoCapture."""

    def __init__(self, cap: cv2.VideoCapture) -> None:
        self._cap = cap

    def read(self) -> np.ndarray | None:
        ret, frame = self._cap.read()
        if not ret or frame is None:
            return None
        return frame

    def release(self) -> None:
        self._cap.release()

    @property
    def width(self) -> int:
        return int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH))

    @property
    def height(self) -> int:
        return int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

    @property
    def fps(self) -> float:
        return float(self._cap.get(cv2.CAP_PROP_FPS))


def open_source(source: str | None) -> CvFrameSource:
    """
    Открыть камеру или видеофайл.

    Args:
        source: None - камера по умолчанию, число - индекс камеры,
            иначе путь к файлу

    Raises:
        SourceOpenError: Если источник не открылся
    """
    if source is None or source == "":
        cap = cv2.VideoCapture(0, cv2.CAP_ANY)
        name = "default camera"
    elif source.isdigit():
        cap = cv2.VideoCapture(int(source))
        name = f"camera {source}"
    else:
        cap = cv2.VideoCapture(source)
        name = source

    if not cap.isOpened():
        cap.release()
        raise SourceOpenError(f"Cannot open video source: {name}")

    frame_source = CvFrameSource(cap)
    logger.info(
        "Opened %s: %dx%d at %.2f fps",
        name,
        frame_source.width,
        frame_source.height,
        frame_source.fps,
    )
    return frame_source
