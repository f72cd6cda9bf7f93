"""Запись аннотированных кадров в видеофайл."""

import logging
from abc import ABC, abstractmethod

import cv2
import numpy as np

from frame_classifier.config import WriterConfig
from frame_classifier.errors import SinkOpenError

logger = logging.getLogger(__name__)


class FrameSink(ABC):
    """Приёмник кадров."""

    @abstractmethod
    def write(self, frame: np.ndarray) -> None:
        ...

    @abstractmethod
    def release(self) -> None:
        ...


class CvVideoSink(FrameSink):
    """Приёмник на основе cv2.VideoWriter с фиксированным размером кадра."""

    def __init__(self, writer: cv2.VideoWriter, size: tuple[int, int]) -> None:
        self._writer = writer
        self.size = size

    def write(self, frame: np.ndarray) -> None:
        self._writer.write(frame)

    def release(self) -> None:
        self._writer.release()


def open_sink(
    path: str,
    fps: float,
    size: tuple[int, int],
    writer_config: WriterConfig | None = None,
) -> CvVideoSink:
    """
    Создать выходной видеофайл.

    Args:
        path: Путь к выходному файлу
        fps: Частота кадров источника
        size: Размер кадра (ширина, высота)
        writer_config: Кодек и запасной FPS

    Raises:
        SinkOpenError: Если файл не удалось открыть на запись
    """
    writer_config = writer_config or WriterConfig()
    if fps <= 0:
        # Камеры часто не сообщают FPS
        logger.warning(
            "Source reports no frame rate, using %.1f fps", writer_config.fallback_fps
        )
        fps = writer_config.fallback_fps

    fourcc = cv2.VideoWriter_fourcc(*writer_config.fourcc)
    writer = cv2.VideoWriter(path, fourcc, fps, size)
    if not writer.isOpened():
        writer.release()
        raise SinkOpenError(f"Cannot open output file: {path}")

    logger.info(
        "Writing %s (%s, %dx%d at %.2f fps)",
        path,
        writer_config.fourcc,
        size[0],
        size[1],
        fps,
    )
    return CvVideoSink(writer, size)
