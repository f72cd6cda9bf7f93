"""Основной цикл: захват -> классификация -> аннотация -> показ -> запись."""

import logging
import time
from collections.abc import Sequence

import cv2

from frame_classifier.capture import FrameSource
from frame_classifier.classifier import Classifier
from frame_classifier.config import Config, RunConfig
from frame_classifier.config import config as default_config
from frame_classifier.display import NO_KEY, Display
from frame_classifier.errors import (
    FrameClassifierError,
    LabelMismatchError,
    SourceDisconnectedError,
)
from frame_classifier.messages import BUILD_TAG, Backend, ExitStatus, FrameAnnotation
from frame_classifier.overlay.base import OverlayRenderer
from frame_classifier.sink import FrameSink

logger = logging.getLogger(__name__)


def _read_frame(capture: FrameSource, frame_skip: int):
    """Прочитать frame_skip кадров и вернуть последний."""
    frame = None
    for _ in range(frame_skip):
        frame = capture.read()
        if frame is None:
            raise SourceDisconnectedError("Video source is disconnected")
    return frame


def run(
    run_config: RunConfig,
    labels: Sequence[str],
    classifier: Classifier,
    capture: FrameSource,
    sink: FrameSink,
    *,
    renderer: OverlayRenderer | None = None,
    display: Display | None = None,
    backend: Backend = Backend.CPU,
    app_config: Config = default_config,
) -> ExitStatus:
    """
    Обрабатывать кадры до нажатия Esc или отказа источника.

    Цикл владеет capture, sink и display: они освобождаются ровно один раз
    на любом пути выхода. Неожиданные исключения пробрасываются после очистки.

    Args:
        run_config: Параметры запуска (frame_skip и т.д.)
        labels: Таблица меток, индекс = номер класса
        classifier: Классификатор кадров
        capture: Источник кадров
        sink: Приёмник аннотированных кадров
        renderer: Рендерер надписей, None - без надписей
        display: Окно предпросмотра, None - без окна
        backend: Бэкенд, на котором работает классификатор
        app_config: Размер кадра, задержка и клавиша выхода

    Returns:
        ExitStatus.SUCCESS при выходе по Esc/Ctrl+C, иначе ExitStatus.FAILURE
    """
    display_cfg = app_config.display
    size = (display_cfg.width, display_cfg.height)
    if display is None:
        display = Display(display_cfg.window_name, enabled=False)
    processed = 0
    status = ExitStatus.FAILURE

    try:
        while True:
            frame = _read_frame(capture, run_config.frame_skip)

            start = time.perf_counter()
            result = classifier.classify(frame)
            elapsed = time.perf_counter() - start

            frame = cv2.resize(frame, size)

            if not 0 <= result.index < len(labels):
                raise LabelMismatchError(
                    f"Class index {result.index} is out of range for "
                    f"{len(labels)} labels; model and label file do not match"
                )

            annotation = FrameAnnotation(
                label=labels[result.index],
                confidence=result.confidence,
                elapsed_s=elapsed,
                backend=backend,
                build=BUILD_TAG,
            )
            if renderer is not None:
                renderer.draw(frame, annotation)

            display.show(frame)
            sink.write(frame)
            processed += 1
            logger.debug(
                "Frame %d: %s (%.3f) in %.3fs",
                processed,
                annotation.label,
                annotation.confidence,
                elapsed,
            )

            key = display.wait_key(display_cfg.delay_ms)
            if key != NO_KEY and key & 0xFF == display_cfg.escape_key:
                logger.info("Escape pressed, stopping")
                status = ExitStatus.SUCCESS
                break
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
        status = ExitStatus.SUCCESS
    except FrameClassifierError as exc:
        logger.error("%s", exc)
        status = ExitStatus.FAILURE
    finally:
        capture.release()
        sink.release()
        display.close()
        logger.info("Processed %d frames", processed)

    return status
