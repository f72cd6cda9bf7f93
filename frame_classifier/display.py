"""Окно предпросмотра. Работает в режиме best effort."""

import logging
import os
import sys
import time

import cv2
import numpy as np

logger = logging.getLogger(__name__)

NO_KEY = -1


def has_display_server() -> bool:
    """
    Есть ли куда выводить окно.

    На Linux без X11/Wayland Qt-бэкенд OpenCV аварийно завершает процесс
    в cv2.imshow, не бросая cv2.error.
    """
    if not sys.platform.startswith("linux"):
        return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


class Display:
    """
    Показ кадров в окне OpenCV.

    В headless-окружении первая ошибка GUI логируется,
    после чего показ отключается, а обработка продолжается.
    """

    def __init__(self, window_name: str, enabled: bool = True) -> None:
        self.window_name = window_name
        self.enabled = enabled
        self._opened = False
        if enabled and not has_display_server():
            logger.warning(
                "Display unavailable, continuing without preview: "
                "neither DISPLAY nor WAYLAND_DISPLAY is set"
            )
            self.enabled = False

    def _disable(self, exc: cv2.error) -> None:
        logger.warning("Display unavailable, continuing without preview: %s", exc)
        self.enabled = False

    def show(self, frame: np.ndarray) -> None:
        if not self.enabled:
            return
        try:
            cv2.imshow(self.window_name, frame)
            self._opened = True
        except cv2.error as exc:
            self._disable(exc)

    def wait_key(self, delay_ms: int) -> int:
        """
        Дождаться нажатия клавиши.

        Returns:
            Код клавиши или NO_KEY
        """
        if self.enabled:
            try:
                return cv2.waitKey(delay_ms)
            except cv2.error as exc:
                self._disable(exc)
        # Без окна задержка всё равно ограничивает темп цикла
        time.sleep(delay_ms / 1000)
        return NO_KEY

    def close(self) -> None:
        if not self._opened:
            return
        self._opened = False
        try:
            cv2.destroyAllWindows()
        except cv2.error as exc:
            logger.debug("Failed to destroy windows: %s", exc)
