"""Классификация кадров сетью Caffe через модуль OpenCV DNN."""

import logging
from pathlib import Path
from typing import Protocol

import cv2
import numpy as np

from frame_classifier.config import ModelConfig
from frame_classifier.errors import ModelLoadError
from frame_classifier.messages import Backend, ClassificationResult

logger = logging.getLogger(__name__)


class Classifier(Protocol):
    """
    Интерфейс классификатора.

    Классификатор сопоставляет кадру номер наиболее вероятного класса.
    """

    def classify(self, frame: np.ndarray) -> ClassificationResult:
        """
        Классифицировать кадр.

        Args:
            frame: Кадр в формате BGR (numpy array)
        """
        ...


def cuda_available() -> bool:
    """Есть ли у OpenCV совместимое CUDA-устройство."""
    try:
        if cv2.cuda.getCudaEnabledDeviceCount() == 0:
            return False
        if not cv2.cuda.DeviceInfo().isCompatible():
            return False
        device = cv2.cuda.getDevice()
        logger.info("Using CUDA device %d", device)
        cv2.cuda.printShortCudaDeviceInfo(device)
    except (AttributeError, cv2.error) as exc:
        # Сборка OpenCV без модуля cuda
        logger.debug("CUDA check failed: %s", exc)
        return False
    return True


class CaffeClassifier:
    """
    Классификатор на основе сети Caffe (GoogLeNet).

    Сеть загружается один раз и переиспользуется для всех кадров.
    """

    def __init__(
        self,
        deploy_file: str | Path,
        weights_file: str | Path,
        model_config: ModelConfig | None = None,
        backend: Backend = Backend.CPU,
    ) -> None:
        """
        Загрузить сеть.

        Args:
            deploy_file: Файл описания сети (.prototxt)
            weights_file: Файл весов (.caffemodel)
            model_config: Параметры нормализации входа
            backend: Вычислительный бэкенд

        Raises:
            ModelLoadError: Если файлы отсутствуют или сеть пуста
        """
        self.model_config = model_config or ModelConfig()
        self.backend = backend
        self.output_size: int | None = None

        for path in (deploy_file, weights_file):
            if not Path(path).is_file():
                raise ModelLoadError(f"Model file not found: {path}")

        try:
            self._net = cv2.dnn.readNetFromCaffe(str(deploy_file), str(weights_file))
        except AttributeError as exc:
            # В OpenCV 5 загрузчик Caffe удалён
            raise ModelLoadError(
                f"This OpenCV build ({cv2.__version__}) cannot read Caffe models"
            ) from exc
        except cv2.error as exc:
            raise ModelLoadError(f"Could not load Caffe net: {exc}") from exc

        if self._net.empty():
            raise ModelLoadError("Could not load Caffe net: network is empty")

        if backend is Backend.CUDA:
            self._net.setPreferableBackend(cv2.dnn.DNN_BACKEND_CUDA)
            self._net.setPreferableTarget(cv2.dnn.DNN_TARGET_CUDA)

        logger.info("Loaded Caffe net from %s (backend: %s)", weights_file, backend.value)

    def classify(self, frame: np.ndarray) -> ClassificationResult:
        cfg = self.model_config
        blob = cv2.dnn.blobFromImage(
            frame,
            cfg.scale_factor,
            (cfg.input_width, cfg.input_height),
            cfg.mean,
        )
        self._net.setInput(blob, cfg.input_blob)
        scores = np.asarray(self._net.forward(cfg.output_blob)).reshape(-1)

        # Выход 1x1000 -> индекс максимальной вероятности
        self.output_size = int(scores.size)
        index = int(np.argmax(scores))
        return ClassificationResult(index=index, confidence=float(scores[index]))
