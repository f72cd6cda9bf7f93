"""Тесты для классификатора Caffe (без реальной модели)."""

import logging
from pathlib import Path
from typing import Any

import cv2
import numpy as np
import pytest

import frame_classifier.classifier as classifier_module
from frame_classifier.classifier import CaffeClassifier, cuda_available
from frame_classifier.errors import ModelLoadError
from frame_classifier.messages import Backend


class _FakeNet:
    """Заглушка cv2.dnn.Net с заранее заданным выходом."""

    def __init__(self, scores: np.ndarray, empty: bool = False) -> None:
        self.scores = scores
        self._empty = empty
        self.inputs: list[tuple[Any, str]] = []
        self.forward_calls: list[str] = []
        self.backend: int | None = None
        self.target: int | None = None

    def empty(self) -> bool:
        return self._empty

    def setPreferableBackend(self, backend: int) -> None:  # noqa: N802 - OpenCV API
        self.backend = backend

    def setPreferableTarget(self, target: int) -> None:  # noqa: N802 - OpenCV API
        self.target = target

    def setInput(self, blob: Any, name: str) -> None:  # noqa: N802 - OpenCV API
        self.inputs.append((blob, name))

    def forward(self, name: str) -> np.ndarray:
        self.forward_calls.append(name)
        return self.scores


@pytest.fixture
def model_files(tmp_path: Path) -> tuple[Path, Path]:
    deploy = tmp_path / "bvlc_googlenet.prototxt"
    weights = tmp_path / "bvlc_googlenet.caffemodel"
    deploy.write_text("name: 'GoogleNet'")
    weights.write_bytes(b"\x00")
    return deploy, weights


def _install_net(monkeypatch: pytest.MonkeyPatch, net: _FakeNet) -> list[tuple[str, str]]:
    loads: list[tuple[str, str]] = []

    def fake_read(deploy: str, weights: str) -> _FakeNet:
        loads.append((deploy, weights))
        return net

    monkeypatch.setattr(classifier_module.cv2.dnn, "readNetFromCaffe", fake_read, raising=False)
    return loads


def test_classify_returns_argmax(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    """Результат - индекс максимальной вероятности и сама вероятность."""
    scores = np.zeros((1, 1000, 1, 1), dtype=np.float32)
    scores[0, 281] = 0.75
    scores[0, 282] = 0.2
    net = _FakeNet(scores)
    _install_net(monkeypatch, net)

    classifier = CaffeClassifier(*model_files)
    result = classifier.classify(np.zeros((480, 640, 3), dtype=np.uint8))

    assert result.index == 281
    assert result.confidence == pytest.approx(0.75)
    assert classifier.output_size == 1000


def test_classify_builds_normalized_blob(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    """Вход сети 224x224 с вычитанием среднего и именами data/prob."""
    net = _FakeNet(np.array([[0.1, 0.9]], dtype=np.float32))
    _install_net(monkeypatch, net)
    frame = np.full((480, 640, 3), (104, 117, 123), dtype=np.uint8)

    CaffeClassifier(*model_files).classify(frame)

    blob, name = net.inputs[0]
    assert name == "data"
    assert net.forward_calls == ["prob"]
    assert blob.shape == (1, 3, 224, 224)
    # Кадр, равный среднему, после вычитания становится нулевым
    assert np.allclose(blob, 0.0)


def test_model_loaded_once(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    """Сеть читается один раз, а не на каждом кадре."""
    loads = _install_net(monkeypatch, _FakeNet(np.array([[1.0]], dtype=np.float32)))
    classifier = CaffeClassifier(*model_files)

    for _ in range(3):
        classifier.classify(np.zeros((10, 10, 3), dtype=np.uint8))

    assert len(loads) == 1


def test_cuda_backend_selected(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    net = _FakeNet(np.array([[1.0]], dtype=np.float32))
    _install_net(monkeypatch, net)

    CaffeClassifier(*model_files, backend=Backend.CUDA)

    assert net.backend == cv2.dnn.DNN_BACKEND_CUDA
    assert net.target == cv2.dnn.DNN_TARGET_CUDA


def test_cpu_backend_keeps_defaults(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    net = _FakeNet(np.array([[1.0]], dtype=np.float32))
    _install_net(monkeypatch, net)

    CaffeClassifier(*model_files)

    assert net.backend is None
    assert net.target is None


def test_missing_model_file(tmp_path: Path) -> None:
    """Отсутствующие файлы модели - ошибка загрузки."""
    with pytest.raises(ModelLoadError):
        CaffeClassifier(tmp_path / "missing.prototxt", tmp_path / "missing.caffemodel")


def test_empty_net(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    _install_net(monkeypatch, _FakeNet(np.array([[1.0]]), empty=True))

    with pytest.raises(ModelLoadError):
        CaffeClassifier(*model_files)


def test_corrupt_model(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    """Ошибка OpenCV при разборе файлов превращается в ModelLoadError."""

    def fake_read(deploy: str, weights: str) -> None:
        raise cv2.error("failed to parse prototxt")

    monkeypatch.setattr(classifier_module.cv2.dnn, "readNetFromCaffe", fake_read, raising=False)

    with pytest.raises(ModelLoadError):
        CaffeClassifier(*model_files)


def test_cuda_available_without_devices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(classifier_module.cv2.cuda, "getCudaEnabledDeviceCount", lambda: 0)

    assert cuda_available() is False


def test_cuda_available_handles_opencv_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken() -> int:
        raise cv2.error("no CUDA support")

    monkeypatch.setattr(classifier_module.cv2.cuda, "getCudaEnabledDeviceCount", broken)

    assert cuda_available() is False


def test_opencv_without_caffe_loader(monkeypatch: pytest.MonkeyPatch, model_files) -> None:
    """Сборка OpenCV без readNetFromCaffe даёт ModelLoadError, а не AttributeError."""
    monkeypatch.delattr(classifier_module.cv2.dnn, "readNetFromCaffe", raising=False)

    with pytest.raises(ModelLoadError, match="cannot read Caffe models"):
        CaffeClassifier(*model_files)


class _CompatibleDevice:
    def isCompatible(self) -> bool:  # noqa: N802 - OpenCV API
        return True


def test_cuda_available_logs_device(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Выбранное CUDA-устройство попадает в лог."""
    cuda = classifier_module.cv2.cuda
    monkeypatch.setattr(cuda, "getCudaEnabledDeviceCount", lambda: 1)
    monkeypatch.setattr(cuda, "DeviceInfo", _CompatibleDevice, raising=False)
    monkeypatch.setattr(cuda, "getDevice", lambda: 0, raising=False)
    monkeypatch.setattr(cuda, "printShortCudaDeviceInfo", lambda device: None, raising=False)
    caplog.set_level(logging.INFO, logger="frame_classifier.classifier")

    assert cuda_available() is True
    assert "Using CUDA device 0" in caplog.text
