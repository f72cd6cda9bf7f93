import numpy as np
import pytest

from frame_classifier.messages import Backend, FrameAnnotation


@pytest.fixture
def annotation() -> FrameAnnotation:
    return FrameAnnotation(
        label="tabby, tabby cat",
        confidence=0.87,
        elapsed_s=0.0421,
        backend=Backend.CPU,
        build="in release",
    )


@pytest.fixture
def frame() -> np.ndarray:
    return np.zeros((500, 500, 3), dtype=np.uint8)
