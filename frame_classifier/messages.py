from dataclasses import dataclass
from enum import Enum, IntEnum

# Аналог NDEBUG: при запуске с -O assert отключены
BUILD_TAG = "in debug" if __debug__ else "in release"


class ExitStatus(IntEnum):
    SUCCESS = 0
    FAILURE = 1


class Backend(str, Enum):
    CPU = "cpu"
    CUDA = "cuda"

    @property
    def tag(self) -> str:
        return "using GPUs" if self is Backend.CUDA else "using CPUs"


@dataclass(frozen=True)
class ClassificationResult:
    index: int  # argmax по выходу сети
    confidence: float  # 0..1


@dataclass
class FrameAnnotation:
    label: str
    confidence: float
    elapsed_s: float  # время вызова classify
    backend: Backend = Backend.CPU
    build: str = BUILD_TAG
