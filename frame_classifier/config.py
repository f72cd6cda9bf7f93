from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _default_plugins() -> dict[str, dict[str, Any]]:
    return {
        "label": {"enabled": True},
        "runtime": {"enabled": True},
        "build": {"enabled": True},
        "backend": {"enabled": True},
        "resolution": {"enabled": True},
    }


class ModelConfig(BaseModel):
    """Настройки нейросети (Caffe GoogLeNet)"""
    # Файлы модели, относительно текущей рабочей директории
    label_file: str = Field("synset_words.txt", description="Файл с метками классов")
    deploy_file: str = Field("bvlc_googlenet.prototxt", description="Файл описания сети")
    weights_file: str = Field("bvlc_googlenet.caffemodel", description="Файл с весами сети")

    # Нормализация входа
    input_width: int = Field(224, ge=1, description="Ширина входа сети")
    input_height: int = Field(224, ge=1, description="Высота входа сети")
    mean: tuple[float, float, float] = Field(
        (104.0, 117.0, 123.0), description="Среднее, вычитаемое по каналам"
    )
    scale_factor: float = Field(1.0, gt=0.0, description="Масштаб пикселей после вычитания среднего")

    # Имена слоёв
    input_blob: str = Field("data", description="Имя входного слоя")
    output_blob: str = Field("prob", description="Имя выходного слоя")


class DisplayConfig(BaseModel):
    """Настройки окна и размера выходного кадра"""
    width: int = Field(500, ge=1, description="Ширина аннотированного кадра")
    height: int = Field(500, ge=1, description="Высота аннотированного кадра")
    window_name: str = Field("GoogLeNet-demo", description="Заголовок окна")
    delay_ms: int = Field(1, ge=1, le=1000, description="Ожидание клавиши между кадрами (мс)")
    escape_key: int = Field(27, description="Код клавиши выхода (Esc)")
    show: bool = Field(True, description="Показывать окно с кадрами")


class WriterConfig(BaseModel):
    """Настройки записи выходного видео"""
    fourcc: str = Field("mp4v", min_length=4, max_length=4, description="Кодек выходного файла")
    fallback_fps: float = Field(30.0, gt=0.0, description="FPS, если источник его не сообщает")


class OverlayConfig(BaseModel):
    """Настройки OSD слоёв"""
    enabled: bool = Field(True, description="Включить наложение текста")
    # Имя слоя -> параметры конструктора (+ enabled, priority)
    plugins: dict[str, dict[str, Any]] = Field(
        default_factory=_default_plugins, description="Параметры слоёв по имени"
    )


class RunConfig(BaseModel):
    """Параметры запуска, полученные из командной строки"""
    model_config = ConfigDict(frozen=True)

    input: str | None = Field(None, description="Путь к файлу или индекс камеры (None = камера)")
    output: str = Field("output.mp4", min_length=1, description="Путь к выходному файлу")
    use_cuda: bool = Field(True, description="Использовать CUDA, если доступна")
    frame_skip: int = Field(1, ge=1, description="Обрабатывать каждый N-й кадр")


class Config(BaseModel):
    """Главная конфигурация приложения"""
    model: ModelConfig = ModelConfig()
    display: DisplayConfig = DisplayConfig()
    writer: WriterConfig = WriterConfig()
    overlay: OverlayConfig = OverlayConfig()


# Глобальный экземпляр конфигурации
config = Config()
