"""Ошибки приложения. Все они фатальны и не повторяются."""


class FrameClassifierError(Exception):
    """Базовая ошибка приложения."""


class ConfigurationError(FrameClassifierError):
    """Неверные аргументы командной строки или настройки."""


class SourceOpenError(FrameClassifierError):
    """Не удалось открыть камеру или видеофайл."""


class SinkOpenError(FrameClassifierError):
    """Не удалось создать выходной видеофайл."""


class LabelLoadError(FrameClassifierError):
    """Файл меток отсутствует, не читается или пуст."""


class ModelLoadError(FrameClassifierError):
    """Не удалось загрузить сеть из файлов описания и весов."""


class SourceDisconnectedError(FrameClassifierError):
    """Источник перестал отдавать кадры посреди работы."""


class LabelMismatchError(FrameClassifierError):
    """Индекс класса выходит за пределы таблицы меток."""
