"""Загрузка таблицы меток классов (synset_words.txt)."""

import logging
from pathlib import Path

from frame_classifier.errors import LabelLoadError

logger = logging.getLogger(__name__)

LabelTable = tuple[str, ...]


def parse_label_line(line: str) -> str:
    """
    Выделить имя класса из строки вида "<id> <name>".

    Строка без пробела возвращается целиком.
    """
    _, sep, name = line.partition(" ")
    return name if sep else line


def load_labels(path: str | Path) -> LabelTable:
    """
    Загрузить таблицу меток.

    Args:
        path: Путь к файлу, одна метка на строку

    Returns:
        Кортеж имён классов, индекс = номер класса

    Raises:
        LabelLoadError: Если файл не читается или не содержит ни одной метки
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LabelLoadError(f"Failed to read label file {path}: {exc}") from exc

    labels = tuple(
        parse_label_line(line.rstrip("\r"))
        for line in text.split("\n")
        if line.strip()
    )
    if not labels:
        raise LabelLoadError(f"Label file {path} is empty")

    logger.info("Loaded %d labels from %s", len(labels), path)
    return labels
