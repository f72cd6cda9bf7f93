"""Классификация кадров видеопотока сетью GoogLeNet с наложением результата."""

__version__ = "0.1.0"
