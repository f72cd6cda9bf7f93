"""Реестр текстовых слоёв и сборка рендерера по OverlayConfig."""

import logging
from typing import Any, Type

from frame_classifier.config import OverlayConfig
from frame_classifier.overlay.base import Layer
from frame_classifier.overlay.cv_renderer import CvOverlayRenderer

logger = logging.getLogger(__name__)

# Ключи, которые управляют слоем, а не передаются в конструктор
_CONTROL_KEYS = ("enabled", "priority")

_LAYERS: dict[str, Type[Layer]] = {}


def register_layer(name: str):
    """
    Декоратор: сделать слой доступным под именем из OverlayConfig.plugins.

    Example:
        @register_layer("confidence")
        class ConfidenceLayer(TextLayer):
            def text(self, frame, annotation):
                return f"{annotation.confidence:.2f}"
    """

    def decorator(cls: Type[Layer]) -> Type[Layer]:
        _LAYERS[name] = cls
        return cls

    return decorator


def available_layers() -> dict[str, Type[Layer]]:
    """Копия реестра {имя: класс} со всеми встроенными слоями."""
    # Импорт пакета регистрирует label/runtime/build/backend/resolution
    from frame_classifier.overlay import layers  # noqa: F401

    return _LAYERS.copy()


def create_layers(plugins_config: dict[str, dict[str, Any]]) -> list[Layer]:
    """
    Создать включённые слои.

    Args:
        plugins_config: {имя слоя: параметры}; enabled и priority управляют
            слоем, остальные ключи передаются в конструктор

    Returns:
        Слои в порядке конфигурации. Неизвестные имена и неверные
        параметры логируются и пропускаются.
    """
    registry = available_layers()
    layers: list[Layer] = []

    for name, params in plugins_config.items():
        if not params.get("enabled", False):
            continue

        layer_cls = registry.get(name)
        if layer_cls is None:
            logger.warning(
                "Unknown overlay '%s', expected one of: %s", name, ", ".join(sorted(registry))
            )
            continue

        kwargs = {k: v for k, v in params.items() if k not in _CONTROL_KEYS}
        try:
            layer = layer_cls(**kwargs)
        except TypeError as e:
            logger.error("Bad parameters for overlay '%s': %s", name, e)
            continue

        if "priority" in params:
            layer.priority = params["priority"]
        layers.append(layer)

    return layers


def build_renderer(overlay_config: OverlayConfig) -> CvOverlayRenderer | None:
    """
    Собрать рендерер надписей.

    Returns:
        None, если наложение выключено или не осталось ни одного слоя
    """
    if not overlay_config.enabled:
        return None

    layers = create_layers(overlay_config.plugins)
    if not layers:
        logger.warning("All overlays are disabled, frames will be written without text")
        return None

    logger.info(
        "Overlay renderer with %d layers: %s",
        len(layers),
        ", ".join(type(layer).__name__ for layer in layers),
    )
    return CvOverlayRenderer(layers)
