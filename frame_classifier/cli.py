"""Командная строка: разбор флагов, сборка компонентов и запуск цикла."""

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from frame_classifier.capture import FrameSource, open_source
from frame_classifier.classifier import CaffeClassifier, cuda_available
from frame_classifier.config import Config, RunConfig, config
from frame_classifier.display import Display
from frame_classifier.errors import ConfigurationError, FrameClassifierError
from frame_classifier.labels import load_labels
from frame_classifier.loop import run
from frame_classifier.messages import Backend, ExitStatus
from frame_classifier.overlay import build_renderer
from frame_classifier.sink import FrameSink, open_sink

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected true/false, got {value!r}")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser, который не завершает процесс с кодом 2 при ошибке."""

    def error(self, message: str):
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="frame-classifier",
        description="Classify video frames with a Caffe GoogLeNet model and record the annotated video.",
    )
    parser.add_argument("-i", "--in", dest="input", default=None, help="Path to input file or camera index (default: camera).")
    parser.add_argument("-o", "--out", dest="output", default="output.mp4", help="Path to output file.")
    parser.add_argument("-c", "--cuda", type=_str_to_bool, default=True, metavar="BOOL", help="Use CUDA if available (default: true).")
    parser.add_argument("-f", "--frame", dest="frame_skip", type=int, default=1, help="Process every N-th frame (default: 1).")
    parser.add_argument("--labels", default=None, help="Label file (default: %s)." % config.model.label_file)
    parser.add_argument("--deploy", default=None, help="Network description file (default: %s)." % config.model.deploy_file)
    parser.add_argument("--weights", default=None, help="Network weights file (default: %s)." % config.model.weights_file)
    parser.add_argument("--no-display", action="store_true", help="Do not open a preview window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: list[str] | None = None) -> tuple[RunConfig, Config, bool]:
    """
    Разобрать аргументы командной строки.

    Returns:
        (параметры запуска, конфигурация приложения, флаг verbose)

    Raises:
        ConfigurationError: При неверных флагах или значениях
    """
    args = build_parser().parse_args(argv)

    try:
        run_config = RunConfig(
            input=args.input,
            output=args.output,
            use_cuda=args.cuda,
            frame_skip=args.frame_skip,
        )
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc

    app_config = config.model_copy(deep=True)
    if args.labels:
        app_config.model.label_file = args.labels
    if args.deploy:
        app_config.model.deploy_file = args.deploy
    if args.weights:
        app_config.model.weights_file = args.weights
    if args.no_display:
        app_config.display.show = False

    return run_config, app_config, args.verbose


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s:     %(name)s - %(message)s",
    )
    logging.getLogger("frame_classifier").setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve(path: str) -> Path:
    # Файлы модели ищутся относительно текущей директории
    return Path.cwd() / path


def main(argv: list[str] | None = None) -> int:
    configure_logging()

    try:
        run_config, app_config, verbose = parse_args(argv)
    except SystemExit as exc:
        # --help
        return int(exc.code or 0)
    except ConfigurationError as exc:
        logger.error("Invalid arguments: %s", exc)
        return int(ExitStatus.FAILURE)

    if verbose:
        configure_logging(verbose=True)

    capture: FrameSource | None = None
    sink: FrameSink | None = None
    try:
        capture = open_source(run_config.input)
        labels = load_labels(_resolve(app_config.model.label_file))
        sink = open_sink(
            run_config.output,
            capture.fps,
            (app_config.display.width, app_config.display.height),
            app_config.writer,
        )

        backend = Backend.CPU
        if run_config.use_cuda and cuda_available():
            backend = Backend.CUDA
        classifier = CaffeClassifier(
            _resolve(app_config.model.deploy_file),
            _resolve(app_config.model.weights_file),
            app_config.model,
            backend,
        )
        renderer = build_renderer(app_config.overlay)
        display = Display(app_config.display.window_name, enabled=app_config.display.show)

        # С этого момента capture и sink освобождает run()
        loop_capture, loop_sink = capture, sink
        capture = sink = None
        status = run(
            run_config,
            labels,
            classifier,
            loop_capture,
            loop_sink,
            renderer=renderer,
            display=display,
            backend=backend,
            app_config=app_config,
        )
        return int(status)
    except KeyboardInterrupt:
        logger.info("Interrupted during startup, stopping")
        return int(ExitStatus.SUCCESS)
    except FrameClassifierError as exc:
        logger.error("%s", exc)
        return int(ExitStatus.FAILURE)
    finally:
        if sink is not None:
            sink.release()
        if capture is not None:
            capture.release()
