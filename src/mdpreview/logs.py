from __future__ import annotations

import logging
import os

from .config import get_settings

LOG_CONFIGURED = False


def configure_logging(name: str) -> None:
    global LOG_CONFIGURED
    if LOG_CONFIGURED:
        return
    settings = get_settings()
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    handlers: list[logging.Handler] = []

    if settings.log_dir:
        path = os.path.abspath(settings.log_dir)
        os.makedirs(path, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(path, f"{name}.log"))
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    logging.basicConfig(level=settings.log_level, handlers=handlers, force=True)
    LOG_CONFIGURED = True
