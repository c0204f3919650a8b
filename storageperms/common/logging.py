# storageperms/common/logging.py
from __future__ import annotations

import logging

PACKAGE_LOGGER = "storageperms"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str = PACKAGE_LOGGER, level: int | str | None = None) -> logging.Logger:
    """
    Loggers for this package hang off "storageperms". The first call gives the
    package logger a stream handler unless something (uvicorn, pytest) has
    already configured the root logger. `level` may be a name like "debug";
    it is applied to the returned logger only when given.
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        package.addHandler(handler)
        package.setLevel(logging.INFO)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_coerce_level(level))
    return logger
