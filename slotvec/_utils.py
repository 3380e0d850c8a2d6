from __future__ import annotations

import logging


def log_prefix(
    logger: logging.Logger,
    prefix: str,
    level: int,
    msg: str,
    *args: object,
) -> None:
    logger.log(level, prefix + msg, *args)


def log_obj(
    logger: logging.Logger,
    obj: object,
    level: int,
    msg: str,
    *args: object,
) -> None:
    prefix = getattr(obj, "_log_prefix", None)
    if prefix is None:
        prefix = f"{obj!r}: "
    log_prefix(logger, prefix, level, msg, *args)


def describe_index(index: int, watermark: int) -> str:
    """Render an index against the watermark for error messages.

    >>> describe_index(7, 3)
    'index 7 (watermark 3)'
    """
    return f"index {index} (watermark {watermark})"
