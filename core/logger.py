# --------------------------------------------------------------
# File: logger.py
# Description: Logger único del proyecto configurado desde LOG_LEVEL.
# --------------------------------------------------------------
"""Construcción del logger ``cipherlab`` y de sus hijos por módulo."""

import logging

from core.config import LOG_LEVEL


def _normalize_level(raw: str) -> int:
    candidate = str(raw or "INFO").strip().upper()
    return {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
    }.get(candidate, logging.INFO)


def _build_logger() -> logging.Logger:
    configured = logging.getLogger("cipherlab")
    if configured.handlers:
        return configured

    level = _normalize_level(LOG_LEVEL)
    configured.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    configured.addHandler(handler)
    return configured


logger = _build_logger()


def get_logger(name: str) -> logging.Logger:
    """Devuelve un logger hijo dentro del espacio ``cipherlab``."""

    return logger.getChild(name)
