"""Global configuration: constants, environment settings and logging."""

from __future__ import annotations

import logging
import os
import sys

__version__ = "0.2.0"

# Identifier prefix for the rest-pose geometry and the scene root node
DEFAULT_BASE_NAME = "Scene_Root"

# Default file name written by the exporter
DEFAULT_OUTPUT_FILENAME = "model.dae"

# Decimal digits used for every float written to the document
FLOAT_PRECISION = 8

# Point light parameters
LIGHT_PREFIX = "light_"
LINEAR_ATTENUATION = 0.3
DEFAULT_LIGHT_COLOR = (1.0, 1.0, 1.0)

# Static <asset> block contents
AUTHOR = "cemconv user"
AUTHORING_TOOL = f"cemconv {__version__} collada exporter"
DOCUMENT_TIMESTAMP = "2018-01-01T00:00:00"
UNIT_NAME = "meter"
UP_AXIS = "Y_UP"

VISUAL_SCENE_ID = "Scene"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, str]] = {
    "CEMCONV_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "CEMCONV_BASE_NAME": {
        "default": DEFAULT_BASE_NAME,
        "description": "Identifier of the base geometry and root node",
    },
    "CEMCONV_OUTPUT_FILENAME": {
        "default": DEFAULT_OUTPUT_FILENAME,
        "description": "File name of the exported document",
    },
}


def load_config() -> dict[str, str]:
    """Load merged config: defaults -> env vars.

    Returns a flat dict of configuration values.
    """
    config = {key: info["default"] for key, info in _CONFIG_KEYS.items()}

    for key in _CONFIG_KEYS:
        env_val = os.environ.get(key)
        if env_val is not None:
            config[key] = env_val

    return config


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a console handler to the ``cemconv`` logger.

    Without an explicit *level*, ``CEMCONV_LOG_LEVEL`` from
    :func:`load_config` is used. Existing handlers are removed first so
    repeated calls do not duplicate output.
    """
    logger = logging.getLogger("cemconv")
    if level is None:
        level = load_config()["CEMCONV_LOG_LEVEL"]
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)

    return logger
