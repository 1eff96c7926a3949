import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None, noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    if level is None:
        level = os.getenv("LOG_LEVEL", logging.INFO)
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    if noisy_libs is not None:
        for lib, lib_level in noisy_libs.items():
            logging.getLogger(lib).setLevel(lib_level)
