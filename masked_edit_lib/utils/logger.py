import logging
from typing import Optional

from masked_edit_lib.constants import LOG_LEVEL


def prepare_logger(
    logger_name: str,
    level: Optional[str] = LOG_LEVEL,
    log_file: Optional[str] = None,
) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = (
            logging.FileHandler(log_file) if log_file else logging.StreamHandler()
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel((level or "INFO").upper())
    return logger
