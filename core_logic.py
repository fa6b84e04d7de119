import os
import logging
from logging.handlers import RotatingFileHandler

from fastapi import HTTPException, status

import config

# --- LOGGING SETUP ---

def setup_logging() -> logging.Logger:
    """Configure structured logging with optional rotation"""
    logger = logging.getLogger("idcodec")
    logger.setLevel(config.LOG_LEVEL.upper())

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_DIR:
            os.makedirs(config.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(config.LOG_DIR, "idcodec.log"),
                maxBytes=10_485_760,
                backupCount=5
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

logger = setup_logging()

# --- CUSTOM EXCEPTIONS ---

class ConfigurationError(ValueError):
    """Raised when a codec cannot be built from the given salt/alphabet/separators."""


class ValidationException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class ResourceNotFoundException(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
