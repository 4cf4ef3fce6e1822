# app/core/logging.py
import logging
import sys

from app.core.config import settings


def setup_logging() -> None:
    """Configura o logger raiz com saída no console, respeitando LOG_LEVEL."""
    log = logging.getLogger()
    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    log.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)-20s | %(filename)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # uvicorn pode ter registrado handlers antes
    if log.hasHandlers():
        log.handlers.clear()
    log.addHandler(console_handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    log.info("Logging configurado. Nível %s.", logging.getLevelName(level))
