"""
Configuración centralizada de logging.

Cada servicio escribe a consola y, si LOG_TO_FILE está activo, a su
propio archivo en logs/:
- logs/cliente.log     → Cliente de inventario / script de demo
- logs/mock_server.log → Servidor mock de productos

Los archivos rotan a medianoche y se eliminan después de N días.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler

from config.constants import LogLevel
from config.settings import settings

# Directorio de logs (relativo a la raíz del proyecto)
LOGS_DIR = Path(__file__).resolve().parent.parent / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level_name: str) -> int:
    """Convierte el nombre de nivel de settings a constante de logging."""
    try:
        level = LogLevel(level_name.upper())
    except ValueError:
        return logging.INFO
    return getattr(logging, level.value)


def setup_logging(service_name: str = "cliente") -> logging.Logger:
    """
    Configura logging para un servicio específico.

    Args:
        service_name: Nombre del servicio. Define el archivo de log:
                     - "cliente"     → logs/cliente.log
                     - "mock_server" → logs/mock_server.log

    Returns:
        Logger raíz configurado
    """
    log_level = _resolve_level(settings.general.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Limpiar handlers existentes (evita duplicados en reloads)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: Consola (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)

    if not settings.logging.LOG_TO_FILE:
        logger.debug(f"Logging iniciado [{service_name}] → stdout")
        return root_logger

    # Handler 2: Archivo con rotación diaria
    get_logs_directory().mkdir(exist_ok=True)
    log_file = get_log_file_path(service_name)
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=settings.logging.LOG_RETENTION_DAYS,
        encoding="utf-8",
        utc=False
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    # Sufijo para archivos rotados: cliente.log.2026-01-23
    file_handler.suffix = "%Y-%m-%d"

    root_logger.addHandler(file_handler)

    logger.info(f"Logging iniciado [{service_name}] → {log_file}")

    return root_logger


def get_log_file_path(service_name: str = "cliente") -> Path:
    """Retorna la ruta al archivo de log de un servicio."""
    return get_logs_directory() / f"{service_name}.log"


def get_logs_directory() -> Path:
    """Retorna el directorio de logs."""
    return LOGS_DIR
