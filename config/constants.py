from enum import Enum


class Endpoints(str, Enum):
    """Rutas de la API de inventario"""

    PRODUCTOS = "/productos"
    HEALTH = "/health"


class HTTPMethod(str, Enum):
    """Metodos HTTP usados por el cliente"""

    GET = "GET"
    POST = "POST"


class LogLevel(str, Enum):
    """Niveles de logging"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Content-Type que habilita el parseo JSON de una respuesta
JSON_CONTENT_TYPE = "application/json"
