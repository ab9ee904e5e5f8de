"""
Modelos de respuesta estándar del servidor mock.
"""

from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Respuesta de error. El cliente usa 'mensaje' como texto del error."""
    mensaje: str
    errores: Optional[List[Any]] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "mensaje": "Datos inválidos: precio: Field required",
                "errores": [{"campo": "precio", "detalle": "Field required"}]
            }
        }
    }


class HealthResponse(BaseModel):
    """Respuesta del health check."""
    status: str = "healthy"
    service: str = "productos-mock"
    version: str = "1.0.0"
    productos: int
    timestamp: datetime = Field(default_factory=datetime.now)
