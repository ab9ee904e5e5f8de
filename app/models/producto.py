"""
Modelos Pydantic de productos del servidor mock.

El servidor es la fuente de verdad de la validación: el cliente envía
el registro tal cual y un campo faltante o inválido termina en 400.
"""

from typing import Union

from pydantic import BaseModel, Field


class ProductoCreate(BaseModel):
    """Payload para crear un producto."""
    nombre: str = Field(
        ...,
        min_length=1,
        description="Nombre del producto",
        examples=["Café de Grano"]
    )
    precio: float = Field(
        ...,
        ge=0,
        description="Precio unitario",
        examples=[15.5]
    )
    stock: int = Field(
        ...,
        ge=0,
        description="Unidades disponibles",
        examples=[50]
    )


class Producto(ProductoCreate):
    """Producto almacenado, con id asignado por el servidor."""
    id: Union[int, str] = Field(..., description="Id asignado por el servidor")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "nombre": "Manzanas",
                "precio": 2.5,
                "stock": 100
            }
        }
    }
