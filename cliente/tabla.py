"""
Render de tablas de texto para listados de productos.

Columna "(index)" con la posición de cada fila, seguida de la unión de
claves de todas las filas en orden de aparición. Las filas que no son
dict se muestran en una columna "Values".
"""

from typing import Any, Dict, List, Sequence

INDEX_COLUMN = "(index)"
VALUES_COLUMN = "Values"


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _columnas(filas: Sequence[Any]) -> List[str]:
    columnas: List[str] = [INDEX_COLUMN]
    tiene_valores = False
    for fila in filas:
        if isinstance(fila, dict):
            for clave in fila:
                if str(clave) not in columnas:
                    columnas.append(str(clave))
        else:
            tiene_valores = True
    if tiene_valores:
        columnas.append(VALUES_COLUMN)
    return columnas


def _celdas(indice: int, fila: Any, columnas: List[str]) -> Dict[str, str]:
    celdas = {INDEX_COLUMN: str(indice)}
    if isinstance(fila, dict):
        for clave, valor in fila.items():
            celdas[str(clave)] = _format_cell(valor)
    else:
        celdas[VALUES_COLUMN] = _format_cell(fila)
    return {col: celdas.get(col, "") for col in columnas}


def render_tabla(filas: Sequence[Any]) -> str:
    """
    Renderizar filas como tabla con bordes.

    Args:
        filas: Secuencia de dicts (u otros valores)

    Returns:
        Tabla como string multilínea
    """
    columnas = _columnas(filas)
    cuerpo = [_celdas(i, fila, columnas) for i, fila in enumerate(filas)]

    anchos = {
        col: max([len(col)] + [len(celdas[col]) for celdas in cuerpo])
        for col in columnas
    }

    def borde(izq: str, medio: str, der: str) -> str:
        return izq + medio.join("─" * (anchos[col] + 2) for col in columnas) + der

    def linea(valores: Dict[str, str]) -> str:
        return "│" + "│".join(f" {valores[col]:<{anchos[col]}} " for col in columnas) + "│"

    lineas = [
        borde("┌", "┬", "┐"),
        linea({col: col for col in columnas}),
        borde("├", "┼", "┤"),
    ]
    lineas.extend(linea(celdas) for celdas in cuerpo)
    lineas.append(borde("└", "┴", "┘"))
    return "\n".join(lineas)
