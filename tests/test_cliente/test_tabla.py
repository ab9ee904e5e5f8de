"""
Tests del render de tablas.

python -m pytest tests/test_cliente/test_tabla.py
"""

from cliente.tabla import render_tabla


class TestRenderTabla:
    """Tests de render_tabla."""

    def test_single_product(self):
        """Encabezado con (index) y las claves del producto."""
        tabla = render_tabla([{"id": 1, "nombre": "Manzanas", "precio": 2.5, "stock": 100}])
        lineas = tabla.splitlines()

        assert len(lineas) == 5
        assert lineas[0].startswith("┌") and lineas[-1].startswith("└")
        assert lineas[1].split("│")[1:-1] == [" (index) ", " id ", " nombre   ", " precio ", " stock "]
        assert "Manzanas" in lineas[3]
        assert "2.5" in lineas[3]

    def test_all_lines_same_width(self):
        tabla = render_tabla([
            {"id": 1, "nombre": "Manzanas"},
            {"id": 2, "nombre": "Café de Grano muy largo"},
        ])

        anchos = {len(linea) for linea in tabla.splitlines()}
        assert len(anchos) == 1

    def test_union_of_keys_in_first_seen_order(self):
        tabla = render_tabla([{"id": 1}, {"nombre": "X", "id": 2}])
        encabezado = [c.strip() for c in tabla.splitlines()[1].split("│")[1:-1]]

        assert encabezado == ["(index)", "id", "nombre"]

    def test_missing_values_are_blank(self):
        tabla = render_tabla([{"id": 1, "nombre": None}])

        assert "None" not in tabla

    def test_non_dict_rows_use_values_column(self):
        tabla = render_tabla(["a", "b"])
        encabezado = [c.strip() for c in tabla.splitlines()[1].split("│")[1:-1]]

        assert encabezado == ["(index)", "Values"]

    def test_empty_list_renders_header_only(self):
        lineas = render_tabla([]).splitlines()

        assert len(lineas) == 4
        assert "(index)" in lineas[1]
