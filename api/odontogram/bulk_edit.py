# api/odontogram/bulk_edit.py

"""
Edición múltiple: aplica una misma condición / nota / superficies a un
conjunto de dientes seleccionados como una sola operación lógica.
El resolvedor no guarda estado; la selección pertenece a la sesión.
"""

from typing import FrozenSet, Iterable, Mapping, Optional

from api.odontogram.chart import ChartState, SurfaceRecord, como_surface_record
from api.odontogram.vocabulary import Condition, Material, Surface


class EdicionDiente:
    """Carga de una edición: lo que el diálogo de diente produce"""

    __slots__ = ('condition', 'note', 'surfaces')

    def __init__(self, condition, note: str = '', surfaces: Optional[Mapping] = None):
        self.condition = Condition(condition)
        self.note = note or ''
        # Mismas formas de superficie que ChartState.set_tooth_full
        self.surfaces = {
            Surface(s): como_surface_record(v)
            for s, v in (surfaces or {}).items()
        }

    @classmethod
    def desde_formulario(cls, condition, note='', surface_codes: Iterable = (), material=Material.NONE):
        """
        Cada superficie marcada recibe la condición y el material elegidos,
        igual que en el diálogo de edición.
        """
        surfaces = {
            Surface(codigo): SurfaceRecord(condition, material)
            for codigo in surface_codes
        }
        return cls(condition, note, surfaces)

    def __repr__(self):
        return f"EdicionDiente({self.condition.value!r}, {self.note!r}, {self.surfaces!r})"


def aplicar_lote(state: ChartState, selection: Iterable, payload: EdicionDiente) -> ChartState:
    """
    Devuelve un ChartState nuevo con set_tooth_full aplicado a cada diente
    seleccionado. El estado de entrada no se modifica.
    """
    resultado = state.copy()
    for tooth_id in sorted(int(t) for t in selection):
        resultado.set_tooth_full(tooth_id, payload.condition, payload.note, payload.surfaces)
    return resultado


def alternar_seleccion(selection: Iterable, tooth_id) -> FrozenSet[int]:
    """Clic sobre un diente: lo agrega o, si ya estaba, lo quita"""
    actual = frozenset(int(t) for t in selection)
    tooth_id = int(tooth_id)
    if tooth_id in actual:
        return actual - {tooth_id}
    return actual | {tooth_id}
