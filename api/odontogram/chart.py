# api/odontogram/chart.py

"""
Estado del odontograma de un paciente (Chart State).

Estructura: código FDI -> ToothRecord(condición, nota, superficies)
Un diente ausente del mapa equivale a "sano, sin nota, sin superficies";
por eso guardar el registro por defecto elimina la entrada.
"""

from typing import Dict, Iterator, Mapping, Optional, Tuple

from api.odontogram.constants import FDIConstants
from api.odontogram.exceptions import DenticionIncompatibleError
from api.odontogram.vocabulary import Condition, Material, Surface


class SurfaceRecord:
    """Condición y material de una superficie"""

    __slots__ = ('condition', 'material')

    def __init__(self, condition, material=Material.NONE):
        self.condition = Condition(condition)
        self.material = Material(material or Material.NONE)

    def __eq__(self, other):
        if not isinstance(other, SurfaceRecord):
            return NotImplemented
        return self.condition == other.condition and self.material == other.material

    def __hash__(self):
        return hash((str(self.condition), str(self.material)))

    def __repr__(self):
        return f"SurfaceRecord({self.condition.value!r}, {self.material.value!r})"


class ToothRecord:
    """Registro completo de un diente"""

    __slots__ = ('condition', 'note', 'surfaces')

    def __init__(
        self,
        condition=Condition.HEALTHY,
        note: Optional[str] = '',
        surfaces: Optional[Mapping] = None,
    ):
        self.condition = Condition(condition)
        self.note = note or ''
        self.surfaces: Dict[Surface, SurfaceRecord] = {
            Surface(superficie): como_surface_record(valor)
            for superficie, valor in (surfaces or {}).items()
        }

    @classmethod
    def default(cls) -> 'ToothRecord':
        """Registro implícito de todo diente no registrado"""
        return cls(Condition.HEALTHY, '', {})

    @property
    def is_default(self) -> bool:
        return self == ToothRecord.default()

    def copy(self) -> 'ToothRecord':
        return ToothRecord(self.condition, self.note, self.surfaces)

    def __eq__(self, other):
        if not isinstance(other, ToothRecord):
            return NotImplemented
        return (
            self.condition == other.condition
            and self.note == other.note
            and self.surfaces == other.surfaces
        )

    def __repr__(self):
        return f"ToothRecord({self.condition.value!r}, {self.note!r}, {self.surfaces!r})"


def como_surface_record(valor) -> SurfaceRecord:
    """Acepta SurfaceRecord, {condition, material}, tupla o solo el código"""
    if isinstance(valor, SurfaceRecord):
        return SurfaceRecord(valor.condition, valor.material)
    if isinstance(valor, Mapping):
        return SurfaceRecord(valor['condition'], valor.get('material'))
    # Tupla (condition, material) o solo la condición
    if isinstance(valor, (tuple, list)):
        return SurfaceRecord(*valor)
    return SurfaceRecord(valor)


class ChartState:
    """
    Odontograma en memoria de un paciente para una dentición.

    No valida plausibilidad clínica. Solo rechaza dientes de la otra
    dentición conocida; los códigos fuera de ambos juegos se guardan
    y se conservan en el ciclo guardar/cargar.
    """

    def __init__(self, uses_primary_dentition: bool = False, teeth: Optional[Mapping] = None):
        self.uses_primary_dentition = bool(uses_primary_dentition)
        self._teeth: Dict[int, ToothRecord] = {}
        for tooth_id, record in (teeth or {}).items():
            self._store(tooth_id, record.copy())

    # ------------------------------------------------------------------
    # API de mutación
    # ------------------------------------------------------------------

    def set_tooth(self, tooth_id, condition, note='') -> None:
        """Reemplaza condición y nota; las superficies existentes se conservan"""
        actual = self.get(tooth_id)
        self._store(tooth_id, ToothRecord(condition, note, actual.surfaces))

    def set_tooth_full(self, tooth_id, condition, note='', surfaces=None) -> None:
        """Reemplazo completo del registro del diente"""
        self._store(tooth_id, ToothRecord(condition, note, surfaces))

    def clear_tooth(self, tooth_id) -> None:
        self._teeth.pop(self._validar_id(tooth_id), None)

    def get(self, tooth_id) -> ToothRecord:
        """Registro del diente o el registro por defecto (copia, no referencia)"""
        record = self._teeth.get(self._validar_id(tooth_id))
        if record is None:
            return ToothRecord.default()
        return record.copy()

    def set_surface(self, tooth_id, surface, condition, material=Material.NONE) -> None:
        """Actualiza una sola superficie sin tocar el resto del diente"""
        actual = self.get(tooth_id)
        surfaces = dict(actual.surfaces)
        surfaces[Surface(surface)] = SurfaceRecord(condition, material)
        self._store(tooth_id, ToothRecord(actual.condition, actual.note, surfaces))

    # ------------------------------------------------------------------

    def copy(self) -> 'ChartState':
        return ChartState(self.uses_primary_dentition, self._teeth)

    def items(self) -> Iterator[Tuple[int, ToothRecord]]:
        for tooth_id in sorted(self._teeth):
            yield tooth_id, self._teeth[tooth_id].copy()

    def tooth_ids(self):
        return sorted(self._teeth)

    def __contains__(self, tooth_id):
        try:
            return int(tooth_id) in self._teeth
        except (TypeError, ValueError):
            return False

    def __len__(self):
        return len(self._teeth)

    def __eq__(self, other):
        if not isinstance(other, ChartState):
            return NotImplemented
        return (
            self.uses_primary_dentition == other.uses_primary_dentition
            and self._teeth == other._teeth
        )

    def __repr__(self):
        return f"ChartState(primary={self.uses_primary_dentition}, teeth={self._teeth!r})"

    # ------------------------------------------------------------------

    def _store(self, tooth_id, record: ToothRecord) -> None:
        tooth_id = self._validar_id(tooth_id)
        if record.is_default:
            self._teeth.pop(tooth_id, None)
        else:
            self._teeth[tooth_id] = record

    def _validar_id(self, tooth_id) -> int:
        tooth_id = int(tooth_id)
        denticion = FDIConstants.denticion_de(tooth_id)
        esperada = 'temporal' if self.uses_primary_dentition else 'permanente'
        if denticion is not None and denticion != esperada:
            raise DenticionIncompatibleError(
                f"El diente {tooth_id} es de dentición {denticion} y el odontograma es {esperada}"
            )
        return tooth_id
