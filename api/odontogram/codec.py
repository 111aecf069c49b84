# api/odontogram/codec.py

"""
Codec de persistencia: ChartState <-> registros planos.

Cada diente presente genera una fila de nivel diente (condición, nota) y
una fila adicional por superficie (condición, material). Las filas no
tienen estructura anidada y el orden de emisión no importa.
"""

import logging
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from api.odontogram.chart import ChartState, SurfaceRecord, ToothRecord
from api.odontogram.constants import FDIConstants
from api.odontogram.exceptions import RegistroInvalidoError
from api.odontogram.vocabulary import Material, Surface

logger = logging.getLogger(__name__)


class StoredRecord(NamedTuple):
    """Fila almacenada; surface=None indica fila de nivel diente"""

    tooth_number: int
    condition: str
    surface: Optional[str] = None
    notes: str = ''
    material: Optional[str] = None

    @property
    def is_surface(self) -> bool:
        return self.surface is not None

    def sort_key(self):
        return (
            self.tooth_number,
            self.surface or '',
            self.condition,
            self.notes or '',
            self.material or '',
        )


def encode(state: ChartState) -> List[StoredRecord]:
    """ChartState -> registros planos. Los dientes ausentes no generan filas."""
    registros = []
    for tooth_id, record in state.items():
        registros.append(StoredRecord(
            tooth_number=tooth_id,
            condition=str(record.condition.value),
            notes=record.note,
        ))
        for superficie, datos in record.surfaces.items():
            registros.append(StoredRecord(
                tooth_number=tooth_id,
                condition=str(datos.condition.value),
                surface=str(superficie.value),
                material=str(datos.material.value),
            ))
    return registros


def decode(records: Iterable, uses_primary_dentition: bool = False) -> ChartState:
    """
    Registros planos -> ChartState.

    Idempotente e independiente del orden: las filas se normalizan y se
    aplican en un orden canónico, de modo que filas duplicadas se resuelven
    igual para cualquier permutación.
    Las filas sin material (esquema antiguo) se cargan con material "none".
    """
    state = ChartState(uses_primary_dentition)
    esperada = 'temporal' if uses_primary_dentition else 'permanente'

    normalizados = sorted(
        (registro_desde_dict(r) if not isinstance(r, StoredRecord) else r for r in records),
        key=StoredRecord.sort_key,
    )

    for registro in normalizados:
        denticion = FDIConstants.denticion_de(registro.tooth_number)
        if denticion is not None and denticion != esperada:
            logger.warning(
                f"Registro del diente {registro.tooth_number} ({denticion}) "
                f"ignorado al cargar un odontograma {esperada}"
            )
            continue

        actual = state.get(registro.tooth_number)
        try:
            if registro.is_surface:
                surfaces = dict(actual.surfaces)
                surfaces[Surface(registro.surface)] = SurfaceRecord(
                    registro.condition,
                    registro.material or Material.NONE,
                )
                nuevo = ToothRecord(actual.condition, actual.note, surfaces)
            else:
                nuevo = ToothRecord(registro.condition, registro.notes, actual.surfaces)
        except ValueError as e:
            raise RegistroInvalidoError(
                f"Registro inválido para el diente {registro.tooth_number}: {e}"
            ) from e

        state.set_tooth_full(
            registro.tooth_number,
            nuevo.condition,
            nuevo.note,
            nuevo.surfaces,
        )

    return state


def registro_desde_dict(data: Dict[str, Any]) -> StoredRecord:
    """Convierte la forma externa {tooth_number, surface?, condition, notes?, material?}"""
    try:
        tooth_number = int(data['tooth_number'])
    except (KeyError, TypeError, ValueError):
        raise RegistroInvalidoError(f"tooth_number inválido en el registro {data!r}") from None

    condition = data.get('condition')
    if not isinstance(condition, str) or not condition.strip():
        raise RegistroInvalidoError(f"Registro del diente {tooth_number} sin condición")

    surface = data.get('surface') or None
    material = data.get('material') or None

    return StoredRecord(
        tooth_number=tooth_number,
        condition=condition,
        surface=surface,
        notes=data.get('notes') or '',
        material=material,
    )


def registro_a_dict(registro: StoredRecord) -> Dict[str, Any]:
    data = {
        'tooth_number': registro.tooth_number,
        'condition': registro.condition,
    }
    if registro.is_surface:
        data['surface'] = registro.surface
        data['material'] = registro.material
    else:
        data['notes'] = registro.notes
    return data
