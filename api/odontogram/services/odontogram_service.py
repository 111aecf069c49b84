# odontogram/services/odontogram_service.py
"""
Servicio del odontograma: une el codec, el repositorio y la caché.
Maneja: registros planos <-> ChartState, estadísticas y edición múltiple
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError

from api.odontogram.aggregation import contar_condiciones, contar_todas, resumen_dashboard
from api.odontogram.bulk_edit import EdicionDiente, aplicar_lote
from api.odontogram.chart import ChartState
from api.odontogram.codec import decode, encode, registro_a_dict, registro_desde_dict
from api.odontogram.constants import FDIConstants
from api.odontogram.exceptions import GuardadoOdontogramaError
from api.odontogram.repositories.odontogram_repositories import OdontogramaRepository
from api.odontogram.vocabulary import Condition

logger = logging.getLogger(__name__)


def _cache_key(paciente_id, uses_primary_dentition) -> str:
    denticion = 'temporal' if uses_primary_dentition else 'permanente'
    return f"odontograma:registros:{paciente_id}:{denticion}"


class OdontogramaService:
    """
    Servicio para cargar y guardar odontogramas de pacientes.
    Ninguna operación modifica el ChartState recibido.
    """

    def __init__(self, repository: Optional[OdontogramaRepository] = None):
        self.repository = repository or OdontogramaRepository()

    @property
    def cache_timeout(self) -> int:
        return getattr(settings, 'ODONTOGRAMA_CACHE_TIMEOUT', 300)

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    def cargar_odontograma(self, paciente_id, uses_primary_dentition: bool = False) -> ChartState:
        """Reconstruye el odontograma desde las filas almacenadas (con caché)"""
        cache_key = _cache_key(paciente_id, uses_primary_dentition)
        filas = cache.get(cache_key)

        if filas is None:
            registros = self.repository.obtener_registros(paciente_id, uses_primary_dentition)
            filas = [registro_a_dict(r) for r in registros]
            cache.set(cache_key, filas, timeout=self.cache_timeout)
            logger.debug(f"Odontograma {paciente_id}: {len(filas)} filas leídas de BD")

        return decode((registro_desde_dict(f) for f in filas), uses_primary_dentition)

    def obtener_estadisticas(
        self,
        paciente_id,
        uses_primary_dentition: bool = False,
        codes: Optional[Iterable] = None,
    ) -> Dict[str, Any]:
        state = self.cargar_odontograma(paciente_id, uses_primary_dentition)
        return self.calcular_estadisticas(state, codes)

    @staticmethod
    def calcular_estadisticas(state: ChartState, codes: Optional[Iterable] = None) -> Dict[str, Any]:
        dientes = FDIConstants.dientes_activos(state.uses_primary_dentition)
        return {
            'conteo': contar_condiciones(state, dientes, codes),
            'todas': contar_todas(state, dientes),
            'resumen': resumen_dashboard(state, dientes),
        }

    def obtener_historial(self, paciente_id, limite: Optional[int] = None) -> List[Dict[str, Any]]:
        """Últimas filas guardadas, para la tabla de historial"""
        limite = limite or getattr(settings, 'ODONTOGRAMA_HISTORIAL_LIMITE', 20)
        historial = []
        for fila in self.repository.historial(paciente_id, limite):
            condicion = Condition(fila.condition)
            usuario = fila.registrado_por
            historial.append({
                'fecha': fila.fecha_registro.strftime('%d/%m/%Y'),
                'pieza': fila.tooth_number,
                'caras': fila.surface or '-',
                'estado': condicion.label,
                'creador': (usuario.get_full_name() or usuario.get_username()) if usuario else 'Sistema',
            })
        return historial

    # ------------------------------------------------------------------
    # Escritura
    # ------------------------------------------------------------------

    def guardar_odontograma(self, paciente_id, state: ChartState) -> Dict[str, Any]:
        """
        Reemplaza todas las filas del paciente/dentición por la codificación
        de `state`. Si el almacenamiento falla no se reporta éxito: se lanza
        GuardadoOdontogramaError y las filas anteriores quedan intactas.
        """
        registros = encode(state)
        cache_key = _cache_key(paciente_id, state.uses_primary_dentition)

        try:
            guardados = self.repository.reemplazar_registros(
                paciente_id, state.uses_primary_dentition, registros
            )
        except DatabaseError as e:
            logger.error(f"Error guardando odontograma {paciente_id}: {e}", exc_info=True)
            raise GuardadoOdontogramaError(
                f"No se pudo guardar el odontograma del paciente {paciente_id}"
            ) from e
        finally:
            cache.delete(cache_key)

        return {
            'paciente_id': str(paciente_id),
            'denticion_temporal': state.uses_primary_dentition,
            'registros_guardados': guardados,
            'dientes_registrados': state.tooth_ids(),
        }

    def aplicar_edicion_lote(
        self,
        paciente_id,
        uses_primary_dentition: bool,
        selection: Iterable,
        payload: EdicionDiente,
    ) -> Dict[str, Any]:
        """Carga, aplica la edición múltiple y guarda en un solo paso"""
        state = self.cargar_odontograma(paciente_id, uses_primary_dentition)
        nuevo = aplicar_lote(state, selection, payload)
        resultado = self.guardar_odontograma(paciente_id, nuevo)
        resultado['state'] = nuevo
        return resultado
