# api/odontogram/session.py

"""
Sesión de edición de un odontograma.

Es dueña del ChartState, de la selección múltiple y de la pila de
deshacer/rehacer. Cada edición (un diente, una limpieza o un lote)
es exactamente un paso de deshacer.
"""

import logging
from typing import FrozenSet, List

from api.odontogram.bulk_edit import EdicionDiente, aplicar_lote, alternar_seleccion
from api.odontogram.chart import ChartState, ToothRecord
from api.odontogram.constants import FDIConstants
from api.odontogram.exceptions import GuardadoEnCursoError

logger = logging.getLogger(__name__)


class SesionOdontograma:

    def __init__(self, paciente_id, service, uses_primary_dentition: bool = False):
        self.paciente_id = paciente_id
        self.service = service
        self.state = ChartState(uses_primary_dentition)
        self.seleccion: FrozenSet[int] = frozenset()
        self.modificado = False
        self.guardando = False
        self._deshacer: List[ChartState] = []
        self._rehacer: List[ChartState] = []

    @property
    def uses_primary_dentition(self) -> bool:
        return self.state.uses_primary_dentition

    def abrir(self) -> ChartState:
        """Carga el odontograma guardado y descarta el historial de edición"""
        self.state = self.service.cargar_odontograma(self.paciente_id, self.uses_primary_dentition)
        self._reiniciar()
        return self.state

    def cambiar_denticion(self, uses_primary_dentition: bool) -> ChartState:
        """Los cambios no guardados de la dentición anterior se descartan"""
        if self.modificado:
            logger.info(f"Odontograma {self.paciente_id}: cambios sin guardar descartados")
        self.state = ChartState(uses_primary_dentition)
        return self.abrir()

    def arcadas(self):
        return FDIConstants.arcadas(self.uses_primary_dentition)

    # ------------------------------------------------------------------
    # Edición
    # ------------------------------------------------------------------

    def editar_diente(self, tooth_id, payload: EdicionDiente) -> None:
        self._aplicar(aplicar_lote(self.state, [tooth_id], payload))

    def limpiar_diente(self, tooth_id) -> None:
        nuevo = self.state.copy()
        nuevo.clear_tooth(tooth_id)
        self._aplicar(nuevo)

    def alternar(self, tooth_id) -> FrozenSet[int]:
        self.seleccion = alternar_seleccion(self.seleccion, tooth_id)
        return self.seleccion

    def limpiar_seleccion(self) -> None:
        self.seleccion = frozenset()

    def aplicar_a_seleccion(self, payload: EdicionDiente) -> None:
        """Edición múltiple: un solo paso de deshacer para toda la selección"""
        if not self.seleccion:
            return
        self._aplicar(aplicar_lote(self.state, self.seleccion, payload))
        self.limpiar_seleccion()

    def registro(self, tooth_id) -> ToothRecord:
        """Datos para precargar el diálogo de edición"""
        return self.state.get(tooth_id)

    # ------------------------------------------------------------------
    # Deshacer / rehacer
    # ------------------------------------------------------------------

    @property
    def puede_deshacer(self) -> bool:
        return bool(self._deshacer)

    @property
    def puede_rehacer(self) -> bool:
        return bool(self._rehacer)

    def deshacer(self) -> bool:
        if not self._deshacer:
            return False
        self._rehacer.append(self.state)
        self.state = self._deshacer.pop()
        self.modificado = True
        return True

    def rehacer(self) -> bool:
        if not self._rehacer:
            return False
        self._deshacer.append(self.state)
        self.state = self._rehacer.pop()
        self.modificado = True
        return True

    # ------------------------------------------------------------------
    # Guardado
    # ------------------------------------------------------------------

    def guardar(self) -> dict:
        """
        Guarda el estado actual. Un segundo guardado mientras el primero
        sigue pendiente se rechaza. Si el guardado falla, el estado y la
        marca de modificado quedan como estaban para poder reintentar.
        """
        if self.guardando:
            raise GuardadoEnCursoError()

        self.guardando = True
        try:
            resultado = self.service.guardar_odontograma(self.paciente_id, self.state)
        finally:
            self.guardando = False

        self.modificado = False
        return resultado

    # ------------------------------------------------------------------

    def _aplicar(self, nuevo: ChartState) -> None:
        if nuevo == self.state:
            return
        self._deshacer.append(self.state)
        self._rehacer.clear()
        self.state = nuevo
        self.modificado = True

    def _reiniciar(self) -> None:
        self._deshacer.clear()
        self._rehacer.clear()
        self.seleccion = frozenset()
        self.modificado = False
