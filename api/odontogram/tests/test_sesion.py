# api/odontogram/tests/test_sesion.py
"""
Tests de la sesión de edición: deshacer/rehacer, selección y guardado.
El servicio se reemplaza por un doble en memoria.
"""
import uuid
from unittest.mock import MagicMock

import pytest

from api.odontogram.bulk_edit import EdicionDiente
from api.odontogram.chart import ChartState
from api.odontogram.exceptions import GuardadoEnCursoError, GuardadoOdontogramaError
from api.odontogram.session import SesionOdontograma


class ServicioFalso:

    def __init__(self):
        self.guardados = {}
        self.fallar = False

    def cargar_odontograma(self, paciente_id, uses_primary_dentition=False):
        state = self.guardados.get((paciente_id, uses_primary_dentition))
        return state.copy() if state else ChartState(uses_primary_dentition)

    def guardar_odontograma(self, paciente_id, state):
        if self.fallar:
            raise GuardadoOdontogramaError()
        self.guardados[(paciente_id, state.uses_primary_dentition)] = state.copy()
        return {'registros_guardados': len(state)}


class TestSesionOdontograma:

    def setup_method(self):
        self.paciente_id = uuid.uuid4()
        self.service = ServicioFalso()
        self.sesion = SesionOdontograma(self.paciente_id, self.service)
        self.sesion.abrir()

    def test_cada_edicion_es_un_paso_de_deshacer(self):
        self.sesion.editar_diente(16, EdicionDiente('caries'))
        self.sesion.editar_diente(17, EdicionDiente('missing'))
        assert self.sesion.modificado

        assert self.sesion.deshacer()
        assert 17 not in self.sesion.state
        assert 16 in self.sesion.state

        assert self.sesion.rehacer()
        assert 17 in self.sesion.state
        assert not self.sesion.puede_rehacer

    def test_lote_es_un_solo_paso(self):
        for tooth_id in (11, 12, 13):
            self.sesion.alternar(tooth_id)
        self.sesion.aplicar_a_seleccion(EdicionDiente('filled'))

        assert self.sesion.state.tooth_ids() == [11, 12, 13]
        assert self.sesion.seleccion == frozenset()

        self.sesion.deshacer()
        assert len(self.sesion.state) == 0
        assert not self.sesion.puede_deshacer

    def test_nueva_edicion_borra_rehacer(self):
        self.sesion.editar_diente(16, EdicionDiente('caries'))
        self.sesion.deshacer()
        self.sesion.editar_diente(26, EdicionDiente('caries'))
        assert not self.sesion.puede_rehacer

    def test_edicion_sin_cambios_no_crea_paso(self):
        self.sesion.limpiar_diente(16)
        assert not self.sesion.puede_deshacer
        assert not self.sesion.modificado

    def test_deshacer_sin_historial(self):
        assert not self.sesion.deshacer()
        assert not self.sesion.rehacer()

    def test_registro_precarga_el_dialogo(self):
        self.sesion.editar_diente(16, EdicionDiente('caries', 'sensible'))
        assert self.sesion.registro(16).note == 'sensible'
        assert self.sesion.registro(17).condition.value == 'healthy'

    def test_guardar(self):
        self.sesion.editar_diente(16, EdicionDiente('caries'))
        resultado = self.sesion.guardar()

        assert resultado == {'registros_guardados': 1}
        assert not self.sesion.modificado
        assert not self.sesion.guardando
        assert 16 in self.service.guardados[(self.paciente_id, False)]

    def test_guardado_fallido_conserva_estado(self):
        self.sesion.editar_diente(16, EdicionDiente('caries'))
        self.service.fallar = True

        with pytest.raises(GuardadoOdontogramaError):
            self.sesion.guardar()

        assert self.sesion.modificado
        assert not self.sesion.guardando
        assert 16 in self.sesion.state

        self.service.fallar = False
        self.sesion.guardar()
        assert not self.sesion.modificado

    def test_segundo_guardado_en_curso_es_rechazado(self):
        service = MagicMock()
        sesion = SesionOdontograma(self.paciente_id, service)

        def guardar_reentrante(paciente_id, state):
            # Otro guardado mientras este sigue pendiente
            with pytest.raises(GuardadoEnCursoError):
                sesion.guardar()
            return {'registros_guardados': 0}

        service.guardar_odontograma.side_effect = guardar_reentrante
        assert sesion.guardar() == {'registros_guardados': 0}
        assert service.guardar_odontograma.call_count == 1

    def test_cambiar_denticion_descarta_cambios(self):
        self.sesion.editar_diente(16, EdicionDiente('caries'))
        state = self.sesion.cambiar_denticion(True)

        assert state.uses_primary_dentition
        assert len(state) == 0
        assert not self.sesion.modificado
        assert not self.sesion.puede_deshacer
        assert len(self.sesion.arcadas()[0]) == 10

    def test_abrir_carga_lo_guardado(self):
        guardado = ChartState(False)
        guardado.set_tooth(46, 'crown')
        self.service.guardados[(self.paciente_id, False)] = guardado

        assert self.sesion.abrir() == guardado
