# api/odontogram/tests/test_chart_state.py
"""
Tests del estado en memoria del odontograma (ChartState).
"""
import pytest

from api.odontogram.chart import ChartState, SurfaceRecord, ToothRecord
from api.odontogram.exceptions import DenticionIncompatibleError
from api.odontogram.vocabulary import Condition, Material, Surface


class TestChartState:

    def setup_method(self):
        self.state = ChartState(uses_primary_dentition=False)

    def test_diente_sin_registro_es_sano(self):
        record = self.state.get(16)
        assert record == ToothRecord.default()
        assert record.condition is Condition.HEALTHY
        assert record.note == ''
        assert record.surfaces == {}
        assert len(self.state) == 0

    def test_set_tooth(self):
        self.state.set_tooth(16, 'caries', 'dolor al frío')
        record = self.state.get(16)
        assert record.condition is Condition.CARIES
        assert record.note == 'dolor al frío'

    def test_set_tooth_conserva_superficies(self):
        self.state.set_tooth_full(16, 'filled', '', {'O': ('filled', 'amalgam')})
        self.state.set_tooth(16, 'crown')
        record = self.state.get(16)
        assert record.condition is Condition.CROWN
        assert record.surfaces[Surface.OCCLUSAL] == SurfaceRecord('filled', 'amalgam')

    def test_set_tooth_full_reemplaza_superficies(self):
        self.state.set_tooth_full(16, 'filled', '', {'O': 'filled', 'M': 'filled'})
        self.state.set_tooth_full(16, 'filled', '', {'D': 'caries'})
        assert list(self.state.get(16).surfaces) == [Surface.DISTAL]

    def test_guardar_registro_por_defecto_elimina_la_entrada(self):
        self.state.set_tooth(16, 'caries')
        assert 16 in self.state

        self.state.set_tooth_full(16, 'healthy', '', {})
        assert 16 not in self.state
        assert self.state == ChartState(False)

    def test_clear_tooth(self):
        self.state.set_tooth(16, 'caries')
        self.state.clear_tooth(16)
        assert 16 not in self.state
        # Limpiar un diente sin registro no falla
        self.state.clear_tooth(17)

    def test_get_devuelve_copia(self):
        self.state.set_tooth_full(16, 'filled', 'n', {'O': 'filled'})
        record = self.state.get(16)
        record.note = 'modificada'
        record.surfaces.clear()
        assert self.state.get(16).note == 'n'
        assert len(self.state.get(16).surfaces) == 1

    def test_set_surface(self):
        self.state.set_tooth(36, 'caries', 'nota')
        self.state.set_surface(36, 'M', 'filled', Material.COMPOSITE)
        record = self.state.get(36)
        assert record.condition is Condition.CARIES
        assert record.note == 'nota'
        assert record.surfaces[Surface.MESIAL].material is Material.COMPOSITE

    def test_diente_de_otra_denticion_es_rechazado(self):
        with pytest.raises(DenticionIncompatibleError):
            self.state.set_tooth(55, 'caries')
        with pytest.raises(DenticionIncompatibleError):
            self.state.get(55)

        temporal = ChartState(uses_primary_dentition=True)
        with pytest.raises(DenticionIncompatibleError):
            temporal.set_tooth(16, 'caries')

    def test_codigo_fuera_de_ambos_juegos_se_acepta(self):
        self.state.set_tooth(19, 'implant')
        assert self.state.get(19).condition is Condition.IMPLANT
        assert self.state.tooth_ids() == [19]

    def test_condicion_desconocida_se_conserva(self):
        self.state.set_tooth(21, 'sealant')
        record = self.state.get(21)
        assert record.condition.value == 'sealant'
        assert not record.condition.is_known

    def test_copy_es_independiente(self):
        self.state.set_tooth(16, 'caries')
        copia = self.state.copy()
        copia.set_tooth(17, 'missing')
        assert 17 not in self.state
        assert copia != self.state

    def test_items_ordenados(self):
        self.state.set_tooth(36, 'missing')
        self.state.set_tooth(11, 'caries')
        assert [t for t, _ in self.state.items()] == [11, 36]

    def test_nota_none_equivale_a_vacia(self):
        self.state.set_tooth(16, 'caries', None)
        assert self.state.get(16).note == ''
