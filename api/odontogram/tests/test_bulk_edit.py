# api/odontogram/tests/test_bulk_edit.py
"""
Tests de la edición múltiple (modo Multi-piezas).
"""
import pytest

from api.odontogram.bulk_edit import EdicionDiente, alternar_seleccion, aplicar_lote
from api.odontogram.chart import ChartState, SurfaceRecord
from api.odontogram.exceptions import DenticionIncompatibleError
from api.odontogram.vocabulary import Material, Surface


class TestAplicarLote:

    def setup_method(self):
        self.state = ChartState(False)
        self.state.set_tooth_full(11, 'caries', 'previo', {'M': 'caries'})
        self.payload = EdicionDiente.desde_formulario('filled', 'restauración', ['O', 'D'], 'composite')

    def test_igual_a_aplicar_diente_por_diente(self):
        seleccion = [13, 11, 12]
        resultado = aplicar_lote(self.state, seleccion, self.payload)

        esperado = self.state.copy()
        for tooth_id in seleccion:
            esperado.set_tooth_full(tooth_id, self.payload.condition, self.payload.note, self.payload.surfaces)

        assert resultado == esperado

    def test_no_modifica_el_estado_de_entrada(self):
        antes = self.state.copy()
        aplicar_lote(self.state, [12, 13], self.payload)
        assert self.state == antes

    def test_reemplaza_superficies_previas(self):
        resultado = aplicar_lote(self.state, [11], self.payload)
        record = resultado.get(11)
        assert set(record.surfaces) == {Surface.OCCLUSAL, Surface.DISTAL}
        assert record.surfaces[Surface.OCCLUSAL] == SurfaceRecord('filled', Material.COMPOSITE)

    def test_seleccion_vacia(self):
        assert aplicar_lote(self.state, [], self.payload) == self.state

    def test_diente_de_otra_denticion(self):
        with pytest.raises(DenticionIncompatibleError):
            aplicar_lote(self.state, [11, 55], self.payload)

    def test_payload_sano_limpia_los_dientes(self):
        resultado = aplicar_lote(self.state, [11], EdicionDiente('healthy'))
        assert 11 not in resultado


class TestFormasDeSuperficie:
    """EdicionDiente acepta las mismas formas de superficie que set_tooth_full"""

    @pytest.mark.parametrize('valor, esperado', [
        ({'condition': 'filled', 'material': 'composite'}, SurfaceRecord('filled', 'composite')),
        ({'condition': 'caries'}, SurfaceRecord('caries')),
        (('filled', 'gold'), SurfaceRecord('filled', 'gold')),
        ('caries', SurfaceRecord('caries', Material.NONE)),
        (SurfaceRecord('crown', 'ceramic'), SurfaceRecord('crown', 'ceramic')),
    ])
    def test_formas_aceptadas(self, valor, esperado):
        payload = EdicionDiente('filled', '', {'O': valor})
        assert payload.surfaces == {Surface.OCCLUSAL: esperado}
        assert payload.surfaces[Surface.OCCLUSAL].condition.is_known

    @pytest.mark.parametrize('valor', [
        {'condition': 'filled', 'material': 'composite'},
        ('filled', 'amalgam'),
        'caries',
    ])
    def test_lote_igual_a_set_tooth_full(self, valor):
        state = ChartState(False)
        resultado = aplicar_lote(state, [16, 26], EdicionDiente('filled', 'n', {'M': valor}))

        esperado = ChartState(False)
        for tooth_id in (16, 26):
            esperado.set_tooth_full(tooth_id, 'filled', 'n', {'M': valor})

        assert resultado == esperado


class TestSeleccion:

    def test_alternar(self):
        seleccion = alternar_seleccion(frozenset(), 11)
        assert seleccion == {11}
        seleccion = alternar_seleccion(seleccion, 12)
        assert seleccion == {11, 12}
        seleccion = alternar_seleccion(seleccion, 11)
        assert seleccion == {12}

    def test_no_modifica_la_entrada(self):
        original = {11}
        alternar_seleccion(original, 12)
        assert original == {11}
