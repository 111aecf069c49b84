# api/odontogram/tests/test_aggregation.py

from api.odontogram.aggregation import contar_condiciones, contar_todas, resumen_dashboard
from api.odontogram.chart import ChartState
from api.odontogram.codec import decode, encode
from api.odontogram.constants import FDIConstants

ADULTOS = FDIConstants.dientes_activos(False)


class TestConteoTablero:

    def setup_method(self):
        self.state = ChartState(uses_primary_dentition=False)

    def test_odontograma_vacio(self):
        assert contar_condiciones(self.state, ADULTOS) == {
            'healthy': 32, 'caries': 0, 'filled': 0, 'missing': 0,
        }

    def test_caries_en_16_y_ausencia_en_36(self):
        self.state.set_tooth(16, 'caries')
        self.state.set_tooth(36, 'missing')

        assert contar_condiciones(self.state, ADULTOS) == {
            'healthy': 30, 'caries': 1, 'filled': 0, 'missing': 1,
        }

        registros = encode(self.state)
        assert len(registros) == 2
        assert not any(r.is_surface for r in registros)
        assert decode(registros, False) == self.state

    def test_codigos_pedidos(self):
        self.state.set_tooth(11, 'crown')
        assert contar_condiciones(self.state, ADULTOS, ['crown', 'implant']) == {
            'crown': 1, 'implant': 0,
        }

    def test_superficies_no_cuentan(self):
        self.state.set_surface(16, 'O', 'caries')
        assert contar_condiciones(self.state, ADULTOS)['caries'] == 0

    def test_dientes_fuera_de_la_lista_no_cuentan(self):
        self.state.set_tooth(19, 'caries')
        assert contar_condiciones(self.state, ADULTOS)['caries'] == 0


class TestConteoCompleto:

    def test_suma_igual_al_total(self):
        state = ChartState(False)
        state.set_tooth(11, 'crown')
        state.set_tooth(21, 'sealant')
        state.set_tooth(46, 'root_canal')

        todas = contar_todas(state, ADULTOS)
        assert sum(todas.values()) == 32
        assert todas['sealant'] == 1
        assert todas['healthy'] == 29

    def test_temporal(self):
        state = ChartState(True)
        state.set_tooth(54, 'caries')
        dientes = FDIConstants.dientes_activos(True)
        assert sum(contar_todas(state, dientes).values()) == 20
        assert contar_condiciones(state, dientes)['healthy'] == 19


class TestResumen:

    def test_resumen_dashboard(self):
        state = ChartState(False)
        state.set_tooth(16, 'caries')
        state.set_tooth(36, 'missing')
        state.set_tooth(26, 'filled')
        state.set_tooth(11, 'crown')

        assert resumen_dashboard(state, ADULTOS) == {
            'total': 32,
            'healthy': 28,
            'with_conditions': 4,
            'caries': 1,
            'missing': 1,
            'treated': 2,
        }
