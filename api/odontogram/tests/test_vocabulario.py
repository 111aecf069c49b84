# api/odontogram/tests/test_vocabulario.py

from api.odontogram.vocabulary import (
    COLOR_NEUTRO,
    Condition,
    Material,
    Surface,
    catalogo_condiciones,
    color_condicion,
)


class TestVocabularioAbierto:

    def test_codigos_conocidos(self):
        assert Condition('caries') is Condition.CARIES
        assert Condition.CARIES.is_known
        assert Surface('O') is Surface.OCCLUSAL
        assert Material('composite') is Material.COMPOSITE

    def test_codigo_desconocido_conserva_su_valor(self):
        raro = Condition('sealant')
        assert not raro.is_known
        assert raro.value == 'sealant'
        assert raro == 'sealant'
        assert isinstance(raro, Condition)

    def test_superficie_y_material_desconocidos(self):
        assert Surface('X').value == 'X'
        assert not Surface('X').is_known
        assert Material('zirconia').value == 'zirconia'

    def test_codigo_vacio_es_error(self):
        import pytest
        with pytest.raises(ValueError):
            Condition('')

    def test_color_de_desconocido_es_neutro(self):
        assert color_condicion(Condition('sealant')) == COLOR_NEUTRO
        assert color_condicion(Condition.CARIES) != COLOR_NEUTRO

    def test_catalogo_tiene_todas_las_condiciones(self):
        codigos = [c['code'] for c in catalogo_condiciones()]
        assert codigos[0] == 'healthy'
        assert len(codigos) == 10
