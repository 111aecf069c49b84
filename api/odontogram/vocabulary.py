# api/odontogram/vocabulary.py

"""
Vocabulario del odontograma: condiciones, superficies y materiales.

Los tres catálogos son abiertos: un código que no figura en la lista
(por ejemplo, agregado por otro cliente de la base) se conserva como
miembro "desconocido" con su valor original, se dibuja con el color
neutro y vuelve a guardarse sin cambios.
"""

from django.db import models


COLOR_NEUTRO = '#9ca3af'


class VocabularioAbierto:
    """Mixin para TextChoices que acepta códigos fuera del catálogo"""

    NOMBRE_DESCONOCIDO = 'UNKNOWN'

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str) or not value.strip():
            return None
        miembro = str.__new__(cls, value)
        miembro._name_ = cls.NOMBRE_DESCONOCIDO
        miembro._value_ = value
        miembro._label_ = value
        return miembro

    @property
    def is_known(self):
        return self._name_ in type(self).__members__


class Condition(VocabularioAbierto, models.TextChoices):
    HEALTHY = 'healthy', 'Sano'
    CARIES = 'caries', 'Caries'
    FILLED = 'filled', 'Obturado'
    CROWN = 'crown', 'Corona'
    IMPLANT = 'implant', 'Implante'
    MISSING = 'missing', 'Ausente'
    EXTRACTION = 'extraction', 'Extracción indicada'
    ROOT_CANAL = 'root_canal', 'Endodoncia'
    FRACTURE = 'fracture', 'Fractura'
    NOT_ERUPTED = 'not_erupted', 'Sin erupcionar'


class Surface(VocabularioAbierto, models.TextChoices):
    OCCLUSAL = 'O', 'Oclusal'
    MESIAL = 'M', 'Mesial'
    DISTAL = 'D', 'Distal'
    VESTIBULAR = 'V', 'Vestibular'
    LINGUAL = 'L', 'Lingual'
    PALATAL = 'P', 'Palatino'


class Material(VocabularioAbierto, models.TextChoices):
    NONE = 'none', 'Sin material'
    AMALGAM = 'amalgam', 'Amalgama'
    COMPOSITE = 'composite', 'Resina'
    CERAMIC = 'ceramic', 'Cerámica'
    GOLD = 'gold', 'Oro'
    TEMPORARY = 'temporary', 'Temporal'


COLORES_CONDICION = {
    Condition.HEALTHY: '#22c55e',
    Condition.CARIES: '#ef4444',
    Condition.FILLED: '#3b82f6',
    Condition.CROWN: '#eab308',
    Condition.IMPLANT: '#8b5cf6',
    Condition.MISSING: '#6b7280',
    Condition.EXTRACTION: '#dc2626',
    Condition.ROOT_CANAL: '#f97316',
    Condition.FRACTURE: '#be185d',
    Condition.NOT_ERUPTED: '#94a3b8',
}

# Condiciones que el tablero agrupa como "tratado"
CONDICIONES_TRATADAS = (
    Condition.FILLED,
    Condition.CROWN,
    Condition.ROOT_CANAL,
    Condition.IMPLANT,
)


def color_condicion(codigo):
    """Color de dibujo de una condición; desconocidas usan el neutro"""
    return COLORES_CONDICION.get(codigo, COLOR_NEUTRO)


def catalogo_condiciones():
    return [
        {'code': c.value, 'label': c.label, 'color': COLORES_CONDICION[c]}
        for c in Condition
    ]


def catalogo_superficies():
    return [{'code': s.value, 'label': s.label} for s in Surface]


def catalogo_materiales():
    return [{'code': m.value, 'label': m.label} for m in Material]
