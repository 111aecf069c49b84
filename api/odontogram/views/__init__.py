# api/odontogram/views/__init__.py
"""
Inicializador del módulo views
Exporta las vistas del odontograma
"""

from .catalogo_views import obtener_catalogo

from .odontograma_views import (
    odontograma_paciente,
    aplicar_edicion_lote,
    estadisticas_odontograma,
    historial_odontograma,
    RegistroOdontogramaViewSet,
)

__all__ = [
    'obtener_catalogo',
    'odontograma_paciente',
    'aplicar_edicion_lote',
    'estadisticas_odontograma',
    'historial_odontograma',
    'RegistroOdontogramaViewSet',
]
