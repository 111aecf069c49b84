# api/odontogram/views/catalogo_views.py

"""
Catálogo del odontograma (lectura): condiciones, superficies, materiales
y arcadas con sus etiquetas en cada notación.
"""

import logging

from django.core.cache import cache
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from api.odontogram.constants import FDIConstants
from api.odontogram.vocabulary import (
    COLOR_NEUTRO,
    catalogo_condiciones,
    catalogo_materiales,
    catalogo_superficies,
)

logger = logging.getLogger(__name__)


def _arcadas(uses_primary_dentition):
    superior, inferior = FDIConstants.arcadas(uses_primary_dentition)

    def pieza(fdi):
        return {
            'fdi': fdi,
            'universal': FDIConstants.universal_label(fdi),
            'palmer': FDIConstants.palmer_label(fdi),
            'tipo': FDIConstants.tipo_diente(fdi),
        }

    return {
        'superior': [pieza(t) for t in superior],
        'inferior': [pieza(t) for t in inferior],
    }


def construir_catalogo():
    return {
        'condiciones': catalogo_condiciones(),
        'superficies': catalogo_superficies(),
        'materiales': catalogo_materiales(),
        'color_desconocido': COLOR_NEUTRO,
        'notaciones': list(FDIConstants.NOTACIONES),
        'denticion': {
            'permanente': _arcadas(False),
            'temporal': _arcadas(True),
        },
    }


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def obtener_catalogo(request):
    """GET /api/odontogram/catalogo/"""
    cache_key = "odontograma:catalogo"
    data = cache.get(cache_key)

    if data is None:
        data = construir_catalogo()
        cache.set(cache_key, data, timeout=None)
        logger.debug("Catálogo del odontograma construido")

    return Response(data, status=status.HTTP_200_OK)
