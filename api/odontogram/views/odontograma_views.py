# api/odontogram/views/odontograma_views.py

"""
Endpoints del odontograma de un paciente: lectura, reemplazo completo,
edición múltiple y estadísticas del tablero.
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from api.odontogram.constants import FDIConstants
from api.odontogram.models import RegistroOdontograma
from api.odontogram.serializers import (
    ChartStateSerializer,
    EdicionLoteSerializer,
    HistorialQuerySerializer,
    RegistroOdontogramaSerializer,
    chart_a_dict,
)
from api.odontogram.services.odontogram_service import OdontogramaService

logger = logging.getLogger(__name__)


def _param_temporal(request) -> bool:
    valor = request.query_params.get('temporal', 'false').strip().lower()
    return valor in ('1', 'true', 'si', 'sí', 'yes')


def _param_notacion(request) -> str:
    notacion = request.query_params.get('notacion', 'fdi').strip().lower()
    if notacion not in FDIConstants.NOTACIONES:
        raise ValidationError({'notacion': [f"Notación '{notacion}' no soportada"]})
    return notacion


# ============================================================================
# ODONTOGRAMA DEL PACIENTE
# ============================================================================

@api_view(["GET", "PUT"])
@permission_classes([IsAuthenticated])
def odontograma_paciente(request, paciente_id):
    """
    GET /api/odontogram/pacientes/{paciente_id}/odontograma/?temporal=&notacion=
    PUT /api/odontogram/pacientes/{paciente_id}/odontograma/

    El PUT reemplaza todas las filas del paciente para la dentición enviada.
    """
    service = OdontogramaService()

    if request.method == "GET":
        notacion = _param_notacion(request)
        state = service.cargar_odontograma(paciente_id, _param_temporal(request))
        data = chart_a_dict(state, notacion)
        data['estadisticas'] = service.calcular_estadisticas(state)
        return Response(data, status=status.HTTP_200_OK)

    serializer = ChartStateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    state = serializer.to_chart_state()

    resultado = service.guardar_odontograma(paciente_id, state)
    logger.info(
        f"Odontograma {paciente_id} guardado por {request.user}: "
        f"{resultado['registros_guardados']} registros"
    )

    return Response(
        {
            'message': 'Odontograma guardado correctamente',
            **resultado,
            'odontograma': chart_a_dict(state),
        },
        status=status.HTTP_200_OK,
    )


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def aplicar_edicion_lote(request, paciente_id):
    """
    POST /api/odontogram/pacientes/{paciente_id}/odontograma/lote/
    {"selection": [11, 12, 13], "condition": "filled", "surfaces": ["O"], "material": "composite"}
    """
    serializer = EdicionLoteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        payload = serializer.to_payload()
    except ValueError as e:
        raise ValidationError({'surfaces': [str(e)]})

    resultado = OdontogramaService().aplicar_edicion_lote(
        paciente_id,
        serializer.validated_data['uses_primary_dentition'],
        serializer.validated_data['selection'],
        payload,
    )
    state = resultado.pop('state')

    return Response(
        {
            'message': f"Edición aplicada a {len(serializer.validated_data['selection'])} piezas",
            **resultado,
            'odontograma': chart_a_dict(state),
        },
        status=status.HTTP_200_OK,
    )


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def estadisticas_odontograma(request, paciente_id):
    """
    GET /api/odontogram/pacientes/{paciente_id}/odontograma/estadisticas/?temporal=&condiciones=caries,missing
    """
    codes = request.query_params.get('condiciones')
    codes = [c.strip() for c in codes.split(',') if c.strip()] if codes else None

    data = OdontogramaService().obtener_estadisticas(paciente_id, _param_temporal(request), codes)
    return Response(data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def historial_odontograma(request, paciente_id):
    """GET /api/odontogram/pacientes/{paciente_id}/odontograma/historial/"""
    query = HistorialQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    limite = query.validated_data.get('limite')

    data = OdontogramaService().obtener_historial(paciente_id, limite)
    return Response(data, status=status.HTTP_200_OK)


# ============================================================================
# REGISTROS (solo lectura, filtrables)
# ============================================================================

class RegistroOdontogramaViewSet(viewsets.ReadOnlyModelViewSet):
    """ViewSet de solo lectura sobre las filas almacenadas"""

    permission_classes = [IsAuthenticated]
    serializer_class = RegistroOdontogramaSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_fields = ['paciente_id', 'denticion_temporal', 'tooth_number', 'surface', 'condition']
    ordering_fields = ['fecha_registro', 'tooth_number']

    def get_queryset(self):
        return RegistroOdontograma.objects.select_related('registrado_por')
