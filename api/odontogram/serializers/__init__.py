# api/odontogram/serializers/__init__.py
from .odontograma_serializers import (
    SurfaceRecordSerializer,
    ToothRecordSerializer,
    ChartStateSerializer,
    EdicionLoteSerializer,
    HistorialQuerySerializer,
    RegistroOdontogramaSerializer,
    chart_a_dict,
    tooth_record_a_dict,
)

__all__ = [
    'SurfaceRecordSerializer',
    'ToothRecordSerializer',
    'ChartStateSerializer',
    'EdicionLoteSerializer',
    'HistorialQuerySerializer',
    'RegistroOdontogramaSerializer',
    'chart_a_dict',
    'tooth_record_a_dict',
]
