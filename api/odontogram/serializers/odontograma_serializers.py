# api/odontogram/serializers/odontograma_serializers.py

from rest_framework import serializers

from api.odontogram.bulk_edit import EdicionDiente
from api.odontogram.chart import ChartState, SurfaceRecord, ToothRecord
from api.odontogram.constants import FDIConstants
from api.odontogram.exceptions import DenticionIncompatibleError
from api.odontogram.models import (
    CODIGO_MAX_LENGTH,
    TOOTH_NUMBER_MAX,
    TOOTH_NUMBER_MIN,
    RegistroOdontograma,
)
from api.odontogram.vocabulary import Material, color_condicion


# =============================================================================
# ESCRITURA (UI -> ChartState)
# =============================================================================

class SurfaceRecordSerializer(serializers.Serializer):
    condition = serializers.CharField(max_length=CODIGO_MAX_LENGTH)
    material = serializers.CharField(max_length=CODIGO_MAX_LENGTH, required=False, allow_null=True, allow_blank=True)


class ToothRecordSerializer(serializers.Serializer):
    condition = serializers.CharField(max_length=CODIGO_MAX_LENGTH)
    note = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    surfaces = serializers.DictField(child=SurfaceRecordSerializer(), required=False, default=dict)

    def validate_surfaces(self, value):
        for codigo in value:
            if not codigo or len(codigo) > CODIGO_MAX_LENGTH:
                raise serializers.ValidationError(
                    f"Código de superficie '{codigo[:20]}' vacío o de más de {CODIGO_MAX_LENGTH} caracteres"
                )
        return value


class ChartStateSerializer(serializers.Serializer):
    """
    Odontograma completo enviado por la UI para reemplazar el guardado.
    {"uses_primary_dentition": false, "teeth": {"16": {"condition": "caries", ...}}}
    """
    uses_primary_dentition = serializers.BooleanField(default=False)
    teeth = serializers.DictField(child=ToothRecordSerializer(), required=False, default=dict)

    def validate_teeth(self, value):
        for key in value:
            try:
                tooth_id = int(key)
            except (TypeError, ValueError):
                raise serializers.ValidationError(f"'{key}' no es un código FDI numérico")
            # Fuera del catálogo se acepta; solo se limita a lo que la columna guarda
            if not TOOTH_NUMBER_MIN <= tooth_id <= TOOTH_NUMBER_MAX:
                raise serializers.ValidationError(f"El código {tooth_id} excede el rango almacenable")
        return value

    def to_chart_state(self) -> ChartState:
        data = self.validated_data
        state = ChartState(data['uses_primary_dentition'])
        try:
            for tooth_id, tooth in data['teeth'].items():
                surfaces = {
                    codigo: SurfaceRecord(s['condition'], s.get('material') or Material.NONE)
                    for codigo, s in tooth.get('surfaces', {}).items()
                }
                state.set_tooth_full(int(tooth_id), tooth['condition'], tooth.get('note') or '', surfaces)
        except DenticionIncompatibleError as e:
            raise serializers.ValidationError({'teeth': [e.message]})
        except ValueError as e:
            raise serializers.ValidationError({'teeth': [str(e)]})
        return state


class EdicionLoteSerializer(serializers.Serializer):
    """Edición múltiple desde el diálogo (modo "Multi-piezas")"""
    uses_primary_dentition = serializers.BooleanField(default=False)
    selection = serializers.ListField(
        child=serializers.IntegerField(min_value=TOOTH_NUMBER_MIN, max_value=TOOTH_NUMBER_MAX),
        allow_empty=False,
    )
    condition = serializers.CharField(max_length=CODIGO_MAX_LENGTH)
    note = serializers.CharField(required=False, allow_blank=True, default='')
    surfaces = serializers.ListField(child=serializers.CharField(max_length=CODIGO_MAX_LENGTH), required=False, default=list)
    material = serializers.CharField(max_length=CODIGO_MAX_LENGTH, required=False, default=Material.NONE.value)

    def to_payload(self) -> EdicionDiente:
        data = self.validated_data
        return EdicionDiente.desde_formulario(
            data['condition'],
            data['note'],
            data['surfaces'],
            data['material'],
        )


class HistorialQuerySerializer(serializers.Serializer):
    """Parámetros de ?limite= para la tabla de historial"""
    limite = serializers.IntegerField(min_value=1, max_value=500, required=False)


# =============================================================================
# LECTURA (ChartState -> UI)
# =============================================================================

def tooth_record_a_dict(record: ToothRecord) -> dict:
    return {
        'condition': record.condition.value,
        'note': record.note,
        'surfaces': {
            superficie.value: {
                'condition': datos.condition.value,
                'material': datos.material.value,
                'color': color_condicion(datos.condition),
            }
            for superficie, datos in record.surfaces.items()
        },
    }


def chart_a_dict(state: ChartState, notacion: str = 'fdi') -> dict:
    """
    Estructura que consume la capa de dibujo: arcadas en orden clínico con
    etiqueta en la notación pedida y color por diente, más el mapa completo.
    """
    superior, inferior = FDIConstants.arcadas(state.uses_primary_dentition)

    def pieza(tooth_id):
        record = state.get(tooth_id)
        return {
            'fdi': tooth_id,
            'label': FDIConstants.etiqueta(tooth_id, notacion),
            'tipo': FDIConstants.tipo_diente(tooth_id),
            'color': color_condicion(record.condition),
            'conocida': record.condition.is_known,
            **tooth_record_a_dict(record),
        }

    return {
        'uses_primary_dentition': state.uses_primary_dentition,
        'notacion': notacion,
        'arcada_superior': [pieza(t) for t in superior],
        'arcada_inferior': [pieza(t) for t in inferior],
        'teeth': {str(t): tooth_record_a_dict(r) for t, r in state.items()},
    }


class RegistroOdontogramaSerializer(serializers.ModelSerializer):
    registrado_por_nombre = serializers.SerializerMethodField()
    universal = serializers.CharField(read_only=True)

    class Meta:
        model = RegistroOdontograma
        fields = [
            'id',
            'paciente_id',
            'denticion_temporal',
            'tooth_number',
            'universal',
            'surface',
            'condition',
            'notes',
            'material',
            'registrado_por_nombre',
            'fecha_registro',
        ]
        read_only_fields = fields

    def get_registrado_por_nombre(self, obj):
        if not obj.registrado_por:
            return 'Sistema'
        return obj.registrado_por.get_full_name() or obj.registrado_por.get_username()
