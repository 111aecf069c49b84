# api/odontogram/admin.py

from django.contrib import admin

from .models import RegistroOdontograma


# ============================================================================
# REGISTROS DEL ODONTOGRAMA (SOLO LECTURA)
# ============================================================================

@admin.register(RegistroOdontograma)
class RegistroOdontogramaAdmin(admin.ModelAdmin):
    """Las filas se reescriben desde la API; el admin solo las consulta"""
    list_display = (
        'tooth_number',
        'universal',
        'surface',
        'condition',
        'material',
        'paciente_id',
        'denticion_temporal',
        'fecha_registro',
    )
    search_fields = ('paciente_id', 'tooth_number', 'notes')
    list_filter = ('denticion_temporal', 'condition', 'surface', 'fecha_registro')
    readonly_fields = ('registrado_por', 'fecha_registro')

    fieldsets = (
        ('Paciente', {
            'fields': ('paciente_id', 'denticion_temporal'),
        }),
        ('Registro', {
            'fields': ('tooth_number', 'surface', 'condition', 'material', 'notes'),
        }),
        ('Auditoría', {
            'fields': ('registrado_por', 'fecha_registro'),
            'classes': ('collapse',),
        }),
    )

    def universal(self, obj):
        return obj.universal
    universal.short_description = 'Universal'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
