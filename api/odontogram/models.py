# odontogram/models.py
"""
Almacenamiento plano del odontograma.

Una fila por diente (surface vacío) y cero o más filas por superficie.
Los códigos de condición, superficie y material se guardan como texto
libre: el catálogo es abierto y un código desconocido debe sobrevivir
al ciclo guardar/cargar sin migraciones.
"""

import uuid

from django.db import models
from django_currentuser.db.models import CurrentUserField

from api.odontogram.constants import FDIConstants

# Largo máximo de los códigos de condición, superficie y material
CODIGO_MAX_LENGTH = 50

# Rango de models.IntegerField en todos los motores soportados
TOOTH_NUMBER_MIN = -2 ** 31
TOOTH_NUMBER_MAX = 2 ** 31 - 1


class RegistroOdontogramaQuerySet(models.QuerySet):

    def de_paciente(self, paciente_id, uses_primary_dentition=False):
        return self.filter(
            paciente_id=paciente_id,
            denticion_temporal=bool(uses_primary_dentition),
        )

    def nivel_superficie(self):
        return self.filter(surface__isnull=False)


class RegistroOdontograma(models.Model):
    """
    Fila del odontograma de un paciente para una dentición.
    Se reescribe completa en cada guardado (ver OdontogramaRepository).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # El módulo de pacientes es externo: solo se guarda su identificador
    paciente_id = models.UUIDField(db_index=True)

    denticion_temporal = models.BooleanField(
        default=False,
        help_text="True si la fila pertenece al odontograma de dentición temporal",
    )

    # Notación FDI (11-48 permanentes, 51-85 temporales). Los códigos fuera
    # de ambos juegos también se guardan, por eso no hay restricción de rango
    tooth_number = models.IntegerField(
        help_text="Código FDI del diente",
    )

    surface = models.CharField(
        max_length=CODIGO_MAX_LENGTH,
        null=True,
        blank=True,
        help_text="Vacío para la fila de nivel diente (O, M, D, V, L, P)",
    )

    condition = models.CharField(max_length=CODIGO_MAX_LENGTH)

    notes = models.TextField(blank=True, default='')

    material = models.CharField(
        max_length=CODIGO_MAX_LENGTH,
        null=True,
        blank=True,
        help_text="Material restaurador de la superficie; vacío en filas antiguas",
    )

    registrado_por = CurrentUserField(
        related_name='registros_odontograma',
        null=True,
        blank=True,
        editable=False,
        verbose_name="Registrado por",
    )

    fecha_registro = models.DateTimeField(auto_now_add=True)

    objects = RegistroOdontogramaQuerySet.as_manager()

    class Meta:
        db_table = 'odonto_registro'
        verbose_name = 'Registro de Odontograma'
        verbose_name_plural = 'Registros de Odontograma'
        ordering = ['-fecha_registro', 'tooth_number']
        indexes = [
            models.Index(fields=['paciente_id', 'denticion_temporal'], name='odonto_reg_pac_den_idx'),
        ]

    def __str__(self):
        cara = f"/{self.surface}" if self.surface else ""
        return f"FDI {self.tooth_number}{cara} - {self.condition}"

    @property
    def universal(self):
        return FDIConstants.universal_label(self.tooth_number)
