# odontogram/repositories/odontogram_repositories.py
"""
Repository Pattern: acceso a las filas planas del odontograma.
El resto del motor trabaja con StoredRecord y nunca con el ORM.
"""

import logging
from typing import Iterable, List

from django.db import transaction
from django.db.models import QuerySet

from api.odontogram.codec import StoredRecord
from api.odontogram.models import RegistroOdontograma

logger = logging.getLogger(__name__)


class OdontogramaRepository:
    """Lectura y reemplazo completo de los registros de un paciente"""

    model = RegistroOdontograma

    def get_queryset(self, paciente_id, uses_primary_dentition=False) -> QuerySet:
        return self.model.objects.de_paciente(paciente_id, uses_primary_dentition)

    def obtener_registros(self, paciente_id, uses_primary_dentition=False) -> List[StoredRecord]:
        """Todas las filas de la dentición, como registros planos"""
        filas = self.get_queryset(paciente_id, uses_primary_dentition).values_list(
            'tooth_number', 'condition', 'surface', 'notes', 'material'
        )
        return [
            StoredRecord(
                tooth_number=tooth_number,
                condition=condition,
                surface=surface or None,
                notes=notes or '',
                material=material or None,
            )
            for tooth_number, condition, surface, notes, material in filas
        ]

    def reemplazar_registros(
        self,
        paciente_id,
        uses_primary_dentition: bool,
        registros: Iterable[StoredRecord],
    ) -> int:
        """
        Borra todas las filas del paciente/dentición e inserta las nuevas.
        Ambas fases corren en una sola transacción: un lector concurrente ve
        el conjunto anterior o el nuevo, nunca uno vacío.
        """
        instancias = [
            self.model(
                paciente_id=paciente_id,
                denticion_temporal=bool(uses_primary_dentition),
                tooth_number=r.tooth_number,
                condition=r.condition,
                surface=r.surface,
                notes=r.notes or '',
                material=r.material,
            )
            for r in registros
        ]

        with transaction.atomic():
            borrados, _ = self.get_queryset(paciente_id, uses_primary_dentition).delete()
            self.model.objects.bulk_create(instancias)

        logger.info(
            f"Odontograma {paciente_id} (temporal={bool(uses_primary_dentition)}): "
            f"{borrados} filas reemplazadas por {len(instancias)}"
        )
        return len(instancias)

    def historial(self, paciente_id, limite=20) -> QuerySet:
        """Últimas filas registradas del paciente, ambas denticiones"""
        return (
            self.model.objects.filter(paciente_id=paciente_id)
            .select_related('registrado_por')
            .order_by('-fecha_registro', 'tooth_number')[:limite]
        )
