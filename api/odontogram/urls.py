# api/odontogram/urls.py
"""
URLs de la API REST del Odontograma
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from api.odontogram.views import (
    obtener_catalogo,
    odontograma_paciente,
    aplicar_edicion_lote,
    estadisticas_odontograma,
    historial_odontograma,
    RegistroOdontogramaViewSet,
)

# ==================== ROUTER SETUP ====================

router = DefaultRouter()

router.register(r"registros", RegistroOdontogramaViewSet, basename="registro")

# ==================== APP NAME ====================

app_name = "odontogram"

# ==================== URL PATTERNS ====================

urlpatterns = [
    path("", include(router.urls)),
    path("catalogo/", obtener_catalogo, name="catalogo"),
    path(
        "pacientes/<uuid:paciente_id>/odontograma/",
        odontograma_paciente,
        name="odontograma-paciente",
    ),
    path(
        "pacientes/<uuid:paciente_id>/odontograma/lote/",
        aplicar_edicion_lote,
        name="odontograma-lote",
    ),
    path(
        "pacientes/<uuid:paciente_id>/odontograma/estadisticas/",
        estadisticas_odontograma,
        name="odontograma-estadisticas",
    ),
    path(
        "pacientes/<uuid:paciente_id>/odontograma/historial/",
        historial_odontograma,
        name="odontograma-historial",
    ),
]


# ==================== ENDPOINT SUMMARY ====================

"""
ENDPOINTS DISPONIBLES:

GET  /api/odontogram/catalogo/
GET  /api/odontogram/pacientes/{id}/odontograma/?temporal=false&notacion=universal
PUT  /api/odontogram/pacientes/{id}/odontograma/
POST /api/odontogram/pacientes/{id}/odontograma/lote/
GET  /api/odontogram/pacientes/{id}/odontograma/estadisticas/?condiciones=caries,missing
GET  /api/odontogram/pacientes/{id}/odontograma/historial/?limite=20
GET  /api/odontogram/registros/?paciente_id=&tooth_number=&surface=
"""
