# api/odontogram/services/__init__.py
from .odontogram_service import OdontogramaService

__all__ = [
    'OdontogramaService',
]
