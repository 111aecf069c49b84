import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class OdontogramConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api.odontogram'
    verbose_name = "Sistema de Odontograma"

    def ready(self):
        logger.debug("Sistema de Odontograma inicializado")
