# api/odontogram/exceptions.py

"""
Excepciones de dominio del odontograma.
El manejador global (api.utils.exception_handlers) las traduce a respuestas HTTP.
"""


class OdontogramaError(Exception):
    """Base de todos los errores del motor de odontograma"""

    status_code = 400
    default_message = 'Error en el odontograma'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DenticionIncompatibleError(OdontogramaError, ValueError):
    """Se intentó usar un diente de la otra dentición en el mismo odontograma"""

    default_message = 'El diente no pertenece a la dentición activa'


class RegistroInvalidoError(OdontogramaError, ValueError):
    """Registro almacenado con forma inválida (no un código desconocido)"""

    default_message = 'Registro de odontograma inválido'


class GuardadoOdontogramaError(OdontogramaError):
    """Fallo del almacenamiento al reemplazar los registros"""

    status_code = 503
    default_message = 'No se pudo guardar el odontograma'


class GuardadoEnCursoError(OdontogramaError):
    """Ya hay un guardado pendiente en la sesión"""

    status_code = 409
    default_message = 'Hay un guardado en curso'
