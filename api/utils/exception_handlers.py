# api/utils/exception_handlers.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

from api.odontogram.exceptions import OdontogramaError
from api.utils.renderers import STATUS_MESSAGES

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Maneja automáticamente todas las excepciones y devuelve formato estándar.

    Orden:
        1. Errores de dominio del odontograma (traen su propio status_code)
        2. Excepciones que DRF sabe manejar (validación, auth, 404...)
        3. Cualquier otra: 500 con mensaje genérico
    """
    if isinstance(exc, OdontogramaError):
        _log(exc.status_code, f"Odontograma: {exc.__class__.__name__} - {exc.message}")
        return _envelope(exc.status_code, exc.message, {'detail': [exc.message]})

    response = exception_handler(exc, context)

    if response is not None:
        _log(response.status_code, f"API Error: {exc.__class__.__name__} - {exc}")
        response.data = _envelope_data(
            response.status_code,
            _get_error_message(exc, response),
            _format_errors(response.data),
        )
        return response

    logger.critical(
        f"Unhandled Exception: {exc.__class__.__name__} - {exc}",
        exc_info=True,
        extra={'context': context}
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        STATUS_MESSAGES[500],
        {'detail': ['Ha ocurrido un error inesperado']},
    )


def _log(status_code, mensaje):
    # 4xx son errores del cliente; solo 5xx van al log de errores
    if status_code >= 500:
        logger.error(mensaje)
    else:
        logger.warning(mensaje)


def _envelope_data(status_code, message, errors):
    return {
        'success': False,
        'status_code': status_code,
        'message': message,
        'data': None,
        'errors': errors,
    }


def _envelope(status_code, message, errors):
    return Response(_envelope_data(status_code, message, errors), status=status_code)


def _primer_mensaje(detail):
    """Primer mensaje legible dentro de un detalle posiblemente anidado"""
    if isinstance(detail, dict):
        for valor in detail.values():
            mensaje = _primer_mensaje(valor)
            if mensaje:
                return mensaje
        return None
    if isinstance(detail, list):
        return _primer_mensaje(detail[0]) if detail else None
    return str(detail)


def _get_error_message(exc, response):
    """
    Extrae mensaje de error principal.

    Args:
        exc: Excepción
        response: Response de DRF

    Returns:
        str: Mensaje de error
    """
    mensaje = _primer_mensaje(getattr(exc, 'detail', None))
    if mensaje:
        return mensaje
    return STATUS_MESSAGES.get(response.status_code, 'Error en la solicitud')


def _format_errors(data):
    """
    Formatea errores de validación.

    Args:
        data: Datos de error de DRF

    Returns:
        dict: Errores formateados
    """
    if isinstance(data, dict):
        errors = {}
        for field, messages in data.items():
            if isinstance(messages, list):
                errors[field] = messages
            elif isinstance(messages, dict):
                # Errores anidados (ej: dientes dentro de teeth)
                errors[field] = _format_errors(messages)
            else:
                errors[field] = [str(messages)]
        return errors
    elif isinstance(data, list):
        return {'non_field_errors': data}
    else:
        return {'detail': [str(data)]}
