# api/utils/renderers.py
from rest_framework.renderers import JSONRenderer


STATUS_MESSAGES = {
    200: 'Operación exitosa',
    201: 'Recurso creado exitosamente',
    204: 'Recurso eliminado exitosamente',
    400: 'Error en los datos enviados',
    401: 'No autenticado',
    403: 'No tiene permisos para esta acción',
    404: 'Recurso no encontrado',
    409: 'Conflicto con el estado actual',
    500: 'Error interno del servidor',
    503: 'Servicio de almacenamiento no disponible',
}


class StandardizedJSONRenderer(JSONRenderer):
    """
    Renderer que envuelve todas las respuestas en formato estándar:
    {success, status_code, message, data, errors}
    Las respuestas paginadas conservan count/next/previous dentro de data.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None

        # Sin response (browsable API) o ya en formato estándar
        if not response or self._es_estandar(data):
            return super().render(data, accepted_media_type, renderer_context)

        exito = response.status_code < 400
        message, cuerpo = self._separar_mensaje(data, response.status_code)

        standardized_response = {
            'success': exito,
            'status_code': response.status_code,
            'message': message,
            'data': cuerpo if exito else None,
            'errors': None if exito else cuerpo,
        }

        return super().render(standardized_response, accepted_media_type, renderer_context)

    @staticmethod
    def _es_estandar(data):
        return isinstance(data, dict) and 'success' in data and 'status_code' in data

    @staticmethod
    def _separar_mensaje(data, status_code):
        """Usa el 'message' de la vista si lo hay, sin modificar los datos originales"""
        default = STATUS_MESSAGES.get(status_code, 'Operación completada')
        if isinstance(data, dict) and 'message' in data:
            cuerpo = {k: v for k, v in data.items() if k != 'message'}
            return data['message'], cuerpo
        return default, data
