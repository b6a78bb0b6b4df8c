#core/handlers.py

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken

from .exceptions import NoAutenticado

logger = logging.getLogger(__name__)


def _primer_mensaje(data):
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        for value in data.values():
            return _primer_mensaje(value)
    if isinstance(data, (list, tuple)) and data:
        return _primer_mensaje(data[0])
    return str(data)


def _cuerpo_validacion(data):
    if isinstance(data, (list, tuple)):
        return {'message': _primer_mensaje(data)}
    if isinstance(data, dict) and set(data) <= {'non_field_errors', 'detail'}:
        return {'message': _primer_mensaje(data)}
    return {'message': 'Datos invalidos', 'errors': data}


def manejador_excepciones(exc, context):
    """
    Convierte los errores de la API al formato {"message": ...}.
    Los errores de validación por campo se devuelven además en "errors".
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, InvalidToken):
        response.data = {'message': 'Token invalido'}
    elif isinstance(exc, exceptions.NotAuthenticated):
        response.data = {'message': NoAutenticado.default_detail}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = _cuerpo_validacion(response.data)
    else:
        response.data = {'message': _primer_mensaje(response.data)}

    if response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        request = context.get('request')
        logger.info(
            "Solicitud rechazada (%s) %s %s: %s",
            response.status_code,
            getattr(request, 'method', '-'),
            getattr(request, 'path', '-'),
            response.data['message'],
        )

    return response
