#core/exceptions.py

from rest_framework import exceptions, status


class CredencialesInvalidas(exceptions.APIException):
    """Email desconocido o contraseña incorrecta"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Credenciales invalidas'
    default_code = 'invalid_credentials'


class NoAutenticado(exceptions.NotAuthenticated):
    """Falta el token o no es válido"""
    default_detail = 'Token requerido'
    default_code = 'unauthenticated'


class Prohibido(exceptions.PermissionDenied):
    """El rol no permite la combinación método/ruta"""
    default_detail = 'Acceso no autorizado'
    default_code = 'forbidden'


class NoEncontrado(exceptions.NotFound):
    """La búsqueda por clave natural no encontró el registro"""
    default_detail = 'Recurso no encontrado'
    default_code = 'not_found'
