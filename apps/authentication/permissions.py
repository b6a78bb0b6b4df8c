#apps/authentication/permissions.py:

from collections import namedtuple

from rest_framework.permissions import BasePermission

from core.exceptions import NoAutenticado, Prohibido
from .models import Rol

RUTAS_PUBLICAS = ('/auth/login',)
# Requieren token pero ningún rol en particular
RUTAS_DE_SESION = ('/auth/me',)

RECURSOS_DOCENTE_ESCRITURA = {'grades'}
RECURSOS_DOCENTE_LECTURA = {'students', 'courses', 'schedules', 'enrollments'}

UNAUTHENTICATED = 'unauthenticated'
FORBIDDEN = 'forbidden'

MENSAJES = {
    'DOCENTE': 'Acceso no autorizado para docentes',
    None: 'Rol no autorizado',
}


class Decision(namedtuple('Decision', ['allowed', 'reason'])):
    __slots__ = ()

    def __bool__(self):
        return self.allowed


PERMITIR = Decision(True, None)
NO_AUTENTICADO = Decision(False, UNAUTHENTICATED)
PROHIBIDO = Decision(False, FORBIDDEN)


def _recurso(path):
    return path.strip('/').split('/', 1)[0]


def autorizar(method, path, identity):
    """
    Decide si una solicitud puede llegar a las colecciones.
    identity es None cuando no hay token válido.
    """
    method = method.upper()

    if any(path.startswith(ruta) for ruta in RUTAS_PUBLICAS):
        return PERMITIR
    if method == 'OPTIONS':
        return PERMITIR

    if identity is None:
        return NO_AUTENTICADO

    if any(path.startswith(ruta) for ruta in RUTAS_DE_SESION):
        return PERMITIR

    role = getattr(identity, 'role', None)

    # Admin tiene acceso total
    if role == Rol.ADMIN:
        return PERMITIR

    if role == Rol.DOCENTE:
        recurso = _recurso(path)
        if recurso in RECURSOS_DOCENTE_ESCRITURA:
            return PERMITIR  # docente puede crear/editar notas
        if recurso in RECURSOS_DOCENTE_LECTURA and method == 'GET':
            return PERMITIR
        return PROHIBIDO

    return PROHIBIDO


class PoliticaDeAcceso(BasePermission):
    """
    Aplica autorizar() a cada solicitud de la API.
    Es la clase de permiso por defecto (DEFAULT_PERMISSION_CLASSES).
    """

    def has_permission(self, request, view):
        user = request.user
        identity = user if user is not None and user.is_authenticated else None

        decision = autorizar(request.method, request.path, identity)
        if decision.allowed:
            return True
        if decision.reason == UNAUTHENTICATED:
            raise NoAutenticado()

        role = getattr(identity, 'role', None)
        raise Prohibido(MENSAJES.get(role, MENSAJES[None]))
