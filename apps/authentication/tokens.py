# apps/authentication/tokens.py:

import logging

from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.tokens import AccessToken

from core.exceptions import CredencialesInvalidas
from .models import Rol, Usuario

logger = logging.getLogger(__name__)


class IdentidadSesion(TokenUser):
    """
    Identidad reconstruida desde los claims del token, sin consultar la
    base de datos. Es el request.user de todas las vistas protegidas.
    """

    @property
    def email(self):
        return self.token.get('email')

    @property
    def role(self):
        return self.token.get('role')

    @property
    def name(self):
        return self.token.get('name')

    @property
    def teacher_dni(self):
        return self.token.get('teacherDni')

    @property
    def es_administrador(self):
        return self.role == Rol.ADMIN

    def as_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'role': self.role,
            'name': self.name,
            'teacherDni': self.teacher_dni,
        }


def datos_publicos(usuario):
    return {
        'id': usuario.id,
        'name': usuario.name,
        'email': usuario.email,
        'role': usuario.role,
        'teacherDni': usuario.teacher_dni,
    }


def crear_token(usuario):
    """Token de acceso firmado con los datos de identidad y rol (expira en 8 h)"""
    token = AccessToken.for_user(usuario)
    # mismo tipo de id que devuelve /auth/login
    token['id'] = usuario.id
    token['email'] = usuario.email
    token['role'] = usuario.role
    token['name'] = usuario.name
    token['teacherDni'] = usuario.teacher_dni
    return token


def emitir_sesion(email, password):
    """
    Valida las credenciales y emite el token de sesión.
    No hay refresh: al expirar el token hay que volver a iniciar sesión.
    """
    usuario = Usuario.objects.filter(email=email, is_active=True).first()
    if usuario is None or not usuario.check_password(password):
        logger.warning("Intento de inicio de sesión fallido para %s", email)
        raise CredencialesInvalidas()

    logger.info("Sesión iniciada: %s (%s)", usuario.email, usuario.role)
    return {
        'token': str(crear_token(usuario)),
        'user': datos_publicos(usuario),
    }
