import logging

from django.conf import settings
from django.db import transaction

from apps.authentication.models import Rol, Usuario
from core.lookups import resolver_por_dni
from .models import Docente

logger = logging.getLogger(__name__)

MENSAJE_NO_ENCONTRADO = "Docente no encontrado"


def obtener_docente_por_dni(dni):
    return resolver_por_dni(Docente.objects.all(), dni, MENSAJE_NO_ENCONTRADO)


def sincronizar_usuario(docente, dni_previo=None):
    """
    Crea o actualiza el usuario espejo del docente.
    La contraseña inicial es el DNI del docente.
    """
    usuario = Usuario.objects.filter(teacher_dni=dni_previo or docente.dni).first()
    creado = usuario is None
    if creado:
        usuario = Usuario(role=Rol.DOCENTE)

    usuario.email = docente.email
    usuario.name = docente.nombre_completo
    usuario.role = Rol.DOCENTE
    usuario.teacher_dni = docente.dni
    usuario.set_password(docente.dni, settings.CREDENTIAL_ENCODING)
    usuario.save()

    logger.info(
        "Usuario %s para el docente %s (%s)",
        "creado" if creado else "actualizado", docente.dni, usuario.email
    )
    return usuario


@transaction.atomic
def crear_docente(datos):
    """Registra el docente y su usuario; si falla el usuario no queda el docente"""
    docente = Docente.objects.create(**datos)
    sincronizar_usuario(docente)
    return docente


@transaction.atomic
def actualizar_docente(docente, datos):
    dni_previo = docente.dni
    for attr, value in datos.items():
        setattr(docente, attr, value)
    docente.save()
    sincronizar_usuario(docente, dni_previo=dni_previo)
    return docente


def actualizar_docente_por_dni(dni, datos):
    docente = obtener_docente_por_dni(dni)
    return actualizar_docente(docente, datos)


@transaction.atomic
def eliminar_docente(docente):
    """Elimina el usuario vinculado al docente, si existe, y luego el docente"""
    borrados, _ = Usuario.objects.filter(teacher_dni=docente.dni).delete()
    logger.info("Docente %s eliminado junto con %s usuario(s)", docente.dni, borrados)
    docente.delete()


def eliminar_docente_por_dni(dni):
    docente = obtener_docente_por_dni(dni)
    eliminar_docente(docente)


def coleccion_docentes():
    return list(Docente.objects.values('id', 'dni', 'name', 'lastname', 'status'))
