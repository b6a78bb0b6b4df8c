from core.lookups import resolver_por_dni
from .models import Estudiante


def obtener_estudiante_por_dni(dni, queryset=None):
    if queryset is None:
        queryset = Estudiante.objects.all()
    return resolver_por_dni(queryset, dni, f"Estudiante con DNI {dni} no encontrado")


def actualizar_estudiante_por_dni(dni, datos):
    # Buscar por DNI -> obtener ID -> actualizar por ID
    estudiante = obtener_estudiante_por_dni(dni)
    for attr, value in datos.items():
        setattr(estudiante, attr, value)
    estudiante.save()
    return estudiante


def eliminar_estudiante_por_dni(dni):
    estudiante = obtener_estudiante_por_dni(dni)
    estudiante.delete()


def coleccion_estudiantes():
    return list(Estudiante.objects.values('id', 'dni', 'name', 'lastname', 'grade', 'section', 'shift', 'status'))
