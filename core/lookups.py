#core/lookups.py

from .exceptions import NoEncontrado


def resolver_por_dni(queryset, dni, mensaje=None):
    """
    Resuelve la clave natural (DNI) al registro con su id interno.
    Las escrituras por DNI primero pasan por aquí; si no existe se
    aborta antes de modificar nada.
    """
    registro = queryset.filter(dni=dni).first()
    if registro is None:
        raise NoEncontrado(mensaje or f"Registro con DNI {dni} no encontrado")
    return registro
