#apps/authentication/management/commands/sesion.py:

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.authentication.session import SesionCliente
from apps.authentication.tokens import emitir_sesion
from core.exceptions import CredencialesInvalidas


class Command(BaseCommand):
    help = "Inicia, consulta o cierra la sesión guardada del cliente (login, whoami, logout)"

    def add_arguments(self, parser):
        parser.add_argument('accion', choices=['login', 'whoami', 'logout'])
        parser.add_argument('--email')
        parser.add_argument('--password')

    def handle(self, *args, **options):
        sesion = SesionCliente(settings.SESSION_STORAGE_PATH).hidratar()
        accion = options['accion']

        if accion == 'login':
            if not options.get('email') or not options.get('password'):
                raise CommandError("Email y password son requeridos")
            try:
                datos = emitir_sesion(options['email'], options['password'])
            except CredencialesInvalidas as exc:
                raise CommandError(str(exc.detail))
            sesion.iniciar(datos)
            self.stdout.write(self.style.SUCCESS(
                f"Sesión iniciada: {sesion.user['email']} ({sesion.user['role']})"
            ))

        elif accion == 'whoami':
            if not sesion.autenticado:
                self.stdout.write("No hay sesión iniciada")
                return
            self.stdout.write(f"{sesion.user['email']} ({sesion.user['role']})")

        else:
            sesion.cerrar()
            self.stdout.write(self.style.SUCCESS("Sesión cerrada"))
