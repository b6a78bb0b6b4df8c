# apps/authentication/session.py:

import json
import logging
from pathlib import Path

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)

TOKEN_KEY = 'studentapp_token'
USER_KEY = 'studentapp_user'


class SesionCliente:
    """
    Contexto de sesión del lado cliente: token + identidad que sobreviven
    entre ejecuciones. Se crea explícitamente, se hidrata desde el
    almacenamiento con hidratar() y se cierra con cerrar().
    """

    def __init__(self, storage_path):
        self.storage_path = Path(storage_path)
        self.token = None
        self.user = None

    @property
    def autenticado(self):
        return self.token is not None

    def hidratar(self):
        """Carga la sesión guardada. Un registro corrupto o expirado deja la sesión cerrada."""
        self.token, self.user = None, None
        if not self.storage_path.exists():
            return self

        try:
            data = json.loads(self.storage_path.read_text(encoding='utf-8'))
            token, user = data[TOKEN_KEY], data[USER_KEY]
        except (ValueError, KeyError, TypeError):
            logger.warning("Sesión guardada ilegible en %s; se descarta", self.storage_path)
            self._borrar_almacenamiento()
            return self

        try:
            AccessToken(token)
        except TokenError:
            logger.info("La sesión guardada expiró; hay que volver a iniciar sesión")
            self._borrar_almacenamiento()
            return self

        self.token, self.user = token, user
        return self

    def iniciar(self, sesion):
        """Guarda el resultado de /auth/login ({token, user})"""
        self.token = sesion['token']
        self.user = sesion['user']
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(
            json.dumps({TOKEN_KEY: self.token, USER_KEY: self.user}),
            encoding='utf-8'
        )
        return self

    def cerrar(self):
        self.token, self.user = None, None
        self._borrar_almacenamiento()

    def cabeceras(self):
        if not self.autenticado:
            return {}
        return {'Authorization': f"Bearer {self.token}"}

    def _borrar_almacenamiento(self):
        if self.storage_path.exists():
            self.storage_path.unlink()
