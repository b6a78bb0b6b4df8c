# apps/authentication/models.py:

from django.conf import settings
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.hashers import check_password, make_password
from django.db import models
from django.db.models.signals import post_migrate
from django.dispatch import receiver
from django.utils.crypto import constant_time_compare


class CredentialEncoding(models.TextChoices):
    """Cómo está guardada la contraseña. Se decide al escribirla."""
    PLAIN = 'plain', 'Texto plano'
    BCRYPT = 'bcrypt', 'bcrypt'
    PBKDF2_SHA256 = 'pbkdf2_sha256', 'PBKDF2 SHA256'


class Rol(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrador'
    DOCENTE = 'DOCENTE', 'Docente'


class UsuarioManager(BaseUserManager):
    def create_user(self, email, password=None, password_encoding=None, hashed=False, **extra_fields):
        if not email:
            raise ValueError("El email es obligatorio")
        extra_fields.setdefault('role', Rol.DOCENTE)
        user = self.model(email=self.normalize_email(email), **extra_fields)
        if hashed:
            user.set_hashed_password(password, password_encoding)
        else:
            user.set_password(password, password_encoding)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields['role'] = Rol.ADMIN
        return self.create_user(email, password, **extra_fields)


class Usuario(AbstractBaseUser):
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=120)
    role = models.CharField(max_length=10, choices=Rol.choices, default=Rol.DOCENTE)
    teacher_dni = models.CharField(max_length=8, null=True, blank=True, db_index=True)
    password_encoding = models.CharField(
        max_length=20,
        choices=CredentialEncoding.choices,
        default=CredentialEncoding.PBKDF2_SHA256
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UsuarioManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'usuario'
        verbose_name = 'Usuario'
        verbose_name_plural = 'Usuarios'

    def __str__(self):
        return f"{self.email} ({self.role})"

    @property
    def es_administrador(self):
        return self.role == Rol.ADMIN

    def set_password(self, raw_password, encoding=None):
        encoding = CredentialEncoding(encoding or settings.CREDENTIAL_ENCODING)
        if encoding == CredentialEncoding.PLAIN:
            self.password = raw_password or ''
        else:
            self.password = make_password(raw_password, hasher=encoding.value)
        self.password_encoding = encoding
        self._password = raw_password

    def set_hashed_password(self, encoded, encoding):
        """
        Registra un hash ya calculado (por ejemplo los bcrypt "$2a$..." del
        almacén anterior). Se guarda en el formato de Django "bcrypt$<hash>".
        """
        encoding = CredentialEncoding(encoding)
        if encoding == CredentialEncoding.PLAIN:
            raise ValueError("Un hash no puede registrarse como texto plano")
        prefix = f"{encoding.value}$"
        if not encoded.startswith(prefix):
            encoded = prefix + encoded
        self.password = encoded
        self.password_encoding = encoding

    def check_password(self, raw_password):
        if not self.password or raw_password is None:
            return False
        if self.password_encoding == CredentialEncoding.PLAIN:
            return constant_time_compare(self.password, raw_password)
        return check_password(raw_password, self.password)


class GestorUsuariosIniciales:
    """Crea los usuarios por defecto del sistema"""

    @staticmethod
    def crear_administrador():
        if Usuario.objects.filter(email=settings.ADMIN_EMAIL).exists():
            return None
        return Usuario.objects.create_superuser(
            email=settings.ADMIN_EMAIL,
            password=settings.ADMIN_PASSWORD,
            name=settings.ADMIN_NAME,
        )


@receiver(post_migrate)
def crear_administrador_inicial(sender, **kwargs):
    """Crear el administrador automáticamente después de las migraciones"""
    if sender.name == 'apps.authentication':
        GestorUsuariosIniciales.crear_administrador()
