#core/settings.py

import os
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-dev-key-change-this')
DEBUG = env_bool('DJANGO_DEBUG', True)
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

# Puerto por defecto de runserver (ver manage.py)
PORT = os.environ.get('PORT', '3001')

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',

    'rest_framework',
    'django_filters',
    'drf_spectacular',

    'apps.authentication',
    'apps.teachers',
    'apps.students',
    'apps.courses',
    'apps.schedules',
    'apps.enrollments',
    'apps.grades',
    'apps.dashboard',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'
WSGI_APPLICATION = 'core.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('DB_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

AUTH_USER_MODEL = 'authentication.Usuario'

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
    'django.contrib.auth.hashers.BCryptPasswordHasher',
]

# Codificación con la que se guardan las credenciales nuevas:
# 'plain' o el nombre de un algoritmo de PASSWORD_HASHERS
CREDENTIAL_ENCODING = os.environ.get('CREDENTIAL_ENCODING', 'pbkdf2_sha256')

# Usuario administrador creado después de las migraciones
ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@colegio.com')
ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', '123456')
ADMIN_NAME = os.environ.get('ADMIN_NAME', 'Administrador')

# Archivo donde el comando 'sesion' guarda el token del cliente
SESSION_STORAGE_PATH = os.environ.get('SESSION_STORAGE_PATH', str(BASE_DIR / '.sesion.json'))

LANGUAGE_CODE = 'es'
TIME_ZONE = 'America/Lima'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTStatelessUserAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'apps.authentication.permissions.PoliticaDeAcceso',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'EXCEPTION_HANDLER': 'core.handlers.manejador_excepciones',
    'COERCE_DECIMAL_TO_STRING': False,
    'UNAUTHENTICATED_USER': None,
}

JWT_SECRET = os.environ.get('JWT_SECRET', 'dev-secret-change-this')
JWT_LIFETIME_HOURS = int(os.environ.get('JWT_LIFETIME_HOURS', '8'))

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(hours=JWT_LIFETIME_HOURS),
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': JWT_SECRET,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'id',
    'TOKEN_USER_CLASS': 'apps.authentication.tokens.IdentidadSesion',
    'UPDATE_LAST_LOGIN': False,
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Colegio API',
    'DESCRIPTION': 'Alumnos, docentes, cursos, horarios, matrículas y notas',
    'VERSION': '1.0.0',
    'SERVE_PERMISSIONS': ['apps.authentication.permissions.PoliticaDeAcceso'],
}

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
