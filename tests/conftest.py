"""
Fixtures compartidos: usuarios, clientes con token y un colegio pequeño
(dos docentes, cursos, horarios, alumnos, matrículas y notas).
"""
import datetime

import pytest
from rest_framework.test import APIClient

from apps.authentication.models import CredentialEncoding, Rol, Usuario
from apps.authentication.tokens import crear_token
from apps.courses.models import Curso
from apps.enrollments.models import Matricula
from apps.grades.models import Nota
from apps.schedules.models import Horario
from apps.students.models import Estudiante
from apps.teachers.models import Docente

ADMIN_EMAIL = 'admin@colegio.com'
ADMIN_PASSWORD = '123456'


def cliente_con_token(usuario):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {crear_token(usuario)}")
    return client


def crear_docente(dni, name, lastname, **extra):
    datos = {
        'email': f"{name.lower()}.{lastname.lower()}@colegio.com",
        'sex': 'F',
        'birthdate': datetime.date(1985, 5, 10),
        'specialty': 'Primaria General',
        'grade': '1',
        'section': 'A',
    }
    datos.update(extra)
    return Docente.objects.create(dni=dni, name=name, lastname=lastname, **datos)


def crear_estudiante(dni, name, lastname, **extra):
    datos = {
        'email': f"apoderado.{dni}@correo.com",
        'sex': 'M',
        'birthdate': datetime.date(2017, 3, 1),
        'age': 7,
        'grade': 1,
        'section': 'A',
        'shift': 'MANANA',
    }
    datos.update(extra)
    return Estudiante.objects.create(dni=dni, name=name, lastname=lastname, **datos)


@pytest.fixture
def admin(db):
    # El administrador se crea tras las migraciones
    return Usuario.objects.get(email=ADMIN_EMAIL)


@pytest.fixture
def docente(db):
    crear_docente('40000001', 'Rosa', 'Quispe')
    return Usuario.objects.create_user(
        email='rosa@colegio.com',
        password='40000001',
        name='Rosa Quispe',
        role=Rol.DOCENTE,
        teacher_dni='40000001',
        password_encoding=CredentialEncoding.PBKDF2_SHA256,
    )


@pytest.fixture
def admin_client(admin):
    return cliente_con_token(admin)


@pytest.fixture
def docente_client(docente):
    return cliente_con_token(docente)


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def colegio(docente):
    """
    Rosa (40000001) dicta matematica y comunicacion en 1A por la mañana.
    Luis (40000002) dicta arte en 2C por la tarde y ciencia en 1A.
    """
    luis = crear_docente('40000002', 'Luis', 'Ramos', specialty='Artes', section='C')

    matematica = Curso.objects.create(name='Matematica', teacher_dni='40000001')
    comunicacion = Curso.objects.create(name='Comunicacion', teacher_dni='40000001')
    arte = Curso.objects.create(name='Arte', teacher_dni='40000002')
    ciencia = Curso.objects.create(name='Ciencia', teacher_dni='40000002')
    Curso.objects.create(name='Ingles', status='INACTIVO')

    horario_rosa = Horario.objects.create(
        teacher_dni='40000001', shift='MANANA', grade='1', section='A',
        courses=[matematica.id, comunicacion.id],
    )
    horario_luis = Horario.objects.create(
        teacher_dni='40000002', shift='TARDE', grade='2', section='C', courses=[arte.id],
    )
    horario_ciencia = Horario.objects.create(
        teacher_dni='40000002', shift='MANANA', grade='1', section='A', courses=[ciencia.id],
    )

    ana = crear_estudiante('70000001', 'Ana', 'Torres')
    beto = crear_estudiante('70000002', 'Beto', 'Flores')
    carla = crear_estudiante('70000003', 'Carla', 'Diaz', grade=2, section='C', shift='TARDE')
    crear_estudiante('70000004', 'Dario', 'Vega', status='INACTIVO')

    Matricula.objects.create(schedule=horario_rosa, student_dni=ana.dni)
    Matricula.objects.create(schedule=horario_rosa, student_dni=beto.dni)
    Matricula.objects.create(schedule=horario_ciencia, student_dni=ana.dni)
    Matricula.objects.create(schedule=horario_luis, student_dni=carla.dni)

    for term, evaluation, score in ((1, 1, 12), (1, 2, 14), (3, 1, 10)):
        Nota.objects.create(
            student_dni=ana.dni, course_id=matematica.id,
            term=term, evaluation=evaluation, score=score,
        )
    Nota.objects.create(student_dni=ana.dni, course_id=ciencia.id, term=1, evaluation=1, score=20)
    Nota.objects.create(student_dni=carla.dni, course_id=arte.id, term=1, evaluation=1, score=18)

    return {
        'luis': luis,
        'cursos': {c.id: c for c in Curso.objects.all()},
        'horarios': (horario_rosa, horario_luis, horario_ciencia),
        'alumnos': (ana, beto, carla),
    }
