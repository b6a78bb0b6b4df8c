from types import SimpleNamespace

import pytest

from apps.authentication.permissions import FORBIDDEN, UNAUTHENTICATED, autorizar
from apps.enrollments.models import Matricula

ADMIN = SimpleNamespace(role='ADMIN', teacher_dni=None)
DOCENTE = SimpleNamespace(role='DOCENTE', teacher_dni='40000001')
OTRO = SimpleNamespace(role='APODERADO', teacher_dni=None)

METODOS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']
SOLO_LECTURA = ['/students', '/courses/matematica', '/schedules/1', '/enrollments']


@pytest.mark.parametrize('method', METODOS)
@pytest.mark.parametrize('path', SOLO_LECTURA + ['/grades', '/teachers', '/users/1', '/dashboard/resumen'])
def test_admin_puede_todo(method, path):
    assert autorizar(method, path, ADMIN)


@pytest.mark.parametrize('path', SOLO_LECTURA)
def test_docente_solo_lee_recursos_academicos(path):
    assert autorizar('GET', path, DOCENTE)
    for method in ('POST', 'PUT', 'PATCH', 'DELETE'):
        decision = autorizar(method, path, DOCENTE)
        assert not decision
        assert decision.reason == FORBIDDEN


@pytest.mark.parametrize('method', METODOS)
def test_docente_gestiona_notas(method):
    assert autorizar(method, '/grades/15', DOCENTE)
    assert autorizar(method, '/grades', DOCENTE)


@pytest.mark.parametrize('path', ['/teachers', '/users', '/dashboard/resumen'])
def test_docente_no_accede_a_recursos_de_administracion(path):
    assert autorizar('GET', path, DOCENTE).reason == FORBIDDEN


def test_sin_identidad_no_autenticado():
    decision = autorizar('GET', '/students', None)

    assert not decision
    assert decision.reason == UNAUTHENTICATED


def test_login_es_publico():
    assert autorizar('POST', '/auth/login', None)


def test_options_siempre_permitido():
    assert autorizar('OPTIONS', '/students', None)


def test_me_para_cualquier_rol():
    assert autorizar('GET', '/auth/me', OTRO)
    assert not autorizar('GET', '/auth/me', None)


def test_rol_desconocido_prohibido():
    assert autorizar('GET', '/students', OTRO).reason == FORBIDDEN


@pytest.mark.django_db
def test_admin_lista_docentes_y_sin_token_no(admin_client, anon_client):
    assert admin_client.get('/teachers').status_code == 200

    response = anon_client.get('/teachers')
    assert response.status_code == 401
    assert response.data == {'message': 'Token requerido'}


@pytest.mark.django_db
def test_docente_no_crea_alumnos(docente_client):
    response = docente_client.post('/students', {'dni': '70000009'}, format='json')

    assert response.status_code == 403
    assert response.data == {'message': 'Acceso no autorizado para docentes'}


def test_docente_registra_notas(docente_client, colegio):
    ana = colegio['alumnos'][0]
    response = docente_client.post('/grades', {
        'studentDni': ana.dni,
        'courseId': 'comunicacion',
        'term': 2,
        'evaluation': 1,
        'score': 15.5,
        'comment': 'Buen avance',
    }, format='json')

    assert response.status_code == 201
    assert response.data['score'] == 15.5


def test_docente_no_borra_matriculas(docente_client, colegio):
    matricula = Matricula.objects.first()

    assert docente_client.delete(f'/enrollments/{matricula.id}').status_code == 403
    assert Matricula.objects.filter(pk=matricula.id).exists()


@pytest.mark.django_db
def test_docente_no_ve_el_panel(docente_client):
    assert docente_client.get('/dashboard/resumen').status_code == 403


@pytest.mark.django_db
def test_documentacion_sigue_la_politica(admin_client, docente_client, anon_client):
    assert admin_client.get('/api/schema/').status_code == 200

    response = docente_client.get('/api/schema/')
    assert response.status_code == 403
    assert response.data == {'message': 'Acceso no autorizado para docentes'}

    assert anon_client.get('/api/docs/').status_code == 401
