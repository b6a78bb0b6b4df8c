import datetime

import pytest

from apps.authentication.models import Rol, Usuario
from apps.teachers import services
from apps.teachers.models import Docente

pytestmark = pytest.mark.django_db

DATOS = {
    'dni': '41234567',
    'name': 'Marta',
    'lastname': 'Salas',
    'email': 'marta.salas@colegio.com',
    'sex': 'F',
    'birthdate': '1988-07-21',
    'specialty': 'Idiomas',
    'grade': 'ALL',
    'section': 'ROTATIVO',
}


def test_crear_docente_crea_su_usuario(admin_client, anon_client):
    response = admin_client.post('/teachers', DATOS, format='json')

    assert response.status_code == 201
    assert response.data['grade'] == 'ALL'

    usuario = Usuario.objects.get(teacher_dni='41234567')
    assert usuario.email == 'marta.salas@colegio.com'
    assert usuario.name == 'Marta Salas'
    assert usuario.role == Rol.DOCENTE
    assert usuario.check_password('41234567')

    login = anon_client.post('/auth/login', {'email': usuario.email, 'password': '41234567'}, format='json')
    assert login.status_code == 200
    assert login.data['user']['teacherDni'] == '41234567'


def test_grado_numerico(admin_client):
    response = admin_client.post('/teachers', dict(DATOS, grade=3, section='B'), format='json')

    assert response.status_code == 201
    assert response.data['grade'] == 3


def test_cambio_de_dni_actualiza_el_mismo_usuario(admin_client):
    admin_client.post('/teachers', DATOS, format='json')
    usuario_id = Usuario.objects.get(teacher_dni='41234567').id

    response = admin_client.patch('/teachers/dni/41234567', {'dni': '47654321', 'name': 'Martha'}, format='json')

    assert response.status_code == 200
    usuario = Usuario.objects.get(teacher_dni='47654321')
    assert usuario.id == usuario_id
    assert usuario.name == 'Martha Salas'
    assert usuario.check_password('47654321')
    assert not Usuario.objects.filter(teacher_dni='41234567').exists()


def test_eliminar_docente_elimina_su_usuario(admin_client):
    admin_client.post('/teachers', DATOS, format='json')

    response = admin_client.delete('/teachers/dni/41234567')

    assert response.status_code == 204
    assert not Docente.objects.filter(dni='41234567').exists()
    assert not Usuario.objects.filter(teacher_dni='41234567').exists()


def test_eliminar_por_id_tambien_elimina_el_usuario(admin_client):
    docente = services.crear_docente(dict(DATOS, birthdate=datetime.date(1988, 7, 21)))

    assert admin_client.delete(f'/teachers/{docente.id}').status_code == 204
    assert not Usuario.objects.filter(teacher_dni='41234567').exists()


def test_si_falla_el_usuario_no_queda_el_docente(monkeypatch):
    def falla(*args, **kwargs):
        raise RuntimeError("sin conexión")

    monkeypatch.setattr(services, 'sincronizar_usuario', falla)

    with pytest.raises(RuntimeError):
        services.crear_docente(dict(DATOS, birthdate=datetime.date(1988, 7, 21)))

    assert not Docente.objects.filter(dni='41234567').exists()


def test_docente_por_dni(admin_client):
    admin_client.post('/teachers', DATOS, format='json')

    response = admin_client.get('/teachers/dni/41234567/')

    assert response.status_code == 200
    assert response.data['email'] == 'marta.salas@colegio.com'


@pytest.mark.parametrize('method', ['get', 'put', 'delete'])
def test_docente_por_dni_inexistente(admin_client, method):
    response = getattr(admin_client, method)('/teachers/dni/49999999', DATOS, format='json')

    assert response.status_code == 404
    assert response.data == {'message': 'Docente no encontrado'}


def test_dni_duplicado(admin_client):
    admin_client.post('/teachers', DATOS, format='json')

    response = admin_client.post('/teachers', dict(DATOS, email='otra@colegio.com'), format='json')

    assert response.status_code == 400
    assert response.data['errors']['dni'] == ['Ya existe un docente con este DNI']


def test_email_de_otro_usuario(admin_client, admin):
    response = admin_client.post('/teachers', dict(DATOS, email=admin.email), format='json')

    assert response.status_code == 400
    assert response.data['errors']['email'] == ['Ya existe un usuario con este email']
    assert not Usuario.objects.filter(teacher_dni='41234567').exists()


@pytest.mark.parametrize('campo, valor', [
    ('dni', '1234'),
    ('email', 'no-es-correo'),
    ('specialty', 'Quimica'),
    ('grade', '7'),
    ('section', 'E'),
    ('name', '   '),
])
def test_validaciones(admin_client, campo, valor):
    response = admin_client.post('/teachers', dict(DATOS, **{campo: valor}), format='json')

    assert response.status_code == 400
    assert campo in response.data['errors']


def test_filtro_por_estado(admin_client):
    admin_client.post('/teachers', DATOS, format='json')
    admin_client.post('/teachers', dict(DATOS, dni='41234568', email='x@colegio.com', status='INACTIVO'), format='json')

    response = admin_client.get('/teachers', {'status': 'INACTIVO'})

    assert [d['dni'] for d in response.data] == ['41234568']
