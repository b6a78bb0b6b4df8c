from types import SimpleNamespace

import pytest

from apps.schedules.services import (
    alcance_de, alumnos_visibles_para, cursos_del_alumno, cursos_permitidos, cursos_visibles_para,
)

ADMIN = SimpleNamespace(role='ADMIN', teacher_dni=None)
ROSA = SimpleNamespace(role='DOCENTE', teacher_dni='40000001')
SIN_HORARIOS = SimpleNamespace(role='DOCENTE', teacher_dni='49999999')

STUDENTS = [{'dni': '70000001'}, {'dni': '70000002'}, {'dni': '70000003'}]
SCHEDULES = [
    {'id': 1, 'teacherDni': '40000001', 'courses': ['matematica', 'comunicacion']},
    {'id': 2, 'teacherDni': '40000002', 'courses': ['arte']},
    {'id': 3, 'teacherDni': '40000001', 'courses': ['matematica', 'ciencia']},
]
ENROLLMENTS = [
    {'id': 1, 'scheduleId': 1, 'studentDni': '70000001'},
    {'id': 2, 'scheduleId': '3', 'studentDni': '70000002'},
    {'id': 3, 'scheduleId': 2, 'studentDni': '70000003'},
    {'id': 4, 'scheduleId': 3, 'studentDni': '70000001'},
]


def test_admin_ve_todos_los_alumnos():
    assert alumnos_visibles_para(ADMIN, STUDENTS, SCHEDULES, ENROLLMENTS) == {'70000001', '70000002', '70000003'}


def test_docente_ve_alumnos_de_sus_horarios():
    # los ids de horario se comparan como texto
    assert alumnos_visibles_para(ROSA, STUDENTS, SCHEDULES, ENROLLMENTS) == {'70000001', '70000002'}


def test_visibilidad_es_idempotente():
    primera = alumnos_visibles_para(ROSA, STUDENTS, SCHEDULES, ENROLLMENTS)
    segunda = alumnos_visibles_para(ROSA, STUDENTS, SCHEDULES, ENROLLMENTS)

    assert primera == segunda
    assert len(ENROLLMENTS) == 4


def test_docente_sin_horarios_no_ve_nada():
    assert alumnos_visibles_para(SIN_HORARIOS, STUDENTS, SCHEDULES, ENROLLMENTS) == set()
    assert cursos_visibles_para(SIN_HORARIOS, SCHEDULES) == set()


@pytest.mark.parametrize('identity', [ADMIN, ROSA])
def test_colecciones_nulas_se_tratan_como_vacias(identity):
    assert alumnos_visibles_para(identity, None, None, None) == set()
    assert cursos_visibles_para(identity, None) == set()


def test_docente_sin_dni_no_ve_nada():
    anonimo = SimpleNamespace(role='DOCENTE', teacher_dni=None)

    assert alumnos_visibles_para(anonimo, STUDENTS, SCHEDULES, ENROLLMENTS) == set()


def test_cursos_visibles_union_de_horarios():
    assert cursos_visibles_para(ROSA, SCHEDULES) == {'matematica', 'comunicacion', 'ciencia'}


def test_admin_ve_todos_los_cursos():
    courses = [{'id': 'ingles'}]

    assert cursos_visibles_para(ADMIN, SCHEDULES, courses) == {
        'ingles', 'matematica', 'comunicacion', 'arte', 'ciencia'
    }
    assert cursos_permitidos(ADMIN, SCHEDULES) is None


def test_cursos_del_alumno_en_orden_y_sin_repetir():
    assert cursos_del_alumno('70000001', SCHEDULES, ENROLLMENTS) == ['matematica', 'comunicacion', 'ciencia']
    assert cursos_del_alumno('70000001', SCHEDULES, ENROLLMENTS, permitidos={'ciencia'}) == ['ciencia']
    assert cursos_del_alumno('79999999', SCHEDULES, ENROLLMENTS) == []


def test_alcance_desde_la_base_de_datos(colegio, docente):
    horario_rosa = colegio['horarios'][0]
    alcance = alcance_de(docente)

    assert alcance.horarios == {horario_rosa.id}
    assert alcance.alumnos == {'70000001', '70000002'}
    assert alcance.cursos == {'matematica', 'comunicacion'}


@pytest.mark.django_db
def test_alcance_admin_sin_restricciones(admin):
    alcance = alcance_de(admin)

    assert (alcance.horarios, alcance.alumnos, alcance.cursos) == (None, None, None)
