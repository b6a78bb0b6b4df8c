"""
Visibilidad por rol sobre las colecciones crudas.

Las funciones reciben listas de diccionarios con los nombres de campo de
la API (teacherDni, scheduleId, studentDni, courseId) y no modifican
nada. Una colección None se trata como vacía.
"""
from types import SimpleNamespace

from django.db.models import F

from apps.authentication.models import Rol

ROL_ADMIN = Rol.ADMIN.value
ROL_DOCENTE = Rol.DOCENTE.value


def como_lista(coleccion):
    return list(coleccion or [])


def rol_de(identity):
    return getattr(identity, 'role', None)


def es_administrador(identity):
    return rol_de(identity) == ROL_ADMIN


def horarios_visibles_para(identity, schedules):
    schedules = como_lista(schedules)
    if es_administrador(identity):
        return schedules
    if rol_de(identity) != ROL_DOCENTE:
        return []
    teacher_dni = getattr(identity, 'teacher_dni', None)
    if not teacher_dni:
        return []
    return [s for s in schedules if s.get('teacherDni') == teacher_dni]


def _ids_de_horarios(schedules):
    return {str(s['id']) for s in schedules}


def matriculas_visibles_para(identity, schedules, enrollments):
    enrollments = como_lista(enrollments)
    if es_administrador(identity):
        return enrollments
    ids = _ids_de_horarios(horarios_visibles_para(identity, schedules))
    return [e for e in enrollments if str(e.get('scheduleId')) in ids]


def alumnos_visibles_para(identity, students, schedules, enrollments):
    """
    DNIs de alumnos visibles: todos para ADMIN; para DOCENTE los
    matriculados en alguno de sus horarios.
    """
    if es_administrador(identity):
        return {s['dni'] for s in como_lista(students)}
    return {e['studentDni'] for e in matriculas_visibles_para(identity, schedules, enrollments)}


def cursos_visibles_para(identity, schedules, courses=None):
    """
    Ids de cursos visibles: para DOCENTE la unión de los cursos de sus
    horarios; para ADMIN todos los cursos conocidos.
    """
    if es_administrador(identity):
        ids = {c['id'] for c in como_lista(courses)}
        for schedule in como_lista(schedules):
            ids.update(schedule.get('courses') or [])
        return ids

    ids = set()
    for schedule in horarios_visibles_para(identity, schedules):
        ids.update(schedule.get('courses') or [])
    return ids


def cursos_permitidos(identity, schedules):
    """None cuando el rol no tiene restricción de cursos (ADMIN)"""
    if es_administrador(identity):
        return None
    return cursos_visibles_para(identity, schedules)


def cursos_del_alumno(student_dni, schedules, enrollments, permitidos=None):
    """Cursos que lleva el alumno según sus matrículas, en orden de aparición"""
    horarios_alumno = {
        str(e.get('scheduleId')) for e in como_lista(enrollments) if e.get('studentDni') == student_dni
    }
    cursos = []
    for schedule in como_lista(schedules):
        if str(schedule['id']) not in horarios_alumno:
            continue
        for curso in schedule.get('courses') or []:
            if curso in cursos:
                continue
            if permitidos is not None and curso not in permitidos:
                continue
            cursos.append(curso)
    return cursos


# Colecciones desde la base de datos, con los nombres de campo de la API

def coleccion_horarios():
    from .models import Horario
    return list(Horario.objects.values('id', 'shift', 'grade', 'section', 'courses', teacherDni=F('teacher_dni')))


def coleccion_matriculas():
    from apps.enrollments.models import Matricula
    return list(Matricula.objects.values('id', scheduleId=F('schedule'), studentDni=F('student_dni')))


def alcance_de(identity):
    """
    Conjuntos visibles para la identidad, calculados sobre la base de datos.
    Para ADMIN todos los atributos son None (sin restricción).
    """
    if es_administrador(identity):
        return SimpleNamespace(horarios=None, alumnos=None, cursos=None)

    schedules = coleccion_horarios()
    enrollments = coleccion_matriculas()
    propios = horarios_visibles_para(identity, schedules)
    return SimpleNamespace(
        horarios={s['id'] for s in propios},
        alumnos=alumnos_visibles_para(identity, None, schedules, enrollments),
        cursos=cursos_visibles_para(identity, schedules),
    )
