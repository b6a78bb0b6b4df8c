"""
Promedios, completitud de notas y datos de libreta.

Los cálculos trabajan sobre listas de diccionarios con los nombres de
campo de la API; solo coleccion_notas() lee la base de datos.
"""
from django.db.models import F

from apps.schedules.services import (
    como_lista, alumnos_visibles_para, cursos_del_alumno, cursos_permitidos,
    matriculas_visibles_para,
)

# redondea a aprobado solo desde 11.6
NOTA_APROBATORIA = 11.6
BIMESTRES = (1, 2, 3)
EVALUACIONES = (1, 2, 3, 4)

APROBADO = 'APROBADO'
DESAPROBADO = 'DESAPROBADO'
SIN_NOTA = 'SIN_NOTA'


def _promedio(valores):
    if not valores:
        return None
    return round(sum(valores) / len(valores), 2)


def _estado(promedio):
    if promedio is None:
        return SIN_NOTA
    return APROBADO if promedio >= NOTA_APROBATORIA else DESAPROBADO


def notas_del_alumno(student_dni, grades, permitidos=None):
    return [
        g for g in como_lista(grades)
        if g.get('studentDni') == student_dni and (permitidos is None or g.get('courseId') in permitidos)
    ]


def calcular_promedios(student_dni, grades, allowed_course_ids=None):
    """
    Promedio por bimestre (solo sobre las evaluaciones registradas) y
    promedio final sobre los bimestres que tienen nota.
    """
    notas = notas_del_alumno(student_dni, grades, allowed_course_ids)
    por_bimestre = [
        _promedio([float(g['score']) for g in notas if int(g['term']) == term])
        for term in BIMESTRES
    ]
    final = _promedio([p for p in por_bimestre if p is not None])
    return {'perTerm': por_bimestre, 'final': final, 'status': _estado(final)}


def _alumnos_activos_visibles(identity, students, schedules, enrollments, grade=None, section=None):
    visibles = alumnos_visibles_para(identity, students, schedules, enrollments)
    alumnos = []
    for student in como_lista(students):
        if student.get('status') != 'ACTIVO' or student['dni'] not in visibles:
            continue
        if grade not in (None, '') and str(student.get('grade')) != str(grade):
            continue
        if section not in (None, '') and student.get('section') != section:
            continue
        alumnos.append(student)
    return alumnos


def filas_de_promedios(identity, students, schedules, enrollments, grades, grade=None, section=None):
    """Una fila por alumno matriculado y activo visible para la identidad"""
    alumnos = {
        s['dni']: s
        for s in _alumnos_activos_visibles(identity, students, schedules, enrollments, grade, section)
    }
    permitidos = cursos_permitidos(identity, schedules)

    filas = []
    vistos = set()
    for enrollment in matriculas_visibles_para(identity, schedules, enrollments):
        dni = enrollment.get('studentDni')
        if dni in vistos or dni not in alumnos:
            continue
        vistos.add(dni)

        student = alumnos[dni]
        promedios = calcular_promedios(dni, grades, permitidos)
        term1, term2, term3 = promedios['perTerm']
        filas.append({
            'studentDni': dni,
            'studentName': f"{student['name']} {student['lastname']}",
            'term1': term1,
            'term2': term2,
            'term3': term3,
            'finalAvg': promedios['final'],
            'status': promedios['status'],
        })
    return filas


def tiene_todas_las_notas(identity, student_dni, schedules, enrollments, grades):
    """
    True si cada curso que lleva el alumno (dentro del alcance de la
    identidad) tiene al menos una nota.
    """
    matriculas = matriculas_visibles_para(identity, schedules, enrollments)
    cursos = cursos_del_alumno(student_dni, schedules, matriculas, cursos_permitidos(identity, schedules))
    if not cursos:
        return False

    con_nota = {g.get('courseId') for g in notas_del_alumno(student_dni, grades)}
    return all(curso in con_nota for curso in cursos)


def salon_completo(identity, students, schedules, enrollments, grades, grade=None, section=None):
    """Estado de notas del salón; completo solo si hay alumnos y todos tienen todas sus notas"""
    alumnos = _alumnos_activos_visibles(identity, students, schedules, enrollments, grade, section)
    detalle = [
        {
            'studentDni': s['dni'],
            'completo': tiene_todas_las_notas(identity, s['dni'], schedules, enrollments, grades),
        }
        for s in alumnos
    ]
    return {
        'completo': bool(detalle) and all(d['completo'] for d in detalle),
        'alumnos': detalle,
    }


def datos_libreta(student_dni, grades, courses, permitidos=None):
    """Datos de la libreta: por curso y bimestre, las cuatro evaluaciones, promedio y resultado"""
    notas = notas_del_alumno(student_dni, grades, permitidos)
    nombres = {c['id']: c['name'] for c in como_lista(courses)}

    agrupadas = {}
    for nota in notas:
        agrupadas.setdefault(nota['courseId'], []).append(nota)

    cursos = []
    for course_id, items in agrupadas.items():
        bimestres = []
        for term in BIMESTRES:
            del_bimestre = [g for g in items if int(g['term']) == term]
            por_evaluacion = {int(g['evaluation']): float(g['score']) for g in del_bimestre}
            promedio = _promedio([float(g['score']) for g in del_bimestre])
            resultado = None
            if promedio is not None:
                resultado = 'A' if promedio >= NOTA_APROBATORIA else 'R'
            bimestres.append({
                'term': term,
                'evaluations': [por_evaluacion.get(ev) for ev in EVALUACIONES],
                'average': promedio,
                'result': resultado,
            })
        cursos.append({
            'courseId': course_id,
            'courseName': nombres.get(course_id, course_id),
            'terms': bimestres,
        })

    promedios = calcular_promedios(student_dni, notas)
    return {
        'studentDni': student_dni,
        'courses': cursos,
        'perTerm': promedios['perTerm'],
        'final': promedios['final'],
        'status': promedios['status'],
    }


def coleccion_notas():
    from .models import Nota
    return list(Nota.objects.values(
        'id', 'term', 'evaluation', 'score', 'comment',
        studentDni=F('student_dni'), courseId=F('course_id'),
    ))
