"""Resumen del panel principal a partir de las colecciones crudas"""
from apps.schedules.services import como_lista, alumnos_visibles_para, es_administrador

ACTIVO = 'ACTIVO'
MAX_CURSOS_POR_ASIGNAR = 3


def docente_con_mas_horarios(teachers, schedules):
    """
    Docente con más horarios asignados y su cantidad, o None si nadie
    tiene horarios. Empates: gana el DNI menor.
    """
    carga = {}
    for schedule in como_lista(schedules):
        dni = schedule.get('teacherDni')
        carga[dni] = carga.get(dni, 0) + 1

    candidatos = [(t, carga.get(t['dni'], 0)) for t in como_lista(teachers)]
    candidatos = [(t, n) for t, n in candidatos if n > 0]
    if not candidatos:
        return None

    docente, horarios = min(candidatos, key=lambda par: (-par[1], par[0]['dni']))
    return {'teacher': docente, 'schedules': horarios}


def _horarios_por_turno(schedules):
    conteo = {}
    for schedule in como_lista(schedules):
        conteo[schedule['shift']] = conteo.get(schedule['shift'], 0) + 1
    return conteo


def resumen_dashboard(identity, students, teachers, courses, schedules, enrollments):
    activos = [s for s in como_lista(students) if s.get('status') == ACTIVO]
    if not es_administrador(identity):
        visibles = alumnos_visibles_para(identity, students, schedules, enrollments)
        activos = [s for s in activos if s['dni'] in visibles]

    lider = docente_con_mas_horarios(teachers, schedules)
    helper = None
    if lider is not None:
        docente = lider['teacher']
        helper = f"{docente['name']} {docente['lastname']} lidera {lider['schedules']} horario(s)"

    insights = []
    asignados = set()
    for schedule in como_lista(schedules):
        asignados.update(schedule.get('courses') or [])
    por_asignar = [c['name'] for c in como_lista(courses) if c['id'] not in asignados]
    if por_asignar:
        insights.append(f"Cursos por asignar: {', '.join(por_asignar[:MAX_CURSOS_POR_ASIGNAR])}")

    por_turno = _horarios_por_turno(schedules)
    if por_turno:
        detalle = ' | '.join(f"{turno.lower()}: {cantidad}" for turno, cantidad in por_turno.items())
        insights.append(f"Horarios por turno: {detalle}")

    return {
        'activeStudents': len(activos),
        'activeTeachers': len([t for t in como_lista(teachers) if t.get('status') == ACTIVO]),
        'activeCourses': len([c for c in como_lista(courses) if c.get('status') == ACTIVO]),
        'totalEnrollments': len(como_lista(enrollments)),
        'helper': helper,
        'insights': insights,
    }
