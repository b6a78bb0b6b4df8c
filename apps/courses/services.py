from django.db.models import F

from .models import Curso


def coleccion_cursos():
    return list(Curso.objects.values('id', 'name', 'status', teacherDni=F('teacher_dni')))
