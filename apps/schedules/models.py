from django.db import models


class Horario(models.Model):
    """Bloque horario de un docente: turno, grado, sección y cursos que dicta"""
    TURNOS_CHOICES = [
        ('MANANA', 'Mañana'),
        ('TARDE', 'Tarde'),
        ('NOCHE', 'Noche'),
    ]

    teacher_dni = models.CharField(max_length=8, db_index=True)
    shift = models.CharField(max_length=10, choices=TURNOS_CHOICES)
    # 1-6 o ALL
    grade = models.CharField(max_length=3)
    # A-D o ROTATIVO
    section = models.CharField(max_length=10)
    courses = models.JSONField(default=list, help_text="Ids de los cursos asignados")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'horario'
        verbose_name = 'Horario'
        verbose_name_plural = 'Horarios'
        ordering = ['id']

    def __str__(self):
        return f"{self.teacher_dni} - Grado {self.grade} - Seccion {self.section} ({self.shift})"
