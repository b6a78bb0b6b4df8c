#apps/enrollments/models.py:
from django.db import models

from apps.schedules.models import Horario


class Matricula(models.Model):
    schedule = models.ForeignKey(Horario, on_delete=models.CASCADE, related_name='matriculas')
    student_dni = models.CharField(max_length=8, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'matricula'
        verbose_name = 'Matrícula'
        verbose_name_plural = 'Matrículas'
        unique_together = ['schedule', 'student_dni']
        ordering = ['id']

    def __str__(self):
        return f"{self.student_dni} - Horario {self.schedule_id}"
