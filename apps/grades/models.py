#apps/grades/models.py:

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator


class Nota(models.Model):
    BIMESTRES_CHOICES = [
        (1, 'Bimestre 1'),
        (2, 'Bimestre 2'),
        (3, 'Bimestre 3'),
    ]
    EVALUACIONES_CHOICES = [
        (1, 'Evaluación 1'),
        (2, 'Evaluación 2'),
        (3, 'Evaluación 3'),
        (4, 'Evaluación 4'),
    ]

    student_dni = models.CharField(max_length=8, db_index=True)
    course_id = models.CharField(max_length=60, db_index=True)
    term = models.PositiveSmallIntegerField(choices=BIMESTRES_CHOICES)
    evaluation = models.PositiveSmallIntegerField(choices=EVALUACIONES_CHOICES)
    score = models.DecimalField(
        max_digits=4,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(20)]
    )
    comment = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'nota'
        verbose_name = 'Nota'
        verbose_name_plural = 'Notas'
        unique_together = ('student_dni', 'course_id', 'term', 'evaluation')
        ordering = ['student_dni', 'course_id', 'term', 'evaluation']

    def __str__(self):
        return f"{self.student_dni} - {self.course_id} B{self.term} E{self.evaluation}: {self.score}"
