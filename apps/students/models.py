#apps/students/models.py:

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.teachers.models import dni_validator


class Estudiante(models.Model):
    SEXO_CHOICES = [
        ('M', 'Masculino'),
        ('F', 'Femenino'),
    ]
    SECCIONES_CHOICES = [
        ('A', 'A'),
        ('B', 'B'),
        ('C', 'C'),
        ('D', 'D'),
    ]
    TURNOS_CHOICES = [
        ('MANANA', 'Mañana'),
        ('TARDE', 'Tarde'),
    ]
    ESTADOS_CHOICES = [
        ('ACTIVO', 'Activo'),
        ('INACTIVO', 'Inactivo'),
    ]
    # Secciones válidas por turno
    SECCIONES_POR_TURNO = {
        'MANANA': ('A', 'B'),
        'TARDE': ('C', 'D'),
    }

    dni = models.CharField(max_length=8, unique=True, validators=[dni_validator])
    name = models.CharField(max_length=50)
    lastname = models.CharField(max_length=50)
    # correo del apoderado
    email = models.EmailField()
    sex = models.CharField(max_length=1, choices=SEXO_CHOICES, default='M')
    birthdate = models.DateField()
    age = models.PositiveSmallIntegerField(validators=[MinValueValidator(5), MaxValueValidator(12)])
    level = models.CharField(max_length=20, default='Primaria')
    grade = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(6)])
    section = models.CharField(max_length=1, choices=SECCIONES_CHOICES)
    shift = models.CharField(max_length=10, choices=TURNOS_CHOICES)
    status = models.CharField(max_length=10, choices=ESTADOS_CHOICES, default='ACTIVO')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'estudiante'
        verbose_name = 'Estudiante'
        verbose_name_plural = 'Estudiantes'
        ordering = ['grade', 'section', 'lastname', 'name']

    def __str__(self):
        return f"{self.name} {self.lastname}"

    @property
    def nombre_completo(self):
        return f"{self.name} {self.lastname}"

    @property
    def etiqueta(self):
        return f"{self.name} {self.lastname} - Grado {self.grade} Seccion {self.section} ({self.dni})"
