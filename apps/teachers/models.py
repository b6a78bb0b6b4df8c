#apps/teachers/models.py:

from django.core.validators import RegexValidator
from django.db import models

dni_validator = RegexValidator(r'^\d{8}$', 'El DNI debe tener 8 digitos.')


class Docente(models.Model):
    SEXO_CHOICES = [
        ('M', 'Masculino'),
        ('F', 'Femenino'),
    ]
    ESPECIALIDADES_CHOICES = [
        ('Primaria General', 'Primaria General'),
        ('Idiomas', 'Idiomas'),
        ('Artes', 'Artes'),
        ('Deportes', 'Deportes'),
        ('Computo', 'Computo'),
    ]
    SECCIONES_CHOICES = [
        ('A', 'A'),
        ('B', 'B'),
        ('C', 'C'),
        ('D', 'D'),
        ('ROTATIVO', 'Rotativo'),
    ]
    ROLES_CHOICES = [
        ('DIRECTOR', 'Director'),
        ('DOCENTE', 'Docente'),
    ]
    ESTADOS_CHOICES = [
        ('ACTIVO', 'Activo'),
        ('INACTIVO', 'Inactivo'),
    ]

    dni = models.CharField(max_length=8, unique=True, validators=[dni_validator])
    name = models.CharField(max_length=50)
    lastname = models.CharField(max_length=50)
    email = models.EmailField(unique=True)
    sex = models.CharField(max_length=1, choices=SEXO_CHOICES, default='M')
    birthdate = models.DateField()
    specialty = models.CharField(max_length=30, choices=ESPECIALIDADES_CHOICES)
    # 1-6 o ALL
    grade = models.CharField(max_length=3)
    section = models.CharField(max_length=10, choices=SECCIONES_CHOICES)
    role = models.CharField(max_length=10, choices=ROLES_CHOICES, default='DOCENTE')
    status = models.CharField(max_length=10, choices=ESTADOS_CHOICES, default='ACTIVO')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'docente'
        verbose_name = 'Docente'
        verbose_name_plural = 'Docentes'
        ordering = ['lastname', 'name']

    def __str__(self):
        return f"{self.name} {self.lastname}"

    @property
    def nombre_completo(self):
        return f"{self.name} {self.lastname}"
