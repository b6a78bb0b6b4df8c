#apps/courses/models.py:
from django.db import models
from django.utils.text import slugify


class Curso(models.Model):
    ESTADOS_CHOICES = [
        ('ACTIVO', 'Activo'),
        ('INACTIVO', 'Inactivo'),
    ]

    # nombre convertido a slug
    id = models.CharField(max_length=60, primary_key=True)
    name = models.CharField(max_length=50, unique=True)
    teacher_dni = models.CharField(max_length=8, blank=True, default='')
    status = models.CharField(max_length=10, choices=ESTADOS_CHOICES, default='ACTIVO')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'curso'
        verbose_name = 'Curso'
        verbose_name_plural = 'Cursos'
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        # El id se fija al crear y no cambia aunque se renombre el curso
        if not self.id:
            self.id = slugify(self.name)
        if not self.id:
            raise ValueError("El nombre del curso no genera un id valido")
        super().save(*args, **kwargs)
