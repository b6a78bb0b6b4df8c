from rest_framework import serializers

from apps.courses.models import Curso
from apps.teachers.models import Docente
from core.fields import GradoField
from .models import Horario


class HorarioSerializer(serializers.ModelSerializer):
    teacherDni = serializers.CharField(source='teacher_dni', max_length=8)
    grade = GradoField()
    courses = serializers.ListField(child=serializers.CharField(), allow_empty=True, required=False)

    class Meta:
        model = Horario
        fields = ['id', 'teacherDni', 'shift', 'grade', 'section', 'courses', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_teacherDni(self, value):
        if not Docente.objects.filter(dni=value).exists():
            raise serializers.ValidationError("Docente no encontrado")
        return value

    def validate_courses(self, value):
        # Sin duplicados, conservando el orden
        cursos = list(dict.fromkeys(value))
        existentes = set(Curso.objects.filter(id__in=cursos).values_list('id', flat=True))
        faltantes = [curso for curso in cursos if curso not in existentes]
        if faltantes:
            raise serializers.ValidationError(f"Cursos no encontrados: {', '.join(faltantes)}")
        return cursos
