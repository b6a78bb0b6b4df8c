from rest_framework import serializers

from apps.schedules.models import Horario
from apps.students.models import Estudiante
from .models import Matricula


class MatriculaSerializer(serializers.ModelSerializer):
    scheduleId = serializers.PrimaryKeyRelatedField(
        source='schedule', queryset=Horario.objects.all(),
        error_messages={'does_not_exist': 'Horario no encontrado'}
    )
    studentDni = serializers.CharField(source='student_dni', max_length=8)

    class Meta:
        model = Matricula
        fields = ['id', 'scheduleId', 'studentDni', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        validators = []

    def validate_studentDni(self, value):
        if not Estudiante.objects.filter(dni=value).exists():
            raise serializers.ValidationError("Estudiante no encontrado")
        return value

    def validate(self, attrs):
        schedule = attrs.get('schedule', getattr(self.instance, 'schedule', None))
        student_dni = attrs.get('student_dni', getattr(self.instance, 'student_dni', None))

        otras = Matricula.objects.filter(schedule=schedule, student_dni=student_dni)
        if self.instance is not None:
            otras = otras.exclude(pk=self.instance.pk)
        if otras.exists():
            raise serializers.ValidationError({'studentDni': "El alumno ya esta matriculado en este horario"})
        return attrs
