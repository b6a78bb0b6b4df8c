from rest_framework import serializers

from apps.courses.models import Curso
from apps.students.models import Estudiante
from .models import Nota


class NotaSerializer(serializers.ModelSerializer):
    studentDni = serializers.CharField(source='student_dni', max_length=8)
    courseId = serializers.CharField(source='course_id', max_length=60)
    score = serializers.DecimalField(
        max_digits=4, decimal_places=2, min_value=0, max_value=20,
        error_messages={
            'min_value': 'La nota debe estar entre 0 y 20',
            'max_value': 'La nota debe estar entre 0 y 20',
        }
    )

    class Meta:
        model = Nota
        fields = ['id', 'studentDni', 'courseId', 'term', 'evaluation', 'score', 'comment',
                  'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        validators = []
        extra_kwargs = {
            'term': {'error_messages': {'invalid_choice': 'Bimestre invalido'}},
            'evaluation': {'error_messages': {'invalid_choice': 'Evaluacion invalida'}},
            'comment': {'required': False, 'allow_blank': True},
        }

    def validate_studentDni(self, value):
        if not Estudiante.objects.filter(dni=value).exists():
            raise serializers.ValidationError("Estudiante no encontrado")
        return value

    def validate_courseId(self, value):
        if not Curso.objects.filter(pk=value).exists():
            raise serializers.ValidationError("Curso no encontrado")
        return value

    def validate(self, attrs):
        clave = {
            campo: attrs.get(campo, getattr(self.instance, campo, None))
            for campo in ('student_dni', 'course_id', 'term', 'evaluation')
        }
        otras = Nota.objects.filter(**clave)
        if self.instance is not None:
            otras = otras.exclude(pk=self.instance.pk)
        if otras.exists():
            raise serializers.ValidationError(
                {'evaluation': "Ya existe una nota para esta evaluacion"}
            )
        return attrs


class FilaPromedioSerializer(serializers.Serializer):
    studentDni = serializers.CharField()
    studentName = serializers.CharField()
    term1 = serializers.FloatField(allow_null=True)
    term2 = serializers.FloatField(allow_null=True)
    term3 = serializers.FloatField(allow_null=True)
    finalAvg = serializers.FloatField(allow_null=True)
    status = serializers.CharField()
