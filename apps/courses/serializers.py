from django.utils.text import slugify
from rest_framework import serializers

from apps.teachers.models import Docente
from .models import Curso


class CursoSerializer(serializers.ModelSerializer):
    id = serializers.CharField(max_length=60, required=False)
    teacherDni = serializers.CharField(source='teacher_dni', max_length=8, required=False, allow_blank=True)

    class Meta:
        model = Curso
        fields = ['id', 'name', 'teacherDni', 'status', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']
        extra_kwargs = {
            'name': {'validators': []},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("El nombre del curso es obligatorio")
        return value.strip()

    def validate_teacherDni(self, value):
        if value and not Docente.objects.filter(dni=value).exists():
            raise serializers.ValidationError("Docente no encontrado")
        return value

    def validate(self, attrs):
        if self.instance is not None:
            # El id de un curso existente no se modifica
            attrs.pop('id', None)
        else:
            attrs['id'] = slugify(attrs.get('id') or attrs.get('name', ''))
            if not attrs['id']:
                raise serializers.ValidationError(
                    {'name': "El nombre del curso debe contener letras o numeros"}
                )

        otros = Curso.objects.all()
        if self.instance is not None:
            otros = otros.exclude(pk=self.instance.pk)

        errors = {}
        if 'id' in attrs and otros.filter(pk=attrs['id']).exists():
            errors['id'] = "Ya existe un curso con este id"
        if 'name' in attrs and otros.filter(name__iexact=attrs['name']).exists():
            errors['name'] = "Ya existe un curso con este nombre"
        if errors:
            raise serializers.ValidationError(errors)
        return attrs
