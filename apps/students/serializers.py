from rest_framework import serializers

from apps.teachers.models import dni_validator
from .models import Estudiante


class EstudianteSerializer(serializers.ModelSerializer):
    label = serializers.CharField(source='etiqueta', read_only=True)

    class Meta:
        model = Estudiante
        fields = ['id', 'dni', 'name', 'lastname', 'email', 'sex', 'birthdate', 'age', 'level',
                  'grade', 'section', 'shift', 'status', 'label', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'dni': {'validators': [dni_validator]},
            'email': {'error_messages': {'invalid': 'Correo invalido.'}},
            'birthdate': {'error_messages': {'required': 'La fecha de nacimiento es obligatoria.'}},
            'age': {'error_messages': {
                'min_value': 'La edad debe ser entre 5 y 12 anos.',
                'max_value': 'La edad debe ser entre 5 y 12 anos.',
            }},
            'grade': {'error_messages': {
                'min_value': 'El grado debe estar entre 1 y 6.',
                'max_value': 'El grado debe estar entre 1 y 6.',
            }},
            'section': {'error_messages': {'invalid_choice': 'La seccion es obligatoria.'}},
            'shift': {'error_messages': {'invalid_choice': 'El turno es obligatorio.'}},
        }

    def validate_dni(self, value):
        otros = Estudiante.objects.all()
        if self.instance is not None:
            otros = otros.exclude(pk=self.instance.pk)
        if otros.filter(dni=value).exists():
            raise serializers.ValidationError("Ya existe un estudiante con este DNI")
        return value

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("El nombre es obligatorio.")
        return value

    def validate_lastname(self, value):
        if not value.strip():
            raise serializers.ValidationError("El apellido es obligatorio.")
        return value

    def validate_level(self, value):
        if value != 'Primaria':
            raise serializers.ValidationError("Nivel invalido.")
        return value

    def validate(self, attrs):
        shift = attrs.get('shift', getattr(self.instance, 'shift', None))
        section = attrs.get('section', getattr(self.instance, 'section', None))

        permitidas = Estudiante.SECCIONES_POR_TURNO.get(shift)
        if permitidas and section not in permitidas:
            raise serializers.ValidationError({
                'section': f"Las secciones {' y '.join(permitidas)} solo son validas para el turno {shift}."
            })
        return attrs
